from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[2]
DATA_DIR = BASE_DIR / "data"
PAYLOAD_PATH = DATA_DIR / "recession_prediction_data.json"

LOG_LEVEL = "INFO"

# Forecast horizons in canonical display order, with lead time in months.
HORIZON_MONTHS = {
    "1M": 1,
    "3M": 3,
    "6M": 6,
    "12M": 12,
}
HORIZONS = tuple(HORIZON_MONTHS)
HORIZON_LABELS = {
    "1M": "1 Month",
    "3M": "3 Months",
    "6M": "6 Months",
    "12M": "12 Months",
}

VIEWS = ("current", "historical", "comparison")
VIEW_LABELS = {
    "current": "Current Predictions",
    "historical": "Historical Performance",
    "comparison": "Horizon Comparison",
}

DEFAULT_HORIZON = "6M"
DEFAULT_VIEW = "current"
DEFAULT_PERIOD = "last12"

# Named historical windows. A window is either a tail of `last_n` records,
# an inclusive literal date range, or everything.
HISTORICAL_PERIODS = [
    {"id": "last12", "name": "12 Months Before Latest Data", "last_n": 12},
    {"id": "covid", "name": "COVID-19 (2020)", "start": "2020-01-01", "end": "2020-12-31"},
    {"id": "gfc", "name": "Financial Crisis (2007-2009)", "start": "2007-10-01", "end": "2009-06-30"},
    {"id": "dotcom", "name": "DotCom Bubble (2001)", "start": "2001-01-01", "end": "2002-01-31"},
    {"id": "all", "name": "All Historical Data"},
]

HIGH_RISK_THRESHOLD = 0.70
MODERATE_RISK_THRESHOLD = 0.40
DEFAULT_ALERT_THRESHOLD = 0.50

RISK_MESSAGES = {
    "selection_required": "Please select at least one model to view the risk assessment.",
    "high": (
        "High Risk: Multiple models indicate significant recession probability. "
        "Consider defensive economic positioning."
    ),
    "moderate": (
        "Moderate Risk: Some models show elevated recession chances. "
        "Monitor economic indicators closely."
    ),
    "low": "Low Risk: Most models indicate low probability of recession in the selected time horizon.",
}

HORIZON_INSIGHT = (
    "This chart compares how recession probabilities change across different forecast horizons. "
    "Rising lines indicate increasing recession risk as the time horizon extends, while falling "
    "lines suggest reduced risk over time."
)

# Demo model roster used by the synthetic payload generator.
DEMO_MODELS = [
    {"id": "rf", "name": "Random Forest", "color": "#8884d8"},
    {"id": "xgb", "name": "XGBoost", "color": "#82ca9d"},
    {"id": "lstm", "name": "LSTM", "color": "#ffc658"},
    {"id": "logit", "name": "Logistic Regression", "color": "#ff7300"},
    {"id": "ensemble", "name": "Ensemble", "color": "#0088fe"},
]

# NBER recession months used to label synthetic history.
NBER_RECESSIONS = [
    ("2001-03-01", "2001-11-30"),
    ("2007-12-01", "2009-06-30"),
    ("2020-02-01", "2020-04-30"),
]

SYNTHETIC_START_DATE = "2000-01-01"
SYNTHETIC_SEED = 42
REPORTING_LAG_MONTHS = 3

# FRED series the upstream models were trained on.
DATA_SOURCES = {
    "USREC": "NBER Recession Indicators",
    "UNRATE": "Unemployment Rate",
    "AHETPI": "Average Hourly Earnings",
    "PERMIT": "New Housing Units Authorized",
    "AAA10Y": "Corporate Bond Yield Spread",
    "M2REAL": "M2 Money Stock",
    "CPIAUCSL": "Consumer Price Index",
    "DFF": "Federal Funds Rate",
    "INDPRO": "Industrial Production",
    "T10Y2Y": "Treasury Yield Spread",
    "IC4WSA": "Initial Claims",
    "WTISPLC": "WTI Crude Oil Price",
    "MTSDS133FMS": "Federal Surplus/Deficit",
    "S&P500CHNG": "S&P 500 Percentage Change",
}
