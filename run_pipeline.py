from src.recession_dashboard.logging_config import configure_logging
from src.recession_dashboard.pipeline import build_payload


if __name__ == "__main__":
    configure_logging()
    summary = build_payload()
    print("Payload written.")
    for key, value in summary.items():
        print(f"{key}: {value}")
