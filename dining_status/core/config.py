import os


class Settings:
    # Upstream fetching
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "10"))
    MAX_REDIRECTS: int = int(os.getenv("MAX_REDIRECTS", "3"))
    USER_AGENT: str = os.getenv("USER_AGENT", "BruinCoinDiningStatus/1.0")
    ACTIVITY_BASE_URL: str = os.getenv(
        "ACTIVITY_BASE_URL",
        "https://dining.ucla.edu/wp-content/plugins/activity-meter/activity_ajax.php?location_id=",
    )

    # Classification
    BUSY_THRESHOLD: int = int(os.getenv("BUSY_THRESHOLD", "70"))

    # Development
    USE_MOCK: bool = os.getenv("USE_MOCK", "0").lower() in ("1", "true", "yes")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
