# src/config.py

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    booking_api_url: str
    approval_api_url: str
    external_api_timeout: float
    booking_max_attempts: int
    barcode_max_draws: int
    log_level: str


def get_settings() -> Settings:
    return Settings(
        booking_api_url=os.getenv("BOOKING_API_URL", "https://api.site.com/book"),
        approval_api_url=os.getenv("APPROVAL_API_URL", "https://api.site.com/approve"),
        external_api_timeout=float(os.getenv("EXTERNAL_API_TIMEOUT", "10.0")),
        booking_max_attempts=int(os.getenv("BOOKING_MAX_ATTEMPTS", "3")),
        barcode_max_draws=int(os.getenv("BARCODE_MAX_DRAWS", "1000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
