"""Application settings and environment variables."""

import os
from decimal import Decimal
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

_CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))


class Settings:
    PHARMACY_NAME: str = os.getenv("PHARMACY_NAME", "PharmaCare Pharmacy")
    PHARMACY_ADDRESS: str = os.getenv("PHARMACY_ADDRESS", "42 Health Street, Wellness City, ST 10001")
    PHARMACY_TIMEZONE: str = os.getenv("PHARMACY_TIMEZONE", "UTC")  # Used to decide what "today" is

    # Billing settings
    TAX_RATE: Decimal = Decimal(os.getenv("TAX_RATE", "0.10"))
    INVOICE_DUE_DAYS: int = int(os.getenv("INVOICE_DUE_DAYS", "30"))
    INVOICE_NUMBER_DATE_SOURCE: str = os.getenv("INVOICE_NUMBER_DATE_SOURCE", "bill_date")  # or "generation_date"
    DEFAULT_PAYMENT_METHOD: str = os.getenv("DEFAULT_PAYMENT_METHOD", "Cash")
    CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "$")

    # Inventory alert settings
    EXPIRY_THRESHOLD_DAYS: int = int(os.getenv("EXPIRY_THRESHOLD_DAYS", "90"))
    ALTERNATIVES_MAX_ITEMS: int = int(os.getenv("ALTERNATIVES_MAX_ITEMS", "3"))
    ALERT_REPORT_TIME: str = os.getenv("ALERT_REPORT_TIME", "08:00")

    SEED_DATA_PATH: str = os.getenv("SEED_DATA_PATH", os.path.join(_CONFIG_DIR, "seed_data.json"))

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE")


settings = Settings()
