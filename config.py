# config.py
"""
Application configuration.

All values come from the environment (optionally a local .env file).
"""
import logging
import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

# Load .env
load_dotenv()


def _get_int(name: str, default: int) -> int:
     value = os.getenv(name)
     if value is None or value == "":
          return default
     return int(value)


# Database
DB_SERVER = os.getenv("DB_SERVER")
DB_PORT = os.getenv("DB_PORT", "1433")
DB_USER = os.getenv("DB_USER")
DB_PASS = os.getenv("DB_PASS")
DB_NAME = os.getenv("DB_NAME")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# HTTP
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
PORT = _get_int("PORT", 10000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Tenant defaults
DEFAULT_RENT_DUE_DAY = _get_int("DEFAULT_RENT_DUE_DAY", 5)
DEFAULT_NOTICE_PERIOD_DAYS = _get_int("DEFAULT_NOTICE_PERIOD_DAYS", 30)
DEFAULT_NATIONALITY = os.getenv("DEFAULT_NATIONALITY", "Indian")
DEFAULT_PAYMENT_METHOD = os.getenv("DEFAULT_PAYMENT_METHOD", "bank_transfer")
DEPOSIT_MULTIPLIER = _get_int("DEPOSIT_MULTIPLIER", 2)
EXPIRING_AGREEMENT_DAYS = _get_int("EXPIRING_AGREEMENT_DAYS", 30)
UPCOMING_PAYMENT_DAYS = _get_int("UPCOMING_PAYMENT_DAYS", 7)


def get_database_url() -> str:
     """
     Resolve the SQLAlchemy URL.

     DATABASE_URL wins when set; otherwise build an MS SQL Server URL
     for pymssql from the DB_* variables.
     """
     url = os.getenv("DATABASE_URL")
     if url:
          return url

     safe_user = quote_plus(DB_USER or "")
     safe_pass = quote_plus(DB_PASS or "")
     return f"mssql+pymssql://{safe_user}:{safe_pass}@{DB_SERVER}:{DB_PORT}/{DB_NAME}"


def configure_logging(level: str = LOG_LEVEL) -> None:
     logging.basicConfig(
          level=getattr(logging, level, logging.INFO),
          format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
     )
