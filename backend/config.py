# config.py
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")

# Prefix for the X-<app>-alert / X-<app>-error response headers
APP_NAME = (os.getenv("APP_NAME") or "triviaApp").strip()

DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))
MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", "2000"))

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").upper()

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
