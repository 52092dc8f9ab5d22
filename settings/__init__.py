"""Application settings."""

import os
from pathlib import Path

# HTTP
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
STATIC_DIR = Path(os.getenv("STATIC_DIR", "public"))

# CORS (empty = allow every origin)
ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "").split(",") if o.strip()]

# Spreadsheet
SHEET_ID = os.getenv("SHEET_ID") or None
CACHE_TTL_MS = int(os.getenv("CACHE_TTL_MS", str(5 * 60 * 1000)))

# Credentials
GOOGLE_CREDENTIALS_BASE64 = os.getenv("GOOGLE_CREDENTIALS_BASE64") or None

# API
API_BASE_URL = os.getenv("SHEETS_API_BASE_URL", "https://sheets.googleapis.com/v4")
API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
API_RETRIES = int(os.getenv("API_RETRIES", "3"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() in ("1", "true", "yes")
