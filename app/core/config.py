# /app/core/config.py

"""
Central runtime configuration.

Every setting is read from the environment once, at import time, with a
sensible default for local development. Modules import the constants they
need from here instead of calling `os.getenv` themselves.
"""

import os

# --- Persistence ---
# Any SQLAlchemy URL works; SQLite is the local default.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./college.db")

# --- Security ---
# bcrypt cost factor used for every stored faculty password.
PASSWORD_HASH_ROUNDS = int(os.getenv("PASSWORD_HASH_ROUNDS", "10"))

# --- API behaviour ---
DEFAULT_PAGE_LIMIT = int(os.getenv("DEFAULT_PAGE_LIMIT", "1000"))
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Client ---
# Base URL the API client and the views talk to.
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
