"""Configuration loaded from .env"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# Analytics
DEFAULT_WINDOW = int(os.getenv("ANALYTICS_DEFAULT_WINDOW", "30"))

# HTTP
FRONTEND_ORIGINS = [
    o.strip() for o in os.getenv("FRONTEND_ORIGINS", "").split(",") if o.strip()
] or [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
