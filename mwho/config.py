"""
mWHO Calculator — Configuration
===============================
Centralised runtime settings.  Loads overrides from the project-level
.env file; every value has a working default.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from mwho import __version__

# ── Paths ───────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# ── Load .env ───────────────────────────────────────────────────────────
load_dotenv(PROJECT_ROOT / ".env")

APP_VERSION: str = __version__

# ── Logging ─────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("MWHO_LOG_LEVEL", "INFO")
LOG_FILE: str = os.getenv("MWHO_LOG_FILE", "")               # empty = console only

# ── API server ──────────────────────────────────────────────────────────
API_HOST: str = os.getenv("MWHO_API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("MWHO_API_PORT", "8000"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("MWHO_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
