"""Configuration module for Jurnal Digital.

This module provides centralized configuration management: directory paths,
database and API server settings, authentication parameters and service
metadata. All configuration values can be overridden via environment
variables (a local ``.env`` file is loaded first).
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from jurnal_digital import __version__
from jurnal_digital.core.exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()

# --- Directory Configuration ---

# Root directory of the project
ROOT_DIR = Path(__file__).parent.parent.parent.resolve()

DATA_DIR_NAME = "data"
DATA_DIR = ROOT_DIR / DATA_DIR_NAME

# --- Service Metadata ---

SERVICE_NAME: str = "Jurnal Digital SMKN 4 Jakarta"
VERSION: str = __version__

# --- Database Configuration ---

DATABASE_URL: str = os.getenv(
    "DATABASE_URL", f"sqlite:///{DATA_DIR}/jurnal_digital.db"
)

# --- API Server Configuration ---

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))

# CORS allowed origins (comma-separated list)
_CORS_ALLOWED_ORIGINS_STR: str = os.getenv(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,"
    "http://127.0.0.1:3000",
)
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in _CORS_ALLOWED_ORIGINS_STR.split(",")
    if origin.strip()
]

# When enabled, 500 responses carry the raw error text.
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Authentication Configuration ---

# No default on purpose: the application refuses to start without it.
JWT_SECRET_KEY: Optional[str] = os.getenv("JWT_SECRET_KEY")
JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_HOURS: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "24"))

BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

# --- Pagination ---

DEFAULT_PAGE_SIZE: int = 10
MAX_PAGE_SIZE: int = 100


def get_jwt_secret() -> str:
    """Return the token signing secret.

    Raises:
        ConfigurationError: If ``JWT_SECRET_KEY`` is not configured.
    """
    if not JWT_SECRET_KEY:
        raise ConfigurationError(
            "JWT_SECRET_KEY must be set before starting the service"
        )
    return JWT_SECRET_KEY
