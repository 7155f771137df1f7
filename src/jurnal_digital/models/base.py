import secrets
import time
from datetime import datetime

import pytz
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_object_id() -> str:
    """Generate a 24-hex-character id: 4-byte timestamp + 8 random bytes."""
    return f"{int(time.time()):08x}{secrets.token_hex(8)}"


def utcnow() -> datetime:
    return datetime.now(pytz.utc)
