# app/config.py

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_PORT = 5000


class Settings(BaseModel):
    connection_string: Optional[str] = None
    database_name: str = "contacts"
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def _read_port(raw: Optional[str]) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return DEFAULT_PORT


def get_settings() -> Settings:
    return Settings(
        connection_string=os.getenv("CONNECTION_STRING"),
        database_name=os.getenv("DATABASE_NAME", "contacts"),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_read_port(os.getenv("PORT")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
