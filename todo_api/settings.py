from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
import os


@dataclass(frozen=True)
class Settings:
    storage_backend: str
    table_name: str
    region: str
    dynamodb_endpoint_url: Optional[str]
    log_level: str
    port: int


@lru_cache
def get_settings() -> Settings:
    storage_backend = os.getenv("TODO_STORAGE_BACKEND", "memory").lower()
    table_name = os.getenv("TODO_TABLE_NAME", "todos")
    region = os.getenv("AWS_REGION", "us-west-2")
    dynamodb_endpoint_url = os.getenv("DYNAMODB_ENDPOINT_URL") or None
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    port = int(os.getenv("PORT", "8080"))

    return Settings(
        storage_backend=storage_backend,
        table_name=table_name,
        region=region,
        dynamodb_endpoint_url=dynamodb_endpoint_url,
        log_level=log_level,
        port=port,
    )
