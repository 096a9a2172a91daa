from __future__ import annotations
import os
from dataclasses import dataclass
import streamlit as st


@dataclass(frozen=True)
class Settings:
    data_source: str | None = None   # published CSV URL or Google Sheets id
    request_timeout: float = 30.0
    log_level: str = "INFO"


def get_secret(key: str) -> str | None:
    v = os.environ.get(key)
    if v:
        return v
    try:
        return st.secrets.get(key)  # type: ignore[attr-defined]
    except Exception:  # no or unreadable secrets.toml
        return None


def _number(key: str, default, cast):
    raw = get_secret(key)
    if raw in (None, ""):
        return default
    try:
        return cast(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be a number, got {raw!r}") from None


def load_settings() -> Settings:
    """Environment first, then .streamlit/secrets.toml."""
    return Settings(
        data_source=get_secret("ORDERS_DATA_SOURCE"),
        request_timeout=_number("ORDERS_REQUEST_TIMEOUT", 30.0, float),
        log_level=(get_secret("LOG_LEVEL") or "INFO").upper(),
    )
