# data_io.py
from __future__ import annotations
import logging
import time
from typing import Optional

import pandas as pd
import requests
import streamlit as st

from constants import REFRESH_SECONDS
from pipeline import Dataset, build_dataset
from sample_data import SAMPLE_CSV

LOGGER = logging.getLogger(__name__)

SHEET_EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv"
SAMPLE_SOURCE = "sample"

_HEADERS = {
    "Accept": "text/csv",
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
}


class DataSourceError(Exception):
    """The order sheet could not be fetched or did not look like CSV."""


def source_url(source: str) -> str:
    """A full URL is used as-is; anything else is taken as a Google Sheets id."""
    s = source.strip()
    if s.startswith(("http://", "https://")):
        return s
    return SHEET_EXPORT_URL.format(sheet_id=s)


def _looks_like_csv(text: str) -> bool:
    return bool(text) and len(text.strip()) > 10 and "," in text


def fetch_csv(source: str, timeout: float = 30.0) -> str:
    url = source_url(source)
    try:
        resp = requests.get(
            url,
            params={"cachebust": int(time.time() * 1000)},
            headers=_HEADERS,
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise DataSourceError(f"could not reach {url}: {e}") from e

    if not resp.ok:
        raise DataSourceError(f"{url} answered HTTP {resp.status_code}")
    text = resp.text
    if not _looks_like_csv(text):
        raise DataSourceError(f"{url} returned an empty or non-CSV body")
    return text


def load_sample(notice: Optional[str] = None) -> Dataset:
    return build_dataset(SAMPLE_CSV, source=SAMPLE_SOURCE, is_fallback=True, notice=notice)


def load_dataset(source: Optional[str], timeout: float = 30.0) -> Dataset:
    """Fetch and build the dataset; any fetch or CSV failure yields the sample with a notice."""
    if not source:
        LOGGER.info("No data source configured; using the built-in sample")
        return load_sample("No data source configured. Showing sample data.")

    try:
        dataset = build_dataset(fetch_csv(source, timeout), source=source)
    except (DataSourceError, pd.errors.ParserError) as e:
        LOGGER.warning("Falling back to sample data: %s", e)
        return load_sample(f"Could not load the order sheet ({e}). Showing sample data only.")

    LOGGER.info(
        "Loaded %d orders from %s (%d stores, %d brands)",
        len(dataset.orders), source,
        dataset.orders["store_name"].nunique(), dataset.orders["brand_name"].nunique(),
    )
    return dataset


@st.cache_data(ttl=REFRESH_SECONDS, show_spinner="Loading orders...")
def cached_dataset(source: Optional[str], timeout: float = 30.0) -> Dataset:
    return load_dataset(source, timeout)
