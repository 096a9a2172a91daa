"""Canonical order records built from raw sheet rows."""
from __future__ import annotations
import io
import logging
from dataclasses import dataclass, fields
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd

from constants import COLUMN_ALIASES, REQUIRED_FIELDS, TIMESTAMP_FIELDS, UNKNOWN
from features import STAGES, derive_latencies
from parsing import parse_timestamp

LOGGER = logging.getLogger(__name__)

LATENCY_COLUMNS = list(STAGES)


@dataclass(frozen=True)
class Order:
    id: str
    store_name: str
    brand_name: str
    created_at: pd.Timestamp
    imported_at: pd.Timestamp
    assigned_at: pd.Timestamp
    confirmed_at: pd.Timestamp
    printed_at: pd.Timestamp
    manifested_at: pd.Timestamp
    import_latency: int
    assign_latency: int
    batch_pick_latency: int
    label_latency: int
    pickup_latency: int
    total_latency: int
    delivered_at: Optional[pd.Timestamp] = None
    delivery_latency: Optional[int] = None
    # lifecycle fields whose text was missing or unparsable and fell back to "now"
    unparsed_fields: Tuple[str, ...] = ()

    @property
    def has_unparsed_dates(self) -> bool:
        return bool(self.unparsed_fields)


ORDER_COLUMNS = [f.name for f in fields(Order)]

ColumnMap = Dict[str, Optional[str]]


def resolve_columns(headers: Iterable[str]) -> ColumnMap:
    """
    Map each canonical field to the header that carries it.
    Aliases are tried in order: exact match first, then case-insensitive.
    Fields with no matching header map to None.
    """
    trimmed = [str(h).strip() for h in headers]
    exact = set(trimmed)
    lowered: Dict[str, str] = {}
    for h in trimmed:
        lowered.setdefault(h.lower(), h)

    resolved: ColumnMap = {}
    for field, aliases in COLUMN_ALIASES.items():
        match = next((a for a in aliases if a in exact), None)
        if match is None:
            match = next((lowered[a.lower()] for a in aliases if a.lower() in lowered), None)
        resolved[field] = match
    return resolved


def _value(record: Mapping[str, object], columns: ColumnMap, field: str) -> str:
    col = columns.get(field)
    if col is None:
        return ""
    v = record.get(col)
    if v is None or (isinstance(v, float) and pd.isna(v)):
        return ""
    return str(v).strip()


def _timestamp(text: str, field: str, unparsed: List[str]) -> pd.Timestamp:
    ts = parse_timestamp(text, fallback="nat")
    if pd.isna(ts):
        unparsed.append(field)
        return pd.Timestamp.now()
    return ts


def is_complete(record: Mapping[str, object], columns: ColumnMap) -> bool:
    return all(_value(record, columns, f) for f in REQUIRED_FIELDS)


def normalize_row(
    record: Mapping[str, object], index: int, columns: Optional[ColumnMap] = None
) -> Order:
    """Build an Order from one raw row. `index` (0-based) only feeds the fallback id."""
    record = {str(k).strip(): v for k, v in record.items()}
    if columns is None:
        columns = resolve_columns(record.keys())

    unparsed: List[str] = []
    stamps: Dict[str, Optional[pd.Timestamp]] = {
        f: _timestamp(_value(record, columns, f), f, unparsed) for f in TIMESTAMP_FIELDS
    }
    if columns.get("delivered_at") is not None:
        stamps["delivered_at"] = _timestamp(
            _value(record, columns, "delivered_at"), "delivered_at", unparsed
        )

    latencies = derive_latencies(stamps)
    return Order(
        id=_value(record, columns, "id") or f"ORD-{index + 1:04d}",
        store_name=_value(record, columns, "store_name") or UNKNOWN,
        brand_name=_value(record, columns, "brand_name") or UNKNOWN,
        delivered_at=stamps.get("delivered_at"),
        unparsed_fields=tuple(unparsed),
        **{f: stamps[f] for f in TIMESTAMP_FIELDS},
        **latencies,
    )


def read_orders(csv_text: str) -> List[Order]:
    """Parse CSV text into Orders, keeping input row order and dropping incomplete rows."""
    if not csv_text or not csv_text.strip():
        return []
    skipped: List[List[str]] = []
    raw = pd.read_csv(
        io.StringIO(csv_text),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
        on_bad_lines=lambda fields: skipped.append(fields),  # append returns None: line dropped
    )
    if skipped:
        LOGGER.info("Skipped %d malformed rows (more fields than the header)", len(skipped))
    raw.columns = [str(c).strip() for c in raw.columns]
    columns = resolve_columns(raw.columns)

    records = raw.to_dict(orient="records")
    kept = [r for r in records if is_complete(r, columns)]
    if len(kept) < len(records):
        LOGGER.info("Dropped %d incomplete rows (missing created/import timestamp)", len(records) - len(kept))

    orders = [normalize_row(r, i, columns) for i, r in enumerate(kept)]
    unparsed = sum(1 for o in orders if o.has_unparsed_dates)
    if unparsed:
        LOGGER.warning("%d orders carry fallback timestamps", unparsed)
    return orders


def orders_to_frame(orders: Iterable[Order]) -> pd.DataFrame:
    """One row per order, columns named after the Order fields."""
    frame = pd.DataFrame(
        [{c: getattr(o, c) for c in ORDER_COLUMNS} for o in orders], columns=ORDER_COLUMNS
    )
    for col in LATENCY_COLUMNS:
        frame[col] = frame[col].astype("int64")
    for col in TIMESTAMP_FIELDS + ["delivered_at"]:
        frame[col] = pd.to_datetime(frame[col])
    if len(frame) and frame["delivery_latency"].notna().all():
        frame["delivery_latency"] = frame["delivery_latency"].astype("int64")
    frame["has_unparsed_dates"] = frame["unparsed_fields"].map(bool).astype(bool)
    return frame
