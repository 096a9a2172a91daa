from __future__ import annotations
import math
from typing import Dict, Mapping, Optional
import pandas as pd

# latency column -> (start timestamp, end timestamp)
STAGES = {
    "import_latency": ("created_at", "imported_at"),
    "assign_latency": ("imported_at", "assigned_at"),
    "batch_pick_latency": ("assigned_at", "confirmed_at"),
    "label_latency": ("confirmed_at", "printed_at"),
    "pickup_latency": ("printed_at", "manifested_at"),
    "total_latency": ("created_at", "manifested_at"),
}
DELIVERY_STAGE = ("delivery_latency", ("manifested_at", "delivered_at"))


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def minutes_between(start: Optional[pd.Timestamp], end: Optional[pd.Timestamp]) -> int:
    """Whole minutes from start to end, rounded half-up and clamped at 0."""
    if start is None or end is None or pd.isna(start) or pd.isna(end):
        return 0
    minutes = (end - start).total_seconds() / 60.0
    return max(0, round_half_up(minutes))


def derive_latencies(timestamps: Mapping[str, Optional[pd.Timestamp]]) -> Dict[str, int]:
    latencies = {
        col: minutes_between(timestamps.get(start), timestamps.get(end))
        for col, (start, end) in STAGES.items()
    }
    col, (start, end) = DELIVERY_STAGE
    if timestamps.get(end) is not None:
        latencies[col] = minutes_between(timestamps.get(start), timestamps.get(end))
    return latencies
