from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict
import streamlit as st
import pandas as pd
from constants import FAST_LIMIT, KPI_FORMATS
from features import round_half_up


@dataclass(frozen=True)
class AggregateSummary:
    total_orders: int = 0
    avg_import: int = 0
    avg_assign: int = 0
    avg_batch_pick: int = 0
    avg_label: int = 0
    avg_pickup: int = 0
    avg_delivery: int = 0
    avg_total: int = 0
    fast_rate: float = 0.0      # fast tier on import and pickup at once
    unparsed_rate: float = 0.0  # orders carrying a fallback timestamp

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def _avg(df: pd.DataFrame, col: str) -> int:
    if col not in df.columns:
        return 0
    s = pd.to_numeric(df[col], errors="coerce").dropna()
    return round_half_up(float(s.mean())) if not s.empty else 0


def summarize(df: pd.DataFrame) -> AggregateSummary:
    total = len(df)
    if not total:
        return AggregateSummary()
    fast = (df["import_latency"] <= FAST_LIMIT) & (df["pickup_latency"] <= FAST_LIMIT)
    unparsed = df["has_unparsed_dates"].mean() if "has_unparsed_dates" in df.columns else 0.0
    return AggregateSummary(
        total_orders=total,
        avg_import=_avg(df, "import_latency"),
        avg_assign=_avg(df, "assign_latency"),
        avg_batch_pick=_avg(df, "batch_pick_latency"),
        avg_label=_avg(df, "label_latency"),
        avg_pickup=_avg(df, "pickup_latency"),
        avg_delivery=_avg(df, "delivery_latency"),
        avg_total=_avg(df, "total_latency"),
        fast_rate=float(fast.mean()),
        unparsed_rate=float(unparsed),
    )


def render_kpis(summary: AggregateSummary, show_delivery: bool = False) -> None:
    mins = KPI_FORMATS["minutes"]
    cards = [
        ("Total Orders", KPI_FORMATS["total_orders"].format(summary.total_orders)),
        ("Avg Import Time", mins.format(summary.avg_import)),
        ("Avg Inventory Assign Time", mins.format(summary.avg_assign)),
        ("Avg Pickup & Batch Time", mins.format(summary.avg_batch_pick)),
        ("Avg Label Cutoff Time", mins.format(summary.avg_label)),
        ("Avg Pickup Cutoff Time", mins.format(summary.avg_pickup)),
        ("Avg Order-to-Manifest Time", mins.format(summary.avg_total)),
        ("Fast Import & Pickup", KPI_FORMATS["rate"].format(summary.fast_rate * 100.0)),
    ]
    if show_delivery:
        cards.insert(6, ("Avg Delivery Cutoff Time", mins.format(summary.avg_delivery)))

    for start in range(0, len(cards), 4):
        cols = st.columns(4)
        for col, (label, value) in zip(cols, cards[start:start + 4]):
            col.metric(label, value)
