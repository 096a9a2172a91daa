"""CSV text -> immutable dataset -> filtered dashboard view."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional

import pandas as pd

from constants import ALL
from filters import FilterCriteria, apply_filters
from kpis import AggregateSummary, summarize
from metrics import MetricBucketSet, aggregate_all, has_delivery
from orders import orders_to_frame, read_orders


@dataclass(frozen=True, eq=False)
class Dataset:
    """One loaded version of the order sheet; a reload builds a new one."""

    orders: pd.DataFrame
    source: str
    loaded_at: pd.Timestamp
    is_fallback: bool = False
    notice: Optional[str] = None

    @property
    def has_delivery(self) -> bool:
        return has_delivery(self.orders)


@dataclass(frozen=True, eq=False)
class DashboardView:
    orders: pd.DataFrame
    metrics: Dict[str, MetricBucketSet]
    summary: AggregateSummary
    criteria: FilterCriteria = field(default_factory=FilterCriteria)


def build_dataset(
    csv_text: str,
    source: str,
    is_fallback: bool = False,
    notice: Optional[str] = None,
    loaded_at: Optional[pd.Timestamp] = None,
) -> Dataset:
    orders = orders_to_frame(read_orders(csv_text))
    return Dataset(
        orders=orders,
        source=source,
        loaded_at=loaded_at if loaded_at is not None else pd.Timestamp.now(),
        is_fallback=is_fallback,
        notice=notice,
    )


def build_view(dataset: Dataset, criteria: Optional[FilterCriteria] = None) -> DashboardView:
    """Filter, then aggregate the narrowed orders from scratch."""
    criteria = criteria or FilterCriteria()
    orders = apply_filters(dataset.orders, criteria)
    return DashboardView(
        orders=orders,
        metrics=aggregate_all(orders, include_delivery=dataset.has_delivery),
        summary=summarize(orders),
        criteria=criteria,
    )


def orders_for_bucket(view: DashboardView, metric: str, bucket: str) -> pd.DataFrame:
    """Drill-down rows; metric "all" returns every order in the view."""
    if metric == ALL:
        return view.orders
    if metric not in view.metrics:
        raise KeyError(f"Metric {metric!r} is not part of this view")
    return view.metrics[metric].bucket(bucket).orders
