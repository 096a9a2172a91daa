"""Per-metric speed tiers over an order frame."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple

import pandas as pd

from buckets import classify_series
from constants import BUCKET_LABELS, DELIVERY_METRIC, DELIVERY_METRIC_DEF, METRICS


@dataclass(frozen=True, eq=False)
class Bucket:
    label: str
    count: int
    orders: pd.DataFrame


@dataclass(frozen=True, eq=False)
class MetricBucketSet:
    metric: str
    column: str
    title: str
    buckets: Tuple[Bucket, ...]

    @property
    def total(self) -> int:
        return sum(b.count for b in self.buckets)

    @property
    def fast_share(self) -> float:
        return self.buckets[0].count / self.total if self.total else 0.0

    def counts(self) -> Dict[str, int]:
        return {b.label: b.count for b in self.buckets}

    def bucket(self, label: str) -> Bucket:
        for b in self.buckets:
            if b.label == label:
                return b
        raise KeyError(f"Unknown bucket {label!r}; expected one of {BUCKET_LABELS}")


def metric_keys(include_delivery: bool = False) -> List[str]:
    keys = list(METRICS)
    if include_delivery:
        keys.append(DELIVERY_METRIC)
    return keys


def metric_definition(metric: str) -> Tuple[str, str, str]:
    """(order column, title, formula) for a metric key."""
    if metric == DELIVERY_METRIC:
        return DELIVERY_METRIC_DEF
    try:
        return METRICS[metric]
    except KeyError:
        raise KeyError(f"Unknown metric {metric!r}") from None


def has_delivery(orders: pd.DataFrame) -> bool:
    col = DELIVERY_METRIC_DEF[0]
    return col in orders.columns and len(orders) > 0 and bool(orders[col].notna().all())


def aggregate(orders: pd.DataFrame, metric: str) -> MetricBucketSet:
    """Split orders into the three speed tiers for one metric; empty tiers are kept."""
    column, title, _ = metric_definition(metric)
    if column not in orders.columns:
        raise KeyError(f"Orders have no column {column!r} for metric {metric!r}")

    values = pd.to_numeric(orders[column], errors="coerce").fillna(0).astype("int64")
    tiers = classify_series(values)
    buckets = []
    for label in BUCKET_LABELS:
        mask = tiers == label
        buckets.append(Bucket(label=label, count=int(mask.sum()), orders=orders[mask]))
    return MetricBucketSet(metric=metric, column=column, title=title, buckets=tuple(buckets))


def aggregate_all(orders: pd.DataFrame, include_delivery: bool | None = None) -> Dict[str, MetricBucketSet]:
    if include_delivery is None:
        include_delivery = has_delivery(orders)
    return {key: aggregate(orders, key) for key in metric_keys(include_delivery)}
