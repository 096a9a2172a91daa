from __future__ import annotations
import numpy as np
import pandas as pd

from constants import BUCKET_LABELS, FAST_LIMIT, MEDIUM_LIMIT


def classify(minutes: int) -> str:
    """Speed tier for a latency in minutes: <=15, 16-25, or >25."""
    if minutes < 0:
        raise ValueError(f"Latency must be non-negative, got {minutes}")
    if minutes <= FAST_LIMIT:
        return BUCKET_LABELS[0]
    if minutes <= MEDIUM_LIMIT:
        return BUCKET_LABELS[1]
    return BUCKET_LABELS[2]


def classify_series(minutes: pd.Series) -> pd.Series:
    """Vectorised classify(); the result is categorical over all three tiers."""
    if (minutes < 0).any():
        raise ValueError("Latency must be non-negative")
    labels = np.select(
        [minutes <= FAST_LIMIT, minutes <= MEDIUM_LIMIT],
        [BUCKET_LABELS[0], BUCKET_LABELS[1]],
        default=BUCKET_LABELS[2],
    )
    return pd.Series(
        pd.Categorical(labels, categories=BUCKET_LABELS, ordered=True), index=minutes.index
    )
