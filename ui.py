from __future__ import annotations
from typing import Dict, Tuple
import streamlit as st
from constants import ALL, BUCKET_LABELS
from metrics import MetricBucketSet
from pipeline import Dataset


def header(app_title: str) -> None:
    st.set_page_config(page_title=app_title, layout="wide")
    st.title(app_title)
    st.caption("Order lifecycle speed: created, imported, assigned, confirmed, printed, manifested")


def status_bar(dataset: Dataset) -> bool:
    """Source line with a refresh button; returns True when a reload was requested."""
    left, right = st.columns([5, 1])
    with left:
        source = "sample data" if dataset.is_fallback else "live sheet"
        st.caption(
            f"Source: {source} • {len(dataset.orders):,} orders • "
            f"last update {dataset.loaded_at:%Y-%m-%d %H:%M:%S}"
        )
        if dataset.notice:
            st.warning(dataset.notice)
    with right:
        return st.button("Refresh", use_container_width=True)


def metric_grid(metrics: Dict[str, MetricBucketSet]) -> None:
    items = list(metrics.values())
    for start in range(0, len(items), 3):
        cols = st.columns(3)
        for col, m in zip(cols, items[start:start + 3]):
            with col:
                st.markdown(f"**{m.title}**")
                for b in m.buckets:
                    pct = f"{b.count / m.total * 100:.0f}%" if m.total else "0%"
                    st.metric(b.label, f"{b.count:,}", pct, delta_color="off")
                st.caption(f"Fast share: {m.fast_share * 100:.0f}%")


def drill_down_picker(metrics: Dict[str, MetricBucketSet]) -> Tuple[str, str]:
    options = [ALL] + list(metrics)
    titles = {k: m.title for k, m in metrics.items()}
    l, r = st.columns(2)
    metric = l.selectbox(
        "Metric", options, format_func=lambda k: "All orders" if k == ALL else titles[k]
    )
    if metric == ALL:
        return ALL, ALL
    bucket = r.selectbox("Bucket", BUCKET_LABELS)
    return metric, bucket


def footer_description() -> None:
    with st.expander("ℹ️ Note: About this app and expected data format", expanded=False):
        st.markdown(
            """
            **Speed insights** for dark-store order processing, bucketed into 0-15, 15-25 and 25+ minute tiers.
            Orders are read from the configured sheet (`ORDERS_DATA_SOURCE`) and refreshed every 5 minutes;
            sample data is shown when the sheet cannot be reached.

            **Expected columns:**
            `Order ID, Darkstore Name, Brand Name, Created At, Import At, Assigned At,
            Confirmed At, Printed At, Manifest At` and optionally `Delivered At`
            (timestamps like `8/1/2025 10:20:00 AM`)
            """
        )
