from __future__ import annotations
from typing import Dict
import pandas as pd
import altair as alt
import streamlit as st
from constants import BUCKET_LABELS
from metrics import MetricBucketSet


def bucket_counts_frame(metrics: Dict[str, MetricBucketSet]) -> pd.DataFrame:
    """Long table: one row per (stage, bucket) with its order count."""
    rows = [
        {"stage": m.title, "bucket": b.label, "orders": b.count}
        for m in metrics.values()
        for b in m.buckets
    ]
    return pd.DataFrame(rows, columns=["stage", "bucket", "orders"])


def stage_buckets_chart(metrics: Dict[str, MetricBucketSet]) -> alt.Chart:
    data = bucket_counts_frame(metrics)
    stages = [m.title for m in metrics.values()]
    return (
        alt.Chart(data)
        .mark_bar()
        .encode(
            x=alt.X("stage:N", sort=stages, title="Stage"),
            y=alt.Y("orders:Q", title="Orders"),
            color=alt.Color("bucket:N", sort=BUCKET_LABELS, title="Bucket"),
            order=alt.Order("bucket_order:Q"),
            tooltip=["stage", "bucket", "orders"],
        )
        .transform_calculate(bucket_order=f"indexof({BUCKET_LABELS!r}, datum.bucket)")
    )


def total_latency_hist_chart(df: pd.DataFrame) -> alt.Chart:
    return (
        alt.Chart(df[["total_latency"]])
        .mark_bar()
        .encode(
            x=alt.X("total_latency:Q", bin=alt.Bin(maxbins=30), title="Order-to-Manifest (mins)"),
            y=alt.Y("count()", title="Orders"),
            tooltip=[alt.Tooltip("count()", title="Orders")],
        )
    )


def render_charts(metrics: Dict[str, MetricBucketSet], df: pd.DataFrame) -> None:
    l, r = st.columns(2)
    with l:
        st.subheader("Orders per Bucket by Stage")
        st.altair_chart(stage_buckets_chart(metrics), use_container_width=True)
    with r:
        st.subheader("Order-to-Manifest Distribution")
        if df.empty:
            st.info("No orders under the current filters.")
        else:
            st.altair_chart(total_latency_hist_chart(df), use_container_width=True)
