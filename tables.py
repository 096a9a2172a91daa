from __future__ import annotations
import re
from typing import Optional
import streamlit as st
import pandas as pd
from constants import ALL, DELIVERY_METRIC_DEF, EXPORT_COLUMNS, EXPORT_TIMESTAMP_FORMAT, METRICS, TIMESTAMP_FIELDS
from metrics import metric_definition

METRIC_VALUE_HEADER = "Metric Value (mins)"
TOTAL_VALUE_HEADER = "Total Latency (mins)"


def export_frame(orders: pd.DataFrame, metric: Optional[str] = None) -> pd.DataFrame:
    """Export layout of a bucket's orders; without a metric the value column is total latency."""
    out = pd.DataFrame(index=orders.index)
    for col, header in EXPORT_COLUMNS.items():
        if col in TIMESTAMP_FIELDS:
            out[header] = pd.to_datetime(orders[col]).dt.strftime(EXPORT_TIMESTAMP_FORMAT)
        else:
            out[header] = orders[col]
    if metric is None or metric == ALL:
        out[TOTAL_VALUE_HEADER] = orders["total_latency"]
    else:
        out[METRIC_VALUE_HEADER] = orders[metric_definition(metric)[0]]
    return out


def export_orders_csv(orders: pd.DataFrame, metric: Optional[str] = None) -> str:
    return export_frame(orders, metric).to_csv(index=False)


def export_filename(metric: str, bucket: str) -> str:
    slug = re.sub(r"\s+", "_", bucket)
    return f"{metric}_{slug}_orders.csv"


def bucket_orders_table(orders: pd.DataFrame, metric: str, bucket: str) -> None:
    title = "All Orders" if metric == ALL else f"{metric_definition(metric)[1]} - {bucket}"
    st.subheader(title)
    if orders.empty:
        st.info("No orders in this bucket under the current filters.")
        return
    st.caption(f"Showing {len(orders):,} orders")
    st.dataframe(export_frame(orders, metric), use_container_width=True, hide_index=True)
    csv = export_orders_csv(orders, metric).encode("utf-8")
    st.download_button("Export CSV", csv, export_filename(metric, bucket), "text/csv")


def data_dictionary_expander(show_delivery: bool = False) -> None:
    defs = list(METRICS.values()) + ([DELIVERY_METRIC_DEF] if show_delivery else [])
    lines = [f"- **{title}** = {formula} (minutes)" for _, title, formula in defs]
    lines.append("- **Order-to-Manifest** = Manifest At - Created At (minutes)")
    lines.append("- Negative gaps count as 0; tiers are 0-15, 15-25 and 25+ minutes")
    with st.expander("Data Dictionary"):
        st.markdown("\n".join(lines))
