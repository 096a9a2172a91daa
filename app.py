# app.py
from __future__ import annotations
import logging
import streamlit as st

from constants import APP_TITLE
from config import load_settings
from data_io import cached_dataset
from filters import sidebar_filters
from pipeline import build_view, orders_for_bucket
from kpis import render_kpis
from charts import render_charts
from tables import bucket_orders_table, data_dictionary_expander
from ui import header, status_bar, metric_grid, drill_down_picker, footer_description


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    header(APP_TITLE)

    # Data load (cached for the refresh interval) + filters
    dataset = cached_dataset(settings.data_source, settings.request_timeout)
    if status_bar(dataset):
        cached_dataset.clear()
        st.rerun()

    criteria = sidebar_filters(dataset.orders)
    view = build_view(dataset, criteria)
    show_delivery = dataset.has_delivery

    # KPIs
    st.divider()
    render_kpis(view.summary, show_delivery=show_delivery)

    # Buckets per stage
    st.divider()
    st.subheader("Stage Speed Buckets")
    metric_grid(view.metrics)

    # Drill-down + export
    st.divider()
    metric, bucket = drill_down_picker(view.metrics)
    bucket_orders_table(orders_for_bucket(view, metric, bucket), metric, bucket)

    # Charts
    st.divider()
    render_charts(view.metrics, view.orders)

    # Data dictionary + footer
    st.divider()
    data_dictionary_expander(show_delivery)
    footer_description()


if __name__ == "__main__":
    main()
