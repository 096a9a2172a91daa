# filters.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
import datetime as _dt
import streamlit as st
import pandas as pd
from constants import ALL

DateLike = Any  # date, datetime, Timestamp or ISO string


@dataclass(frozen=True)
class FilterCriteria:
    store: str = ALL
    brand: str = ALL
    start: Optional[DateLike] = None
    end: Optional[DateLike] = None

    @property
    def date_range(self) -> Optional[Tuple[pd.Timestamp, pd.Timestamp]]:
        """Inclusive (start, end) calendar days, or None unless both ends are set."""
        if self.start is None or self.end is None:
            return None
        d0 = pd.Timestamp(self.start).normalize()
        d1 = pd.Timestamp(self.end).normalize()
        return (d0, d1) if d0 <= d1 else (d1, d0)

    @property
    def is_active(self) -> bool:
        return self.store != ALL or self.brand != ALL or self.date_range is not None


def _selected(value: Optional[str]) -> bool:
    return value is not None and value != ALL


def apply_filters(df: pd.DataFrame, f: FilterCriteria) -> pd.DataFrame:
    """Store, brand and created-date predicates ANDed together; each is skipped when unset."""
    out = df
    if _selected(f.store):
        out = out[out["store_name"] == f.store]
    if _selected(f.brand):
        out = out[out["brand_name"] == f.brand]

    rng = f.date_range
    if rng is not None:
        created = pd.to_datetime(out["created_at"]).dt.normalize()
        out = out[(created >= rng[0]) & (created <= rng[1])]
    return out


def dimension_options(df: pd.DataFrame, column: str) -> List[str]:
    return [ALL] + sorted(df[column].dropna().unique().tolist())


# ---------- sidebar ----------
def _defaults() -> Dict[str, Any]:
    return {"store": ALL, "brand": ALL, "date_range": ()}


def _ensure_model() -> None:
    if "filters_model" not in st.session_state:
        st.session_state["filters_model"] = _defaults()
    if "_pending_clear" not in st.session_state:
        st.session_state["_pending_clear"] = False


def _consume_pending_clear() -> None:
    if st.session_state.get("_pending_clear", False):
        st.session_state["filters_model"] = _defaults()
        st.session_state["_pending_clear"] = False


def _coerce_range(val) -> Tuple[Optional[_dt.date], Optional[_dt.date]]:
    """The date widget yields a partial tuple while a range is being picked."""
    if isinstance(val, (tuple, list)) and len(val) == 2 and None not in val:
        return val[0], val[1]
    return None, None


def sidebar_filters(df: pd.DataFrame) -> FilterCriteria:
    st.sidebar.header("Filters")

    _ensure_model()
    _consume_pending_clear()
    model: Dict[str, Any] = st.session_state["filters_model"]

    stores = dimension_options(df, "store_name")
    brands = dimension_options(df, "brand_name")

    def _idx(options, value):
        try:
            return options.index(value)
        except ValueError:
            return 0  # "all"

    def _label(v):
        return "All" if v == ALL else v

    store_val = st.sidebar.selectbox("Darkstore", stores, index=_idx(stores, model["store"]), format_func=_label)
    brand_val = st.sidebar.selectbox("Brand", brands, index=_idx(brands, model["brand"]), format_func=_label)
    date_val = st.sidebar.date_input("Created date range", value=model["date_range"])

    st.sidebar.markdown("---")
    if st.sidebar.button("Remove filters", use_container_width=True):
        # reset before the widgets are drawn on the next run
        st.session_state["_pending_clear"] = True
        st.rerun()

    start, end = _coerce_range(date_val)
    st.session_state["filters_model"] = {
        "store": store_val,
        "brand": brand_val,
        "date_range": (start, end) if start is not None else (),
    }
    return FilterCriteria(store=store_val, brand=brand_val, start=start, end=end)
