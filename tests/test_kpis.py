import pytest

from filters import FilterCriteria, apply_filters
from kpis import AggregateSummary, summarize
from orders import orders_to_frame, read_orders


def test_summarize_empty_is_all_zero():
    summary = summarize(orders_to_frame([]))
    assert summary == AggregateSummary()
    assert all(v == 0 for v in summary.as_dict().values())


def test_summarize_single(single_order_csv):
    summary = summarize(orders_to_frame(read_orders(single_order_csv)))
    assert summary.total_orders == 1
    assert (summary.avg_import, summary.avg_assign, summary.avg_batch_pick) == (9, 2, 9)
    assert (summary.avg_label, summary.avg_pickup, summary.avg_total) == (10, 5, 35)
    assert summary.avg_delivery == 0
    assert summary.fast_rate == 1.0


def test_andheri_summary_matches_manual_recompute(sample_orders):
    andheri = apply_filters(sample_orders, FilterCriteria(store="Andheri"))
    summary = summarize(andheri)
    imports = [9, 69, 19, 29, 7, 7, 7]
    totals = [35, 95, 45, 55, 33, 33, 33]
    assert summary.total_orders == 7
    assert summary.avg_import == round(sum(imports) / len(imports))
    assert summary.avg_total == round(sum(totals) / len(totals))
    assert (summary.avg_assign, summary.avg_batch_pick, summary.avg_label, summary.avg_pickup) == (2, 9, 10, 5)
    assert summary.fast_rate == pytest.approx(4 / 7)
    assert summary.unparsed_rate == 0.0


def test_averages_round_half_up(sample_orders):
    # 10 and 11 minute imports average to 10.5
    two = sample_orders[sample_orders["store_name"] == "Mumbai Central"].copy()
    two["import_latency"] = [10, 11]
    assert summarize(two).avg_import == 11
