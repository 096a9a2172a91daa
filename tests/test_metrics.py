import pandas as pd
import pytest

from constants import BUCKET_LABELS
from metrics import aggregate, aggregate_all, metric_keys
from orders import orders_to_frame, read_orders


def test_single_order_import_bucket(single_order_csv):
    orders = orders_to_frame(read_orders(single_order_csv))
    result = aggregate(orders, "importCutoff")
    assert [b.label for b in result.buckets] == BUCKET_LABELS
    assert result.counts() == {"0-15 mins": 1, "15-25 mins": 0, "25+ mins": 0}
    assert result.bucket("15-25 mins").orders.empty


def test_buckets_partition_orders(sample_orders):
    for key in metric_keys():
        result = aggregate(sample_orders, key)
        assert result.total == len(sample_orders)
        ids = pd.concat([b.orders["id"] for b in result.buckets]).tolist()
        assert sorted(ids) == sorted(sample_orders["id"].tolist())
        assert len(ids) == len(set(ids))


def test_import_buckets_on_sample(sample_orders):
    result = aggregate(sample_orders, "importCutoff")
    # 69, 19 and 29 minute imports at Andheri, everything else at or under 15
    assert result.counts() == {"0-15 mins": 21, "15-25 mins": 1, "25+ mins": 2}
    assert result.fast_share == pytest.approx(21 / 24)
    assert set(result.bucket("25+ mins").orders["id"]) == {"ORD-0002", "ORD-0004"}


def test_empty_orders_still_have_three_buckets():
    result = aggregate(orders_to_frame([]), "pickupCutoff")
    assert [b.count for b in result.buckets] == [0, 0, 0]
    assert result.fast_share == 0.0


def test_unknown_metric_and_bucket(sample_orders):
    with pytest.raises(KeyError):
        aggregate(sample_orders, "nope")
    with pytest.raises(KeyError):
        aggregate(sample_orders, "importCutoff").bucket("5 mins")


def test_aggregate_all_adds_delivery_only_when_present(sample_orders):
    assert list(aggregate_all(sample_orders)) == [
        "importCutoff", "inventoryAssign", "batchPick", "labelPrint", "pickupCutoff",
    ]
    csv = (
        "Created At,Import At,Assigned At,Confirmed At,Printed At,Manifest At,Delivered At\n"
        "8/1/2025 10:00:00 AM,8/1/2025 10:05:00 AM,8/1/2025 10:06:00 AM,8/1/2025 10:10:00 AM,"
        "8/1/2025 10:12:00 AM,8/1/2025 10:20:00 AM,8/1/2025 11:00:00 AM\n"
    )
    metrics = aggregate_all(orders_to_frame(read_orders(csv)))
    assert metrics["deliveryCutoff"].counts() == {"0-15 mins": 0, "15-25 mins": 0, "25+ mins": 1}
