import io

import pandas as pd

from metrics import aggregate
from orders import orders_to_frame, read_orders
from tables import export_filename, export_frame, export_orders_csv


def test_export_layout(single_order_csv):
    orders = orders_to_frame(read_orders(single_order_csv))
    csv = export_orders_csv(orders, "importCutoff")
    lines = csv.strip().splitlines()
    assert lines[0] == (
        "Order ID,Darkstore,Brand,Created At,Import At,Assigned At,Confirmed At,"
        "Printed At,Manifest At,Metric Value (mins)"
    )
    assert lines[1] == (
        "ORD-0001,Andheri,Myntra,2025-08-01 10:20:00,2025-08-01 10:29:00,2025-08-01 10:31:00,"
        "2025-08-01 10:40:00,2025-08-01 10:50:00,2025-08-01 10:55:00,9"
    )


def test_export_all_view_carries_total_latency(single_order_csv):
    orders = orders_to_frame(read_orders(single_order_csv))
    frame = export_frame(orders)
    assert frame["Total Latency (mins)"].tolist() == [35]


def test_export_roundtrip_keeps_latencies(sample_orders):
    bucket = aggregate(sample_orders, "importCutoff").bucket("0-15 mins").orders
    again = orders_to_frame(read_orders(export_orders_csv(bucket, "importCutoff")))
    cols = ["id", "store_name", "brand_name", "import_latency", "assign_latency",
            "batch_pick_latency", "label_latency", "pickup_latency"]
    pd.testing.assert_frame_equal(
        again[cols].reset_index(drop=True), bucket[cols].reset_index(drop=True)
    )


def test_export_empty_bucket():
    csv = export_orders_csv(orders_to_frame([]), "pickupCutoff")
    assert pd.read_csv(io.StringIO(csv)).empty


def test_export_filename():
    assert export_filename("importCutoff", "15-25 mins") == "importCutoff_15-25_mins_orders.csv"


def test_export_filename_collapses_whitespace():
    assert export_filename("pickupCutoff", "25+  mins") == "pickupCutoff_25+_mins_orders.csv"
