APP_TITLE = "Dark Store Order Speed Insights"

UNKNOWN = "Unknown"
ALL = "all"

# Canonical field -> accepted CSV headers, first match wins
COLUMN_ALIASES = {
    "id": ["Order ID", "ID", "Order Id", "Order"],
    "store_name": ["Darkstore Name", "Darkstore", "Store Name", "Store"],
    "brand_name": ["Brand Name", "Brand"],
    "created_at": ["Created At", "Created Date", "Created"],
    "imported_at": ["Import At", "Imported At", "Import Date"],
    "assigned_at": ["Assigned At", "Assign At", "Assigned Date"],
    "confirmed_at": ["Confirmed At", "Confirm At", "Confirmed Date"],
    "printed_at": ["Printed At", "Print At", "Printed Date"],
    "manifested_at": ["Manifest At", "Manifested At", "Manifest Date"],
    "delivered_at": ["Delivered At", "Delivery At", "Delivered Date"],
}
TIMESTAMP_FIELDS = [
    "created_at", "imported_at", "assigned_at", "confirmed_at", "printed_at", "manifested_at"
]
REQUIRED_FIELDS = ["created_at", "imported_at"]

BUCKET_LABELS = ["0-15 mins", "15-25 mins", "25+ mins"]
FAST_LIMIT = 15
MEDIUM_LIMIT = 25

# metric key -> (order column, display title, formula)
METRICS = {
    "importCutoff": ("import_latency", "Import Cutoff Time", "Import At - Created At"),
    "inventoryAssign": ("assign_latency", "Inventory Assign Cutoff", "Assigned At - Import At"),
    "batchPick": ("batch_pick_latency", "Batch & Pick Cutoff", "Confirmed At - Assigned At"),
    "labelPrint": ("label_latency", "Label Cutoff Time", "Printed At - Confirmed At"),
    "pickupCutoff": ("pickup_latency", "Pickup Cutoff Time", "Manifest At - Printed At"),
}
DELIVERY_METRIC = "deliveryCutoff"
DELIVERY_METRIC_DEF = ("delivery_latency", "Delivery Cutoff Time", "Delivered At - Manifest At")

EXPORT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
EXPORT_COLUMNS = {
    "id": "Order ID",
    "store_name": "Darkstore",
    "brand_name": "Brand",
    "created_at": "Created At",
    "imported_at": "Import At",
    "assigned_at": "Assigned At",
    "confirmed_at": "Confirmed At",
    "printed_at": "Printed At",
    "manifested_at": "Manifest At",
}

REFRESH_SECONDS = 5 * 60

KPI_FORMATS = {
    "total_orders": "{:,}",
    "minutes": "{}m",
    "rate": "{:.1f}%",
}
