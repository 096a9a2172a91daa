import pytest

from orders import orders_to_frame, read_orders
from sample_data import SAMPLE_CSV

HEADER = "Darkstore Name,Brand Name,Created At,Import At,Assigned At,Confirmed At,Printed At,Manifest At"
ANDHERI_ROW = (
    "Andheri,Myntra,8/1/2025 10:20:00 AM,8/1/2025 10:29:00 AM,8/1/2025 10:31:00 AM,"
    "8/1/2025 10:40:00 AM,8/1/2025 10:50:00 AM,8/1/2025 10:55:00 AM"
)


@pytest.fixture
def single_order_csv():
    return f"{HEADER}\n{ANDHERI_ROW}\n"


@pytest.fixture
def sample_orders():
    # 24 orders over Andheri, Thane, Kolaba, Mumbai Central and Powai
    return orders_to_frame(read_orders(SAMPLE_CSV))


@pytest.fixture
def ragged_orders_csv():
    # middle row has one field more than the header
    return f"{HEADER}\n{ANDHERI_ROW}\n{ANDHERI_ROW},extra\n{ANDHERI_ROW}\n"
