"""Dashboard aggregation: pure helpers and the summary endpoint."""
from datetime import date
from decimal import Decimal

import pytest

from core.constants import InquiryStatus, RoomStatus
from dashboard import stats
from finances.models import Finance
from inquiries.models import Inquiry
from properties.models import Property, Room


@pytest.mark.parametrize("total, vacant, expected", [
    (0, 0, 0),
    (4, 0, 100),
    (4, 4, 0),
    (3, 1, 67),
    (8, 1, 88),   # 87.5 rounds half up
    (8, 7, 13),   # 12.5 rounds half up
])
def test_occupancy_rate(total, vacant, expected):
    assert stats.occupancy_rate(total, vacant) == expected


def test_vacant_count_accepts_models_and_dicts():
    rows = [{"status": "vacant"}, {"status": "occupied"}, {"status": "reserved"}, {"status": "vacant"}]
    assert stats.vacant_count(rows) == 2
    assert stats.vacant_count([Room(status=RoomStatus.VACANT), Room(status=RoomStatus.OCCUPIED)]) == 1


def test_property_stats_counts_reserved_as_occupied():
    result = stats.property_stats("Maple", [{"status": "vacant"}, {"status": "reserved"}, {"status": "occupied"}])
    assert result == {
        "name": "Maple",
        "total_rooms": 3,
        "vacant_rooms": 1,
        "occupied_rooms": 2,
        "occupancy_rate": 67,
    }


@pytest.mark.parametrize("year, month, last_day", [
    (2024, 2, 29),
    (2023, 2, 28),
    (2024, 4, 30),
    (2024, 12, 31),
])
def test_month_bounds_use_real_month_length(year, month, last_day):
    first, last = stats.month_bounds(year, month)
    assert first == date(year, month, 1)
    assert last == date(year, month, last_day)


def test_finance_totals():
    rows = [
        {"type": "income", "amount": Decimal("100000")},
        {"type": "income", "amount": Decimal("50000")},
        {"type": "expense", "amount": Decimal("30000")},
    ]
    assert stats.finance_totals(rows) == {
        "income": Decimal("150000"),
        "expense": Decimal("30000"),
        "profit": Decimal("120000"),
    }
    assert stats.finance_totals([])["profit"] == 0


def test_summary_endpoint(api, tenant, rooms, sakura):
    empty = Property.objects.create(name="Annex", address="4-5-6 Ebisu")

    Finance.objects.create(property=sakura, type="income", category="rent",
                           amount=Decimal("100000"), date=date(2024, 6, 1))
    Finance.objects.create(property=sakura, type="income", category="management_fee",
                           amount=Decimal("50000"), date=date(2024, 6, 30))
    Finance.objects.create(property=sakura, type="expense", category="repair",
                           amount=Decimal("30000"), date=date(2024, 6, 15))
    Finance.objects.create(property=sakura, type="expense", category="tax",
                           amount=Decimal("99999"), date=date(2024, 7, 1))

    Inquiry.objects.create(name="A", email="a@example.com", subject="s", message="m", status=InquiryStatus.NEW)
    Inquiry.objects.create(name="B", email="b@example.com", subject="s", message="m",
                           status=InquiryStatus.IN_PROGRESS)
    Inquiry.objects.create(name="C", email="c@example.com", subject="s", message="m",
                           status=InquiryStatus.RESOLVED)

    resp = api.get("/api/dashboard/summary/?year=2024&month=6")
    assert resp.status_code == 200
    data = resp.json()

    assert data["total_properties"] == 2
    assert data["total_rooms"] == 3
    assert data["vacant_rooms"] == 1        # 101 occupied, 201 reserved
    assert data["occupied_rooms"] == 2
    assert data["occupancy_rate"] == 67
    assert data["pending_inquiries"] == 2
    assert data["monthly_income"] == 150000
    assert data["monthly_expense"] == 30000
    assert data["monthly_profit"] == 120000

    by_name = {p["name"]: p for p in data["property_stats"]}
    assert by_name["Annex"]["occupancy_rate"] == 0
    assert by_name["Sakura Heights"]["vacant_rooms"] == 1
    assert by_name[empty.name]["total_rooms"] == 0


def test_summary_rejects_bad_month(api):
    resp = api.get("/api/dashboard/summary/?year=2024&month=13")
    assert resp.status_code == 400
    assert resp.json()["code"] == "INVALID_PERIOD"
