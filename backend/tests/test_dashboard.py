import asyncio
from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from staydesk.core.errors import StoreError
from staydesk.services.availability import occupancy_rate
from staydesk.services.dashboard import DashboardService, month_bounds


class _Count:
    def __init__(self, value, fail=False):
        self.value = value
        self.fail = fail
        self.calls = []

    async def _result(self, *args):
        self.calls.append(args)
        if self.fail:
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))
        return self.value


class FakeProperties(_Count):
    async def count_active(self):
        return await self._result()


class FakeBookings(_Count):
    async def count_active(self, now, statuses):
        return await self._result(now, tuple(statuses))


class FakeMessages(_Count):
    async def count_unread(self):
        return await self._result()


class FakeTasks(_Count):
    async def count_pending(self):
        return await self._result()


class FakePayments(_Count):
    async def sum_completed_between(self, start, end):
        return await self._result(start, end)


def _service(properties=4, bookings=3, messages=2, tasks=1, revenue=Decimal("1200.50"), fail=None):
    return DashboardService(
        properties=FakeProperties(properties, fail == "properties"),
        bookings=FakeBookings(bookings, fail == "bookings"),
        messages=FakeMessages(messages),
        tasks=FakeTasks(tasks),
        payments=FakePayments(revenue, fail == "payments"),
    )


@pytest.mark.parametrize("active,total,expected", [
    (3, 4, 75.0),
    (1, 3, 33.3),
    (0, 5, 0),
    (2, 0, 0),
    (0, 0, 0),
])
def test_occupancy_rate(active, total, expected):
    assert occupancy_rate(active, total) == expected


def test_month_bounds_mid_year():
    start, end = month_bounds(datetime(2030, 6, 15, 13, 45, 10))
    assert start == datetime(2030, 6, 1)
    assert end == datetime(2030, 7, 1)


def test_month_bounds_december_rolls_year():
    start, end = month_bounds(datetime(2030, 12, 31, 23, 59, 59))
    assert start == datetime(2030, 12, 1)
    assert end == datetime(2031, 1, 1)


def test_get_stats_over_fakes():
    service = _service()
    now = datetime(2030, 6, 15, 12, 0)

    stats = asyncio.run(service.get_stats(now))

    assert stats.total_properties == 4
    assert stats.active_bookings == 3
    assert stats.occupancy_rate == 75.0
    assert stats.monthly_revenue == Decimal("1200.50")
    assert stats.unread_messages == 2
    assert stats.pending_tasks == 1
    assert service.payments.calls == [(datetime(2030, 6, 1), datetime(2030, 7, 1))]
    assert service.bookings.calls[0][0] == now


def test_get_stats_uses_confirmed_only_by_default():
    service = _service()
    asyncio.run(service.get_stats(datetime(2030, 6, 15)))
    _, statuses = service.bookings.calls[0]
    assert [s.value for s in statuses] == ["confirmed"]


def test_get_stats_zero_properties_has_zero_occupancy():
    stats = asyncio.run(_service(properties=0, bookings=2).get_stats(datetime(2030, 6, 15)))
    assert stats.occupancy_rate == 0


@pytest.mark.parametrize("failing", ["properties", "bookings", "payments"])
def test_get_stats_any_failure_is_store_error(failing):
    with pytest.raises(StoreError) as exc_info:
        asyncio.run(_service(fail=failing).get_stats(datetime(2030, 6, 15)))
    assert exc_info.value.message == "Error fetching dashboard stats"


def test_stats_endpoint_empty_database(client):
    resp = client.get("/api/dashboard/stats")
    assert resp.status_code == 200
    assert resp.json() == {
        "totalProperties": 0,
        "activeBookings": 0,
        "occupancyRate": 0,
        "monthlyRevenue": 0,
        "unreadMessages": 0,
        "pendingTasks": 0,
    }


def test_stats_endpoint_scenario(client, make_property, make_booking):
    loft = make_property()
    make_property(name="Garden House")
    make_property(name="Retired Cabin", isActive=False)

    booking = make_booking(loft["id"], checkInDate="2030-03-10T15:00:00", checkOutDate="2030-03-13T11:00:00")
    make_booking(loft["id"], status="pending", checkInDate="2030-04-01T15:00:00", checkOutDate="2030-04-02T11:00:00")
    # Already checked out, not active any more
    make_booking(loft["id"], checkInDate="2020-01-01T15:00:00", checkOutDate="2020-01-03T11:00:00")

    for amount, status in ((300, "completed"), (150.25, "completed"), (99, "pending")):
        resp = client.post("/api/payments", json={"bookingId": booking["id"], "amount": amount, "status": status})
        assert resp.status_code == 201

    client.post("/api/messages", json={"bookingId": booking["id"], "sender": "guest", "message": "Hi!"})
    client.post("/api/messages", json={"bookingId": booking["id"], "sender": "host", "message": "Hello", "isRead": True})
    client.post("/api/housekeeping", json={"propertyId": loft["id"], "taskType": "cleaning"})

    resp = client.get("/api/dashboard/stats")
    assert resp.status_code == 200
    assert resp.json() == {
        "totalProperties": 2,
        "activeBookings": 1,
        "occupancyRate": 50.0,
        "monthlyRevenue": 450.25,
        "unreadMessages": 1,
        "pendingTasks": 1,
    }


def test_recent_activity_feed(client, make_property, make_booking):
    prop = make_property()
    booking = make_booking(prop["id"])
    client.post("/api/messages", json={"bookingId": booking["id"], "sender": "guest", "message": "Arriving late"})

    resp = client.get("/api/dashboard/recent-activity", params={"limit": 5})
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 2
    assert {a["type"] for a in body["activities"]} == {"booking", "message"}
