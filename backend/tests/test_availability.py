from datetime import date, datetime

import pytest

from staydesk.core.errors import ValidationError
from staydesk.models.booking import Booking
from staydesk.models.enums import AvailabilityStatus, BookingStatus, TaskStatus, TaskType
from staydesk.models.housekeeping import HousekeepingTask
from staydesk.models.property import Property
from staydesk.services.availability import (
    MAX_CALENDAR_DAYS,
    calendar_days,
    day_window,
    derive_status,
    summarize_availability,
)

DAY = date(2030, 3, 10)


def _booking(property_id=1, check_in=datetime(2030, 3, 8, 15), check_out=datetime(2030, 3, 12, 11),
             status=BookingStatus.CONFIRMED):
    return Booking(
        property_id=property_id,
        guest_name="Guest",
        guest_email="guest@staydesk.io",
        check_in_date=check_in,
        check_out_date=check_out,
        guests=1,
        total_amount=100,
        status=status,
    )


def _task(property_id=1, due=datetime(2030, 3, 10, 9), status=TaskStatus.PENDING):
    return HousekeepingTask(
        property_id=property_id, task_type=TaskType.CLEANING, status=status, due_date=due
    )


def test_day_window_covers_whole_day():
    start, end = day_window(DAY)
    assert start == datetime(2030, 3, 10, 0, 0, 0)
    assert end == datetime(2030, 3, 10, 23, 59, 59, 999999)


def test_booking_spanning_day_is_occupied():
    assert derive_status(1, DAY, [_booking()], []) == AvailabilityStatus.OCCUPIED


def test_check_in_and_check_out_days_count_as_occupied():
    booking = _booking(check_in=datetime(2030, 3, 10, 23, 0), check_out=datetime(2030, 3, 14, 0, 0))
    assert derive_status(1, date(2030, 3, 10), [booking], []) == AvailabilityStatus.OCCUPIED
    assert derive_status(1, date(2030, 3, 14), [booking], []) == AvailabilityStatus.OCCUPIED
    assert derive_status(1, date(2030, 3, 15), [booking], []) == AvailabilityStatus.AVAILABLE


def test_cancelled_booking_does_not_block():
    booking = _booking(status=BookingStatus.CANCELLED)
    assert derive_status(1, DAY, [booking], []) == AvailabilityStatus.AVAILABLE


def test_booking_on_another_property_is_ignored():
    assert derive_status(1, DAY, [_booking(property_id=2)], []) == AvailabilityStatus.AVAILABLE


def test_open_task_due_on_day_means_maintenance():
    assert derive_status(1, DAY, [], [_task()]) == AvailabilityStatus.MAINTENANCE


def test_completed_or_undated_task_is_ignored():
    tasks = [_task(status=TaskStatus.COMPLETED), _task(due=None)]
    assert derive_status(1, DAY, [], tasks) == AvailabilityStatus.AVAILABLE


def test_task_due_next_day_is_ignored():
    assert derive_status(1, DAY, [], [_task(due=datetime(2030, 3, 11, 0, 0))]) == AvailabilityStatus.AVAILABLE


def test_occupied_wins_over_maintenance():
    assert derive_status(1, DAY, [_booking()], [_task()]) == AvailabilityStatus.OCCUPIED


def test_double_booking_reports_occupied():
    bookings = [_booking(), _booking(check_in=datetime(2030, 3, 9), check_out=datetime(2030, 3, 11))]
    assert derive_status(1, DAY, bookings, []) == AvailabilityStatus.OCCUPIED


def test_derive_status_is_idempotent():
    bookings, tasks = [_booking()], [_task(property_id=2)]
    first = [derive_status(pid, DAY, bookings, tasks) for pid in (1, 2, 3)]
    second = [derive_status(pid, DAY, bookings, tasks) for pid in (1, 2, 3)]
    assert first == second == [
        AvailabilityStatus.OCCUPIED,
        AvailabilityStatus.MAINTENANCE,
        AvailabilityStatus.AVAILABLE,
    ]


def test_summarize_availability_counts_and_rate():
    props = [Property(id=i, name=f"Unit {i}") for i in (1, 2, 3, 4)]
    summary = summarize_availability(props, DAY, [_booking()], [_task(property_id=2)])

    assert summary.total == 4
    assert summary.occupied == 1
    assert summary.maintenance == 1
    assert summary.available == 2
    assert summary.occupancy_rate == 25.0
    assert [e.status for e in summary.properties][:2] == [
        AvailabilityStatus.OCCUPIED,
        AvailabilityStatus.MAINTENANCE,
    ]


def test_summarize_availability_empty():
    summary = summarize_availability([], DAY, [], [])
    assert summary.total == 0
    assert summary.occupancy_rate == 0


def test_calendar_days_inclusive_and_bounded():
    assert calendar_days(DAY, DAY) == [DAY]
    assert len(calendar_days(date(2030, 1, 1), date(2030, 1, 31))) == 31

    with pytest.raises(ValidationError):
        calendar_days(date(2030, 1, 2), date(2030, 1, 1))
    with pytest.raises(ValidationError):
        calendar_days(date(2030, 1, 1), date(2030, 12, 31))
    assert MAX_CALENDAR_DAYS == 62


def test_availability_endpoints(client, make_property, make_booking):
    occupied = make_property(name="Occupied Loft")
    serviced = make_property(name="Serviced Flat")
    free = make_property(name="Free Studio")
    make_booking(occupied["id"], checkInDate="2030-03-09T15:00:00", checkOutDate="2030-03-10T11:00:00")
    resp = client.post("/api/housekeeping", json={
        "propertyId": serviced["id"],
        "taskType": "maintenance",
        "dueDate": "2030-03-10T10:00:00",
    })
    assert resp.status_code == 201

    resp = client.get("/api/availability", params={"date": "2030-03-10"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 3
    assert (body["occupied"], body["maintenance"], body["available"]) == (1, 1, 1)
    assert body["occupancyRate"] == 33.3

    resp = client.get(f"/api/properties/{free['id']}/availability", params={"date": "2030-03-10"})
    assert resp.json() == {"propertyId": free["id"], "date": "2030-03-10", "status": "available"}

    resp = client.get(
        f"/api/properties/{occupied['id']}/calendar",
        params={"startDate": "2030-03-08", "endDate": "2030-03-11"},
    )
    assert resp.status_code == 200
    statuses = [d["status"] for d in resp.json()["days"]]
    assert statuses == ["available", "occupied", "occupied", "available"]


def test_calendar_rejects_reversed_range(client, make_property):
    prop = make_property()
    resp = client.get(
        f"/api/properties/{prop['id']}/calendar",
        params={"startDate": "2030-03-11", "endDate": "2030-03-08"},
    )
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "endDate"


def test_availability_for_missing_property_is_404(client):
    resp = client.get("/api/properties/999/availability")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Property not found"}
