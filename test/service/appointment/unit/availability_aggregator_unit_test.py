"""
Unit tests for the availability aggregator

Test Coverage:
1. Slot overlap (half-open intervals, same sales manager only)
2. Date filtering on the slot start (UTC)
3. Overlap removal against booked slots
4. Grouping by start instant with distinct sales manager counts
5. Ordering and idempotence of compute_availability
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from src.service.appointment.domain.availability_aggregator import (
    compute_availability,
    remove_overlapping_slots,
    slots_on_date,
    summarize_by_start,
)
from src.service.appointment.domain.value_object.available_slot_summary import (
    AvailableSlotSummary,
)
from test.service.appointment.fixtures import make_sales_manager, make_slot, utc


pytestmark = pytest.mark.unit

MAY_3 = date(2024, 5, 3)


class TestSlotOverlap:
    def test_overlapping_slots_of_same_manager(self):
        booked = make_slot(1, utc(3, 10, 30), booked=True)
        free = make_slot(1, utc(3, 11, 0))

        assert free.overlaps(booked)
        assert booked.overlaps(free)

    def test_touching_endpoints_do_not_overlap(self):
        booked = make_slot(1, utc(3, 10, 30), booked=True)
        free = make_slot(1, utc(3, 11, 30))

        assert not free.overlaps(booked)

    def test_slots_of_different_managers_never_overlap(self):
        booked = make_slot(1, utc(3, 10, 30), booked=True)
        free = make_slot(2, utc(3, 10, 30))

        assert not free.overlaps(booked)

    def test_contained_slot_overlaps(self):
        booked = make_slot(1, utc(3, 10, 0), booked=True, length=timedelta(hours=3))
        free = make_slot(1, utc(3, 11, 0), length=timedelta(minutes=30))

        assert free.overlaps(booked)


class TestSlotsOnDate:
    def test_keeps_only_slots_starting_on_requested_date(self):
        manager = make_sales_manager(
            1,
            slots=[
                make_slot(1, utc(3, 10, 0)),
                make_slot(1, utc(4, 10, 0)),
                make_slot(1, utc(2, 23, 30)),  # ends on the 3rd
            ],
        )

        result = slots_on_date([manager], MAY_3)

        assert [slot.start_date for slot in result] == [utc(3, 10, 0)]

    def test_uses_utc_date_of_aware_start(self):
        # 2024-05-04 01:00 at UTC+02:00 is 2024-05-03 23:00 UTC
        plus_two = timezone(timedelta(hours=2))
        start = datetime(2024, 5, 4, 1, 0, tzinfo=plus_two)
        manager = make_sales_manager(1, slots=[make_slot(1, start)])

        assert slots_on_date([manager], MAY_3) == manager.slots
        assert slots_on_date([manager], date(2024, 5, 4)) == []


class TestRemoveOverlappingSlots:
    def test_drops_free_slot_overlapping_own_booking(self):
        booked = make_slot(1, utc(3, 10, 30), booked=True)
        overlapping = make_slot(1, utc(3, 11, 0))
        touching = make_slot(1, utc(3, 11, 30))

        result = remove_overlapping_slots([overlapping, touching], [booked])

        assert result == [touching]

    def test_booking_of_another_manager_is_ignored(self):
        booked = make_slot(1, utc(3, 10, 30), booked=True)
        free = make_slot(2, utc(3, 11, 0))

        assert remove_overlapping_slots([free], [booked]) == [free]

    def test_no_bookings_keeps_everything(self):
        free = [make_slot(1, utc(3, 10, 0)), make_slot(1, utc(3, 11, 0))]

        assert remove_overlapping_slots(free, []) == free


class TestSummarizeByStart:
    def test_counts_distinct_sales_managers(self):
        # Duplicate slot rows for manager 1 at the same instant count once
        slots = [
            make_slot(1, utc(3, 10, 30)),
            make_slot(1, utc(3, 10, 30)),
            make_slot(2, utc(3, 10, 30)),
        ]

        result = summarize_by_start(slots)

        assert result == [AvailableSlotSummary(start_date=utc(3, 10, 30), available_count=2)]

    def test_sorted_ascending_with_unique_starts(self):
        slots = [
            make_slot(1, utc(3, 11, 30)),
            make_slot(2, utc(3, 10, 30)),
            make_slot(3, utc(3, 11, 0)),
            make_slot(3, utc(3, 11, 30)),
        ]

        result = summarize_by_start(slots)

        starts = [summary.start_date for summary in result]
        assert starts == [utc(3, 10, 30), utc(3, 11, 0), utc(3, 11, 30)]
        assert [summary.available_count for summary in result] == [1, 1, 2]

    def test_empty_input(self):
        assert summarize_by_start([]) == []


class TestComputeAvailability:
    def test_single_manager_with_one_booking(self):
        # Given: one free slot touching nothing, one free slot overlapping a booking
        manager = make_sales_manager(
            1,
            slots=[
                make_slot(1, utc(3, 9, 0)),
                make_slot(1, utc(3, 10, 30), booked=True),
                make_slot(1, utc(3, 11, 0)),
            ],
        )

        # When
        result = compute_availability([manager], MAY_3)

        # Then
        assert result == [AvailableSlotSummary(start_date=utc(3, 9, 0), available_count=1)]

    def test_free_slots_of_two_managers_at_same_start(self):
        managers = [
            make_sales_manager(1, slots=[make_slot(1, utc(3, 10, 30))]),
            make_sales_manager(2, slots=[make_slot(2, utc(3, 10, 30))]),
        ]

        result = compute_availability(managers, MAY_3)

        assert result == [AvailableSlotSummary(start_date=utc(3, 10, 30), available_count=2)]

    def test_booking_does_not_hide_other_managers_slots(self):
        managers = [
            make_sales_manager(1, slots=[make_slot(1, utc(3, 10, 30), booked=True)]),
            make_sales_manager(2, slots=[make_slot(2, utc(3, 11, 0))]),
        ]

        result = compute_availability(managers, MAY_3)

        assert result == [AvailableSlotSummary(start_date=utc(3, 11, 0), available_count=1)]

    def test_no_slots_on_date(self, reference_sales_managers):
        assert compute_availability(reference_sales_managers, date(2024, 5, 5)) == []

    def test_all_booked(self):
        manager = make_sales_manager(
            1,
            slots=[
                make_slot(1, utc(3, 10, 0), booked=True),
                make_slot(1, utc(3, 11, 0), booked=True),
            ],
        )

        assert compute_availability([manager], MAY_3) == []

    def test_idempotent(self, reference_sales_managers):
        first = compute_availability(reference_sales_managers, MAY_3)
        second = compute_availability(reference_sales_managers, MAY_3)

        assert first == second
        assert [summary.start_date for summary in first] == sorted(
            summary.start_date for summary in first
        )
