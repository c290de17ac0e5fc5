"""
Availability aggregation over the eligible sales managers' calendars.

Steps:
1. Keep slots starting on the requested date (UTC)
2. Split into booked and free
3. Drop free slots overlapping a booked slot of the same sales manager
4. Group the rest by exact start instant, count distinct sales managers
5. Sort ascending by start instant
"""

from collections import defaultdict
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Sequence, Set

from src.platform.logging.loguru_io import Logger
from src.service.appointment.domain.entity.sales_manager_entity import SalesManagerEntity
from src.service.appointment.domain.entity.slot_entity import SlotEntity
from src.service.appointment.domain.value_object.available_slot_summary import (
    AvailableSlotSummary,
)


def _utc_date(instant: datetime) -> date:
    if instant.tzinfo is None:
        return instant.date()
    return instant.astimezone(timezone.utc).date()


def slots_on_date(
    sales_managers: Iterable[SalesManagerEntity], requested_date: date
) -> List[SlotEntity]:
    return [
        slot
        for manager in sales_managers
        for slot in manager.slots
        if _utc_date(slot.start_date) == requested_date
    ]


def remove_overlapping_slots(
    free_slots: Sequence[SlotEntity], booked_slots: Sequence[SlotEntity]
) -> List[SlotEntity]:
    booked_by_manager: Dict[int, List[SlotEntity]] = defaultdict(list)
    for booked in booked_slots:
        booked_by_manager[booked.sales_manager_id].append(booked)

    return [
        free
        for free in free_slots
        if not any(free.overlaps(booked) for booked in booked_by_manager[free.sales_manager_id])
    ]


def summarize_by_start(slots: Iterable[SlotEntity]) -> List[AvailableSlotSummary]:
    managers_by_start: Dict[datetime, Set[int]] = defaultdict(set)
    for slot in slots:
        managers_by_start[slot.start_date].add(slot.sales_manager_id)

    return sorted(
        AvailableSlotSummary(start_date=start_date, available_count=len(manager_ids))
        for start_date, manager_ids in managers_by_start.items()
    )


def compute_availability(
    sales_managers: Sequence[SalesManagerEntity], requested_date: date
) -> List[AvailableSlotSummary]:
    candidates = slots_on_date(sales_managers, requested_date)
    booked = [slot for slot in candidates if slot.booked]
    free = [slot for slot in candidates if not slot.booked]

    available = remove_overlapping_slots(free, booked)
    summaries = summarize_by_start(available)

    Logger.base.info(
        f'📅 [AVAILABILITY] {requested_date}: {len(candidates)} slots '
        f'({len(booked)} booked, {len(free) - len(available)} overlapping) '
        f'-> {len(summaries)} start times'
    )
    return summaries
