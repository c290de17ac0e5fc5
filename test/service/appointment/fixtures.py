"""
Reference calendar shared by the appointment tests.

Three sales managers with one-hour slots on 2024-05-03 and 2024-05-04 (UTC),
the same data script/seed_data.py loads into PostgreSQL.
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

import pytest

from src.service.appointment.app.interface.i_sales_manager_query_repo import (
    ISalesManagerQueryRepo,
)
from src.service.appointment.domain.entity.sales_manager_entity import SalesManagerEntity
from src.service.appointment.domain.entity.slot_entity import SlotEntity
from src.service.appointment.domain.value_object.availability_request import AvailabilityRequest


SLOT_LENGTH = timedelta(hours=1)


def utc(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 5, day, hour, minute, tzinfo=timezone.utc)


def make_slot(
    sales_manager_id: int,
    start: datetime,
    *,
    booked: bool = False,
    length: timedelta = SLOT_LENGTH,
    slot_id: Optional[int] = None,
) -> SlotEntity:
    return SlotEntity(
        id=slot_id,
        sales_manager_id=sales_manager_id,
        start_date=start,
        end_date=start + length,
        booked=booked,
    )


def make_sales_manager(
    sales_manager_id: int,
    *,
    languages: Iterable[str] = ('German',),
    products: Iterable[str] = ('SolarPanels',),
    customer_ratings: Iterable[str] = ('Gold',),
    slots: Iterable[SlotEntity] = (),
) -> SalesManagerEntity:
    return SalesManagerEntity(
        id=sales_manager_id,
        name=f'Seller {sales_manager_id}',
        languages=languages,
        products=products,
        customer_ratings=customer_ratings,
        slots=list(slots),
    )


def build_reference_sales_managers() -> List[SalesManagerEntity]:
    return [
        make_sales_manager(
            1,
            languages=['German', 'English'],
            products=['SolarPanels'],
            customer_ratings=['Gold', 'Silver', 'Bronze'],
            slots=[
                make_slot(1, utc(3, 10, 30), booked=True, slot_id=1),
                make_slot(1, utc(3, 11, 0), slot_id=2),
                make_slot(1, utc(3, 11, 30), booked=True, slot_id=3),
                make_slot(1, utc(4, 10, 30), slot_id=4),
                make_slot(1, utc(4, 11, 30), booked=True, slot_id=5),
            ],
        ),
        make_sales_manager(
            2,
            languages=['German', 'English'],
            products=['SolarPanels', 'Heatpumps'],
            customer_ratings=['Gold', 'Silver', 'Bronze'],
            slots=[
                make_slot(2, utc(3, 10, 30), slot_id=6),
                make_slot(2, utc(3, 11, 0), slot_id=7),
                make_slot(2, utc(3, 11, 30), slot_id=8),
                make_slot(2, utc(4, 10, 30), booked=True, slot_id=9),
                make_slot(2, utc(4, 11, 0), booked=True, slot_id=10),
                make_slot(2, utc(4, 11, 30), booked=True, slot_id=11),
            ],
        ),
        make_sales_manager(
            3,
            languages=['English'],
            products=['Heatpumps'],
            customer_ratings=['Silver'],
            slots=[
                make_slot(3, utc(3, 10, 30), booked=True, slot_id=12),
                make_slot(3, utc(3, 11, 0), slot_id=13),
                make_slot(3, utc(3, 11, 30), slot_id=14),
                make_slot(3, utc(4, 10, 30), booked=True, slot_id=15),
                make_slot(3, utc(4, 11, 30), slot_id=16),
            ],
        ),
    ]


def make_request(
    date: str = '2024-05-03',
    products: Iterable[str] = ('SolarPanels',),
    language: str = 'German',
    rating: str = 'Gold',
) -> AvailabilityRequest:
    return AvailabilityRequest(date=date, products=products, language=language, rating=rating)


class InMemorySalesManagerQueryRepo(ISalesManagerQueryRepo):
    def __init__(self, sales_managers: List[SalesManagerEntity]) -> None:
        self.sales_managers = sales_managers
        self.calls = 0

    async def list_with_slots(self) -> List[SalesManagerEntity]:
        self.calls += 1
        return list(self.sales_managers)


class FailingSalesManagerQueryRepo(ISalesManagerQueryRepo):
    async def list_with_slots(self) -> List[SalesManagerEntity]:
        raise ConnectionError('database unavailable')


@pytest.fixture
def reference_sales_managers() -> List[SalesManagerEntity]:
    return build_reference_sales_managers()


@pytest.fixture
def in_memory_repo(
    reference_sales_managers: List[SalesManagerEntity],
) -> InMemorySalesManagerQueryRepo:
    return InMemorySalesManagerQueryRepo(reference_sales_managers)
