#!/usr/bin/env python3
"""
Database Seed Script
Populate the reference calendar into the database

Features:
1. Create Sales Managers - 3 sellers with language, product and rating tags
2. Create Slots - one-hour slots on 2024-05-03 and 2024-05-04, some booked

Notes:
- Existing sales managers and slots are deleted first
- Missing tables are created; `python -m script.reset_database` rebuilds via Alembic
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import List, Tuple

from sqlalchemy import delete

from src.platform.database.db_setting import (
    create_db_and_tables,
    dispose_engine,
    get_session_maker,
)
from src.service.appointment.driven_adapter.model import SalesManagerModel, SlotModel

SLOT_LENGTH = timedelta(hours=1)


@dataclass
class SalesManagerConfig:
    """Sales manager seed configuration"""

    name: str
    languages: List[str]
    products: List[str]
    customer_ratings: List[str]
    # (start in UTC, booked)
    slots: List[Tuple[datetime, bool]] = field(default_factory=list)


def _utc(day: int, hour: int, minute: int) -> datetime:
    return datetime(2024, 5, day, hour, minute, tzinfo=timezone.utc)


SALES_MANAGERS = [
    SalesManagerConfig(
        name='Seller 1',
        languages=['German', 'English'],
        products=['SolarPanels'],
        customer_ratings=['Gold', 'Silver', 'Bronze'],
        slots=[
            (_utc(3, 10, 30), True),
            (_utc(3, 11, 0), False),
            (_utc(3, 11, 30), True),
            (_utc(4, 10, 30), False),
            (_utc(4, 11, 30), True),
        ],
    ),
    SalesManagerConfig(
        name='Seller 2',
        languages=['German', 'English'],
        products=['SolarPanels', 'Heatpumps'],
        customer_ratings=['Gold', 'Silver', 'Bronze'],
        slots=[
            (_utc(3, 10, 30), False),
            (_utc(3, 11, 0), False),
            (_utc(3, 11, 30), False),
            (_utc(4, 10, 30), True),
            (_utc(4, 11, 0), True),
            (_utc(4, 11, 30), True),
        ],
    ),
    SalesManagerConfig(
        name='Seller 3',
        languages=['English'],
        products=['Heatpumps'],
        customer_ratings=['Silver'],
        slots=[
            (_utc(3, 10, 30), True),
            (_utc(3, 11, 0), False),
            (_utc(3, 11, 30), False),
            (_utc(4, 10, 30), True),
            (_utc(4, 11, 30), False),
        ],
    ),
]


def _build_model(config: SalesManagerConfig) -> SalesManagerModel:
    return SalesManagerModel(
        name=config.name,
        languages=config.languages,
        products=config.products,
        customer_ratings=config.customer_ratings,
        slots=[
            SlotModel(start_date=start, end_date=start + SLOT_LENGTH, booked=booked)
            for start, booked in config.slots
        ],
    )


async def seed_sales_managers() -> None:
    session_maker = get_session_maker()
    async with session_maker() as session:
        await session.execute(delete(SlotModel))
        await session.execute(delete(SalesManagerModel))

        for config in SALES_MANAGERS:
            session.add(_build_model(config))
            print(f'   ✅ {config.name}: {len(config.slots)} slots')

        await session.commit()


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        await create_db_and_tables()
        await seed_sales_managers()
        print('=' * 50)
        print(f'✅ Seeded {len(SALES_MANAGERS)} sales managers')
    except Exception as e:
        print(f'❌ Seed failed: {e}')
        raise SystemExit(1) from e
    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
