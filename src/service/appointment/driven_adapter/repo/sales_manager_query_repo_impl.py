from datetime import datetime, timezone
from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.appointment.app.interface.i_sales_manager_query_repo import (
    ISalesManagerQueryRepo,
)
from src.service.appointment.domain.entity.sales_manager_entity import SalesManagerEntity
from src.service.appointment.domain.entity.slot_entity import SlotEntity
from src.service.appointment.driven_adapter.model.sales_manager_model import SalesManagerModel
from src.service.appointment.driven_adapter.model.slot_model import SlotModel


def _as_utc(value: datetime) -> datetime:
    """timestamptz comes back aware; naive values are stored UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SalesManagerQueryRepoImpl(ISalesManagerQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @staticmethod
    def _to_slot_entity(db_slot: SlotModel) -> SlotEntity:
        return SlotEntity(
            id=db_slot.id,
            sales_manager_id=db_slot.sales_manager_id,
            start_date=_as_utc(db_slot.start_date),
            end_date=_as_utc(db_slot.end_date),
            booked=db_slot.booked,
        )

    @classmethod
    def _to_entity(cls, db_sales_manager: SalesManagerModel) -> SalesManagerEntity:
        return SalesManagerEntity(
            id=db_sales_manager.id,
            name=db_sales_manager.name,
            languages=db_sales_manager.languages or [],
            products=db_sales_manager.products or [],
            customer_ratings=db_sales_manager.customer_ratings or [],
            slots=[cls._to_slot_entity(db_slot) for db_slot in db_sales_manager.slots],
        )

    @Logger.io(truncate_content=True)
    async def list_with_slots(self) -> List[SalesManagerEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SalesManagerModel)
                .options(selectinload(SalesManagerModel.slots))
                .order_by(SalesManagerModel.id)
            )
            sales_managers = [self._to_entity(row) for row in result.scalars().all()]

        Logger.base.info(
            f'🗂️  [SALES_MANAGER_REPO] Loaded {len(sales_managers)} sales managers with '
            f'{sum(len(manager.slots) for manager in sales_managers)} slots'
        )
        return sales_managers
