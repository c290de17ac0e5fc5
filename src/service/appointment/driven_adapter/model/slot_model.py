from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.db_setting import Base

if TYPE_CHECKING:
    from src.service.appointment.driven_adapter.model.sales_manager_model import (
        SalesManagerModel,
    )


class SlotModel(Base):
    __tablename__ = 'slots'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    booked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    sales_manager_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('sales_managers.id', ondelete='CASCADE'), nullable=False, index=True
    )

    # Relationships
    sales_manager: Mapped['SalesManagerModel'] = relationship(
        'SalesManagerModel', back_populates='slots'
    )
