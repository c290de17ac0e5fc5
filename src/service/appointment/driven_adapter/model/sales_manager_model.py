from typing import TYPE_CHECKING, List

from sqlalchemy import Integer, String
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.db_setting import Base

if TYPE_CHECKING:
    from src.service.appointment.driven_adapter.model.slot_model import SlotModel


class SalesManagerModel(Base):
    __tablename__ = 'sales_managers'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(250), nullable=False)
    languages: Mapped[List[str]] = mapped_column(ARRAY(String(100)), default=list)
    products: Mapped[List[str]] = mapped_column(ARRAY(String(100)), default=list)
    customer_ratings: Mapped[List[str]] = mapped_column(ARRAY(String(100)), default=list)

    # Relationships
    slots: Mapped[List['SlotModel']] = relationship(
        'SlotModel',
        back_populates='sales_manager',
        cascade='all, delete-orphan',
        passive_deletes=True,
        order_by='SlotModel.start_date',
    )
