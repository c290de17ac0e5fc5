"""
Sales Manager Query Repository Interface

Read side of the appointment store
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.appointment.domain.entity.sales_manager_entity import SalesManagerEntity


class ISalesManagerQueryRepo(ABC):
    @abstractmethod
    async def list_with_slots(self) -> List[SalesManagerEntity]:
        """Every sales manager with its full slot calendar eagerly loaded."""
        pass
