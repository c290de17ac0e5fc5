from datetime import datetime
from typing import Optional

import attrs


@attrs.define(frozen=True)
class SlotEntity:
    sales_manager_id: int
    start_date: datetime
    end_date: datetime
    booked: bool = False
    id: Optional[int] = None

    def overlaps(self, other: 'SlotEntity') -> bool:
        """Half-open interval overlap, only between slots of the same sales manager."""
        return (
            self.sales_manager_id == other.sales_manager_id
            and self.start_date < other.end_date
            and self.end_date > other.start_date
        )
