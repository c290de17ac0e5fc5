from datetime import datetime

import attrs


@attrs.define(frozen=True, order=True)
class AvailableSlotSummary:
    """Number of distinct sales managers free at a slot start instant."""

    start_date: datetime
    available_count: int = attrs.field(order=False)
