from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_serializer


class AvailabilityQueryRequest(BaseModel):
    """Fields are optional here so blank/missing values get the calendar's own 400 messages."""

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'date': '2024-05-03',
                'products': ['SolarPanels', 'Heatpumps'],
                'language': 'German',
                'rating': 'Gold',
            }
        }
    )

    date: Optional[str] = None
    products: Optional[List[str]] = None
    language: Optional[str] = None
    rating: Optional[str] = None


class AvailableSlotResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {'start_date': '2024-05-03T10:30:00.000Z', 'available_count': 1}
        }
    )

    start_date: datetime
    available_count: int

    @field_serializer('start_date')
    def serialize_start_date(self, start_date: datetime) -> str:
        """ISO-8601 UTC with millisecond precision, e.g. 2024-05-03T10:30:00.000Z"""
        if start_date.tzinfo is None:
            start_date = start_date.replace(tzinfo=timezone.utc)
        utc = start_date.astimezone(timezone.utc)
        return f'{utc.strftime("%Y-%m-%dT%H:%M:%S")}.{utc.microsecond // 1000:03d}Z'
