from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status

from src.platform.exception.exceptions import MissingFieldError
from src.platform.logging.loguru_io import Logger
from src.service.appointment.app.query.get_available_slots_use_case import (
    GetAvailableSlotsUseCase,
)
from src.service.appointment.domain.value_object.availability_request import AvailabilityRequest
from src.service.appointment.driving_adapter.http_controller.schema.calendar_schema import (
    AvailabilityQueryRequest,
    AvailableSlotResponse,
)


router = APIRouter()


def _to_availability_request(request: Optional[AvailabilityQueryRequest]) -> AvailabilityRequest:
    if request is None:
        raise MissingFieldError('Request body cannot be null.')
    if not request.date or not request.date.strip():
        raise MissingFieldError('Date is required.')
    if not request.products:
        raise MissingFieldError('At least one product must be selected.')
    if not request.language or not request.language.strip():
        raise MissingFieldError('Language is required.')
    if not request.rating or not request.rating.strip():
        raise MissingFieldError('Customer rating is required.')

    return AvailabilityRequest(
        date=request.date,
        products=request.products,
        language=request.language,
        rating=request.rating,
    )


@router.post('/query', status_code=status.HTTP_200_OK)
@Logger.io
async def query_available_slots(
    request: Optional[AvailabilityQueryRequest] = Body(None),
    use_case: GetAvailableSlotsUseCase = Depends(GetAvailableSlotsUseCase.depends),
) -> List[AvailableSlotResponse]:
    """Free appointment start times on a date, with how many sales managers are free at each."""
    availability_request = _to_availability_request(request)

    slots = await use_case.get_available_slots(availability_request)

    return [
        AvailableSlotResponse(start_date=slot.start_date, available_count=slot.available_count)
        for slot in slots
    ]
