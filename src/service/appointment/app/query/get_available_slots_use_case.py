import time
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidArgumentError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.appointment_metrics import metrics
from src.service.appointment.app.interface.i_sales_manager_query_repo import (
    ISalesManagerQueryRepo,
)
from src.service.appointment.domain.availability_aggregator import compute_availability
from src.service.appointment.domain.eligibility_filter import select_eligible
from src.service.appointment.domain.value_object.availability_request import AvailabilityRequest
from src.service.appointment.domain.value_object.available_slot_summary import (
    AvailableSlotSummary,
)
from src.service.appointment.domain.value_object.requested_date import (
    INVALID_DATE_MESSAGE,
    parse_requested_date,
)


class GetAvailableSlotsUseCase:
    def __init__(self, sales_manager_query_repo: ISalesManagerQueryRepo) -> None:
        self.sales_manager_query_repo = sales_manager_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        sales_manager_query_repo: ISalesManagerQueryRepo = Depends(
            Provide[Container.sales_manager_query_repo]
        ),
    ) -> Self:
        return cls(sales_manager_query_repo=sales_manager_query_repo)

    @Logger.io
    async def get_available_slots(self, request: AvailabilityRequest) -> List[AvailableSlotSummary]:
        """
        Free slot start times on the requested date with the number of distinct
        eligible sales managers free at each.

        Raises:
            InvalidArgumentError: date is not yyyy-MM-dd (checked before any store read)
        """
        started_at = time.perf_counter()
        result = 'error'
        try:
            parsed = parse_requested_date(request.date)
            requested_date = parsed.value
            if requested_date is None:
                result = 'invalid_date'
                raise InvalidArgumentError(parsed.error or INVALID_DATE_MESSAGE)

            Logger.base.info(f'📌 [AVAILABLE_SLOTS] Received appointment request: {request}')

            sales_managers = await self.sales_manager_query_repo.list_with_slots()
            eligible = select_eligible(sales_managers, request)
            metrics.record_eligible(count=len(eligible))

            if not eligible:
                Logger.base.info('📭 [AVAILABLE_SLOTS] No matching sales managers found')
                result = 'no_match'
                return []

            summaries = compute_availability(eligible, requested_date)
            result = 'ok' if summaries else 'empty'

            Logger.base.info(f'✅ [AVAILABLE_SLOTS] Returning {len(summaries)} available slots')
            return summaries
        finally:
            metrics.record_query(result=result, duration=time.perf_counter() - started_at)
