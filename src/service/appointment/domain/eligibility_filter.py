from typing import List, Sequence

from src.platform.logging.loguru_io import Logger
from src.service.appointment.domain.value_object.availability_request import AvailabilityRequest
from src.service.appointment.domain.entity.sales_manager_entity import SalesManagerEntity


def is_eligible(sales_manager: SalesManagerEntity, request: AvailabilityRequest) -> bool:
    return (
        sales_manager.speaks(request.language)
        and sales_manager.sells_all(request.products)
        and sales_manager.accepts_rating(request.rating)
    )


def select_eligible(
    sales_managers: Sequence[SalesManagerEntity], request: AvailabilityRequest
) -> List[SalesManagerEntity]:
    """Sales managers matching the language, every requested product and the rating."""
    eligible = [manager for manager in sales_managers if is_eligible(manager, request)]

    Logger.base.info(
        f'🔎 [ELIGIBILITY] {len(eligible)}/{len(sales_managers)} sales managers match '
        f'language={request.language} products={request.products} rating={request.rating}: '
        f'{[manager.id for manager in eligible]}'
    )
    return eligible
