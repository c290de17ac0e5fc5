from src.service.appointment.app.interface.i_sales_manager_query_repo import (
    ISalesManagerQueryRepo,
)

__all__ = ['ISalesManagerQueryRepo']
