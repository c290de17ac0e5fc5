"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.appointment.driven_adapter.model.sales_manager_model import SalesManagerModel
from src.service.appointment.driven_adapter.model.slot_model import SlotModel

__all__ = [
    'SalesManagerModel',
    'SlotModel',
]
