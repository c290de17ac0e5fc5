"""
Wire Modules Configuration

Modules using Provide[Container.xxx] markers; shared by production and tests.
"""

from types import ModuleType

from src.service.appointment.app.query import get_available_slots_use_case


WIRE_MODULES: list[ModuleType] = [
    get_available_slots_use_case,
]
