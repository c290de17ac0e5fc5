"""
Pytest configuration for appointment tests.

Re-exports shared fixtures from test/service/appointment/fixtures.py
"""

from test.service.appointment.fixtures import in_memory_repo, reference_sales_managers

__all__ = [
    'in_memory_repo',
    'reference_sales_managers',
]
