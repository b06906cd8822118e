"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.lending.app.query import get_reservation_use_case, list_reservations_use_case


WIRE_MODULES: list[ModuleType] = [
    get_reservation_use_case,
    list_reservations_use_case,
]
