"""Controllers module"""

from .darf_controller import create_darf_controller
from .remittance_controller import create_remittance_controller
from .health_controller import create_health_controller

__all__ = [
    "create_darf_controller",
    "create_remittance_controller",
    "create_health_controller"
]
