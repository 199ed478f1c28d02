"""Services module"""

from .darf_service import DarfService
from .remittance_service import RemittanceService

__all__ = [
    "DarfService",
    "RemittanceService"
]
