"""Models module"""

from .data_models import RemittanceFile, REMITTANCE_MIMETYPE

from .schemas import (
    CompanyProfileSchema,
    PaymentRecordSchema,
    RemittanceRequestSchema
)

__all__ = [
    "RemittanceFile",
    "REMITTANCE_MIMETYPE",
    "CompanyProfileSchema",
    "PaymentRecordSchema",
    "RemittanceRequestSchema"
]
