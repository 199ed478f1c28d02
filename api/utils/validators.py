"""Validation utilities"""

from typing import List

from data.models import CompanyProfile


class CompanyValidator:
    """Presence checks for the company banking data"""

    REQUIRED_FIELDS = (
        ("bank", "Banco"),
        ("agency", "Agência"),
        ("agency_digit", "DV da agência"),
        ("account", "Conta"),
        ("account_digit", "Dígito da conta"),
        ("agreement", "Convênio"),
        ("company_name", "Empresa"),
        ("cnpj", "CNPJ"),
    )

    @classmethod
    def missing_fields(cls, company: CompanyProfile) -> List[str]:
        """Labels of the empty fields, in form order"""
        return [
            label for attr, label in cls.REQUIRED_FIELDS
            if not str(getattr(company, attr, "") or "").strip()
        ]

