from dataclasses import dataclass, asdict, fields
from typing import Any, Dict

AMOUNT_FIELDS = ("principal", "fine", "interest", "total")


@dataclass(frozen=True)
class PaymentRecord:
    """Uma guia de DARF extraída do texto do PDF."""
    id: str
    name: str = ""
    period: str = ""
    cnpj: str = ""
    revenue_code: str = ""
    reference_number: str = ""
    due_date: str = ""
    principal: float = 0.0
    fine: float = 0.0
    interest: float = 0.0
    total: float = 0.0

    def __post_init__(self):
        # o CNAB grava valores sem sinal; negativo corromperia o campo numérico
        for name in AMOUNT_FIELDS:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} não pode ser negativo: {getattr(self, name)}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PaymentRecord':
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


@dataclass
class CompanyProfile:
    bank: str = ""; agency: str = ""; agency_digit: str = ""; account: str = ""
    account_digit: str = ""; agreement: str = ""; company_name: str = ""; cnpj: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CompanyProfile':
        known = {f.name for f in fields(cls)}
        return cls(**{key: str(value or "") for key, value in data.items() if key in known})
