"""Pytest fixtures for testing"""

import itertools
from datetime import datetime

import pytest

from app import create_app
from data.models import CompanyProfile, PaymentRecord


FROZEN_NOW = datetime(2024, 3, 15, 9, 30, 0)


TWO_DARFS_TEXT = """RECEITA FEDERAL DO BRASIL
DARF
DOCUMENTO DE ARRECADAÇÃO DE RECEITAS FEDERAIS
01 NOME: EMPRESA ALFA LTDA
02 PERÍODO DE APURAÇÃO: 31/12/2023
03 NÚMERO DO CNPJ: 12.345.678/0001-90
04 CÓDIGO DA RECEITA: 2089
05 NÚMERO DE REFERÊNCIA: 123456789
06 DATA DE VENCIMENTO: 31/01/2024
07 VALOR DO PRINCIPAL: 1.500,00
08 VALOR DA MULTA: 0,00
09 VALOR DOS JUROS: 0,00
10 VALOR TOTAL: 1.500,00
DARF
DOCUMENTO DE ARRECADAÇÃO DE RECEITAS FEDERAIS
01 NOME: EMPRESA BETA SA
02 PERÍODO DE APURAÇÃO: 30/11/2023
03 NÚMERO DO CNPJ: 98.765.432/0001-10
04 CÓDIGO DA RECEITA: 5952
05 NÚMERO DE REFERÊNCIA: 987
06 DATA DE VENCIMENTO: 20/12/2023
07 VALOR DO PRINCIPAL: 250,00
08 VALOR DA MULTA: 10,00
09 VALOR DOS JUROS: 5,00
10 VALOR TOTAL: 265,00
"""


@pytest.fixture
def app():
    """Flask app configured for testing"""
    return create_app('testing')


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def id_factory():
    """Deterministic identifiers: darf-1, darf-2, ..."""
    counter = itertools.count(1)
    return lambda: f"darf-{next(counter)}"


@pytest.fixture
def two_darfs_text() -> str:
    return TWO_DARFS_TEXT


@pytest.fixture
def frozen_clock():
    return lambda: FROZEN_NOW


@pytest.fixture
def company() -> CompanyProfile:
    return CompanyProfile(
        bank="033",
        agency="1234",
        agency_digit="5",
        account="12345678",
        account_digit="9",
        agreement="ABC123456",
        company_name="Empresa Teste Ltda",
        cnpj="12.345.678/0001-90"
    )


@pytest.fixture
def company_payload(company) -> dict:
    return company.to_dict()


@pytest.fixture
def sample_records() -> list:
    return [
        PaymentRecord(
            id="darf-1",
            name="Empresa Alfa Ltda",
            period="31/12/2023",
            cnpj="12345678000190",
            revenue_code="2089",
            reference_number="123456789",
            due_date="31/01/2024",
            principal=1500.00,
            fine=0.0,
            interest=0.0,
            total=1500.00
        ),
        PaymentRecord(
            id="darf-2",
            name="Empresa Beta SA",
            period="30/11/2023",
            cnpj="98765432000110",
            revenue_code="5952",
            reference_number="987",
            due_date="20/12/2023",
            principal=250.00,
            fine=10.00,
            interest=5.00,
            total=265.00
        ),
    ]
