"""Gerador do arquivo de remessa CNAB 240 para pagamento de DARF sem código de barras.

O banco lê o arquivo por posição fixa: cada linha tem exatamente 240
caracteres e a ordem dos registros é header de arquivo, header de lote,
um detalhe (segmento A) por guia, trailer de lote e trailer de arquivo.
"""

import re
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Iterable, List, Sequence, Union

try:
    from ..data import CompanyProfile, PaymentRecord
    from ..utils import LoggerMixin, only_digits
except (ImportError, ValueError):
    from data import CompanyProfile, PaymentRecord
    from utils import LoggerMixin, only_digits


LINE_LENGTH = 240
LINE_SEPARATOR = "\r\n"

DEFAULT_BANK_CODE = "033"
DEFAULT_BANK_NAME = "BANCO SANTANDER"
BATCH_NUMBER = "0001"
LAYOUT_VERSION = "1"

DETAIL_AMOUNT_WIDTH = 15
TRAILER_AMOUNT_WIDTH = 18

DATE_PATTERN = re.compile(r'(\d{2})[/-](\d{2})[/-](\d{4})')


def pad_text(value: str, size: int) -> str:
    return (value or "").ljust(size, " ")[:size]


def pad_number(value: str, size: int) -> str:
    # estouro descarta os dígitos mais significativos
    return (value or "").rjust(size, "0")[-size:]


def blank(size: int) -> str:
    return " " * size


def to_cents(value: float) -> int:
    return int((Decimal(str(value or 0)) * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def format_amount(value: float, size: int) -> str:
    return pad_number(str(to_cents(value)), size)


def format_cents(cents: int, size: int) -> str:
    return pad_number(str(cents), size)


def format_date(value: Union[str, int, date, None], today: date) -> str:
    """Converte uma data para DDMMAAAA.

    Aceita date/datetime, um valor que já tenha 8 dígitos ou DD/MM/AAAA (com / ou -).
    Qualquer outra coisa vira ``today``: data ruim nunca interrompe a remessa.
    """
    if isinstance(value, date):
        return value.strftime("%d%m%Y")

    cleaned = "" if value is None else str(value).strip()
    if re.fullmatch(r'\d{8}', cleaned):
        return cleaned

    match = DATE_PATTERN.search(cleaned)
    if match:
        day, month, year = match.groups()
        return f"{day}{month}{year}"

    return today.strftime("%d%m%Y")


def build_line(parts: Iterable[str]) -> str:
    return pad_text("".join(parts), LINE_LENGTH)


class Cnab240Writer(LoggerMixin):

    def __init__(
        self,
        bank_name: str = DEFAULT_BANK_NAME,
        default_bank_code: str = DEFAULT_BANK_CODE,
        clock: Callable[[], datetime] = datetime.now
    ):
        super().__init__()
        self.bank_name = bank_name
        self.default_bank_code = default_bank_code
        self.clock = clock

    def generate(self, company: CompanyProfile, records: Sequence[PaymentRecord]) -> str:
        return LINE_SEPARATOR.join(self.build_lines(company, records))

    def build_lines(self, company: CompanyProfile, records: Sequence[PaymentRecord]) -> List[str]:
        created_at = self.clock()
        fields = self._company_fields(company)
        file_date = format_date(created_at.date(), created_at.date())
        file_time = created_at.strftime("%H%M")

        details = [
            self._detail(sequence, record, created_at.date())
            for sequence, record in enumerate(records, start=1)
        ]

        lines = [
            self._file_header(fields, file_date, file_time),
            self._batch_header(fields, file_date, len(records)),
            *details,
            self._batch_trailer(records),
            self._file_trailer(len(details)),
        ]

        self.log_operation("build_lines", details=len(details), lines=len(lines))
        return lines

    def _company_fields(self, company: CompanyProfile) -> dict:
        return {
            "bank": pad_number(only_digits(company.bank) or self.default_bank_code, 3),
            "agency": pad_number(only_digits(company.agency), 4),
            "agency_digit": pad_number(only_digits(company.agency_digit), 1),
            "account": pad_number(only_digits(company.account), 9),
            "account_digit": pad_number(only_digits(company.account_digit), 1),
            "agreement": pad_number(only_digits(company.agreement), 20),
            "cnpj": pad_number(only_digits(company.cnpj), 14),
            "name": (company.company_name or "").upper(),
        }

    def _file_header(self, fields: dict, file_date: str, file_time: str) -> str:
        return build_line([
            "0",
            "1",
            fields["bank"],
            "00000",
            blank(9),
            fields["agreement"],
            blank(5),
            fields["cnpj"],
            blank(20),
            pad_text(fields["name"], 30),
            pad_text(self.bank_name, 30),
            file_date,
            file_time,
            pad_number(LAYOUT_VERSION, 6),
            blank(71),
        ])

    def _batch_header(self, fields: dict, file_date: str, record_count: int) -> str:
        return build_line([
            "1",
            fields["bank"],
            BATCH_NUMBER,
            "1",
            "J",
            blank(2),
            "040",
            blank(1),
            blank(1),
            fields["agreement"],
            blank(5),
            fields["agency"],
            fields["agency_digit"],
            fields["account"],
            blank(1),
            fields["account_digit"],
            pad_text(fields["name"], 40),
            blank(40),
            blank(30),
            file_date,
            blank(8),
            pad_number(str(record_count), 6),
            blank(99),
        ])

    def _detail(self, sequence: int, record: PaymentRecord, today: date) -> str:
        return build_line([
            "3",
            BATCH_NUMBER,
            pad_number(str(sequence), 5),
            "A",
            pad_number(only_digits(record.cnpj), 15),
            pad_text((record.name or "").upper(), 30),
            pad_number(record.revenue_code, 6),
            pad_number(only_digits(record.reference_number), 25),
            format_date(record.period, today),
            format_date(record.due_date, today),
            format_amount(record.principal, DETAIL_AMOUNT_WIDTH),
            format_amount(record.fine, DETAIL_AMOUNT_WIDTH),
            format_amount(record.interest, DETAIL_AMOUNT_WIDTH),
            format_amount(record.total, DETAIL_AMOUNT_WIDTH),
            blank(81),
        ])

    def _batch_trailer(self, records: Sequence[PaymentRecord]) -> str:
        # soma em centavos de cada detalhe, igual ao que o banco confere
        totals = [
            sum(to_cents(getattr(record, name)) for record in records)
            for name in ("principal", "fine", "interest", "total")
        ]
        return build_line([
            "5",
            BATCH_NUMBER,
            pad_number(str(len(records) + 2), 6),
            *(format_cents(total, TRAILER_AMOUNT_WIDTH) for total in totals),
            blank(145),
        ])

    def _file_trailer(self, detail_count: int) -> str:
        return build_line([
            "9",
            pad_number(BATCH_NUMBER, 6),
            pad_number(str(detail_count + 4), 6),
            blank(213),
        ])
