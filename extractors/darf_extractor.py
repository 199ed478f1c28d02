"""Extração heurística de guias de DARF a partir do texto bruto de um PDF.

O texto vem do pdfplumber sem estrutura confiável: espaços sobrando,
pontilhados de preenchimento e rótulos com ou sem acento. Cada guia é
separada em um bloco, as linhas numeradas (01 a 10) são reconhecidas e os
valores normalizados em um ``PaymentRecord``.
"""

import re
import uuid
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, BinaryIO, Callable, Dict, List, Optional, Tuple, Union

import pdfplumber

try:
    from ..data import PaymentRecord
    from ..utils import LoggerMixin, PDFExtractionError
except (ImportError, ValueError):
    from data import PaymentRecord
    from utils import LoggerMixin, PDFExtractionError


TEXT_FIELDS = {
    "01": "name",
    "02": "period",
    "03": "cnpj",
    "04": "revenue_code",
    "05": "reference_number",
    "06": "due_date",
}

AMOUNT_FIELDS = {
    "07": "principal",
    "08": "fine",
    "09": "interest",
    "10": "total",
}

FIELD_CODES = tuple(TEXT_FIELDS) + tuple(AMOUNT_FIELDS)
TOTAL_CODE = "10"

BLOCK_MARKER = re.compile(r'(?:^|\n)\s*(?:DOCUMENTO DE ARRECADA[CÇ][AÃ]O|DARF)\b', re.IGNORECASE)
NAME_FIELD_MARKER = re.compile(r'(?:^|\n)0?1\s+NOME', re.IGNORECASE)
FIELD_LINE = re.compile(r'^0?(\d{1,2})\s*[-:]*\s*([A-ZÀ-ÿ\s]+)(?:[:\-]\s*|\s{2,}|\s)(.*)$', re.IGNORECASE)

THOUSANDS_SEPARATOR = re.compile(r'\.(?=\d{3}(?:\D|$))')
NUMERIC_PREFIX = re.compile(r'\d+(?:\.\d*)?|\.\d+')
CENTS = Decimal('0.01')


def sanitize_line(line: str) -> str:
    line = re.sub(r'\s+', ' ', line)
    line = re.sub(r'\.\.+', ' ', line)
    line = re.sub(r'\s:', ':', line)
    return line.strip()


def normalize_amount(value: str) -> float:
    """Converte um valor monetário brasileiro ("1.234,56", "R$ 45,00") em float.

    Pontos de milhar são removidos e a vírgula decimal vira ponto. Qualquer
    valor que não possa ser lido vira 0.0; sinal é descartado.
    """
    cleaned = re.sub(r'[^0-9,.\-]', '', value or '')
    cleaned = THOUSANDS_SEPARATOR.sub('', cleaned)
    cleaned = cleaned.replace(',', '.').lstrip('-')

    match = NUMERIC_PREFIX.match(cleaned)
    if not match:
        return 0.0
    try:
        amount = Decimal(match.group(0))
    except InvalidOperation:
        return 0.0
    return float(amount.quantize(CENTS, rounding=ROUND_HALF_UP))


def split_blocks(text: str) -> List[str]:
    """Separa o texto em um bloco por guia.

    Primeiro tenta o cabeçalho "DOCUMENTO DE ARRECADAÇÃO"/"DARF" no início de
    linha. Se não houver mais de um, divide pela linha "01 NOME" e descarta os
    fragmentos sem nenhum código de campo.
    """
    cleaned_text = text.replace('\r', '')

    blocks = [block.strip() for block in BLOCK_MARKER.split(cleaned_text)]
    blocks = [block for block in blocks if block]
    if len(blocks) > 1:
        return blocks

    fragments = NAME_FIELD_MARKER.split(cleaned_text)
    fallback = []
    for index, fragment in enumerate(fragments):
        fragment = (fragment if index == 0 else f"01 NOME {fragment}").strip()
        if any(code in fragment for code in FIELD_CODES):
            fallback.append(fragment)

    return fallback or [cleaned_text]


def block_lines(block: str) -> List[str]:
    lines = (sanitize_line(line) for line in re.split(r'\n+', block))
    return [line for line in lines if line]


def match_field(line: str) -> Optional[Tuple[str, str]]:
    """Retorna (código com 2 dígitos, valor) para uma linha numerada, ou None."""
    match = FIELD_LINE.match(line)
    if not match:
        return None
    code_raw, _label, value = match.groups()
    return code_raw.zfill(2), (value or '').strip()


@dataclass
class ScanState:
    """Acumulador da varredura de um bloco: campos pendentes e guias fechadas."""
    pending: Dict[str, Any] = field(default_factory=dict)
    records: List[PaymentRecord] = field(default_factory=list)

    def assign(self, code: str, value: str) -> None:
        if code in TEXT_FIELDS:
            self.pending[TEXT_FIELDS[code]] = value
        elif code in AMOUNT_FIELDS:
            self.pending[AMOUNT_FIELDS[code]] = normalize_amount(value)

    def flush(self, new_id: Callable[[], str]) -> None:
        if self.pending:
            self.records.append(PaymentRecord(id=new_id(), **self.pending))
        self.pending = {}

    def finish(self, new_id: Callable[[], str]) -> List[PaymentRecord]:
        # guia sem linha 10 reconhecida ainda vira registro
        if self.pending and 'total' not in self.pending:
            self.flush(new_id)
        return self.records


def parse_block(block: str, new_id: Callable[[], str]) -> List[PaymentRecord]:
    lines = block_lines(block)
    state = ScanState()

    for index, line in enumerate(lines):
        matched = match_field(line)
        if not matched:
            continue

        code, value = matched
        if not value and index + 1 < len(lines):
            value = lines[index + 1]

        state.assign(code, value)
        if code == TOTAL_CODE:
            state.flush(new_id)

    return state.finish(new_id)


def default_id() -> str:
    return str(uuid.uuid4())


def parse_darfs(text: str, new_id: Callable[[], str] = default_id) -> List[PaymentRecord]:
    records: List[PaymentRecord] = []
    for block in split_blocks(text or ''):
        records.extend(parse_block(block, new_id))
    return records


class DarfExtractor(LoggerMixin):

    def __init__(self, id_factory: Callable[[], str] = default_id, min_text_length: int = 20):
        super().__init__()
        self.id_factory = id_factory
        self.min_text_length = min_text_length

    def extract_text(self, source: Union[str, BinaryIO], filename: str = "") -> str:
        """Lê o texto de todas as páginas do PDF com pdfplumber."""
        pdf_name = filename or (source if isinstance(source, str) else "")
        try:
            with pdfplumber.open(source) as pdf:
                full_text = "\n".join((page.extract_text() or "") for page in pdf.pages)
        except Exception as e:
            self.log_error(e, "extract_text", pdf_name=pdf_name)
            raise PDFExtractionError(f"Erro ao extrair texto do PDF: {e}", pdf_name=pdf_name) from e

        text_length = len(full_text.strip())
        if text_length < self.min_text_length:
            self.log_warning("Texto extraído insuficiente", pdf_name=pdf_name, text_length=text_length)
            raise PDFExtractionError(
                "Texto extraído insuficiente para análise", pdf_name=pdf_name, text_length=text_length
            )

        return full_text

    def extract_from_text(self, text: str) -> List[PaymentRecord]:
        records = parse_darfs(text, self.id_factory)
        self.log_operation("extract_from_text", blocks=len(split_blocks(text or '')), records=len(records))
        return records

