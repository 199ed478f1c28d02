"""Unit tests for the DARF text extractor"""

import pytest

from extractors.darf_extractor import (
    DarfExtractor,
    block_lines,
    match_field,
    normalize_amount,
    parse_block,
    parse_darfs,
    sanitize_line,
    split_blocks,
)
from utils import PDFExtractionError


@pytest.mark.parametrize("raw, expected", [
    ("1.234,56", 1234.56),
    ("R$ 45,00", 45.00),
    ("1.500", 1500.00),
    ("12.345.678,90", 12345678.90),
    ("0,00", 0.00),
    ("abc", 0.00),
    ("", 0.00),
])
def test_normalize_amount(raw, expected):
    assert normalize_amount(raw) == pytest.approx(expected)


def test_normalize_amount_rounds_to_cents():
    assert normalize_amount("10,005") == 10.01
    assert normalize_amount("R$ 7,1") == 7.10


def test_normalize_amount_is_never_negative():
    assert normalize_amount("-45,00") == 45.00


def test_sanitize_line_collapses_whitespace_and_colon():
    assert sanitize_line("  01   NOME :  EMPRESA  ") == "01 NOME: EMPRESA"


def test_sanitize_line_removes_dot_leaders():
    assert sanitize_line("07 VALOR DO PRINCIPAL.......1.500,00") == "07 VALOR DO PRINCIPAL 1.500,00"


def test_block_lines_drops_empty_lines():
    assert block_lines("01 NOME: A\n\n   \n......\n10 VALOR TOTAL: 1,00") == [
        "01 NOME: A",
        "10 VALOR TOTAL: 1,00",
    ]


def test_match_field_reads_code_and_value():
    assert match_field("01 NOME: EMPRESA ALFA LTDA") == ("01", "EMPRESA ALFA LTDA")
    assert match_field("7 VALOR DO PRINCIPAL - 1.500,00") == ("07", "1.500,00")
    assert match_field("02 PERÍODO DE APURAÇÃO: 31/12/2023") == ("02", "31/12/2023")


def test_match_field_ignores_unnumbered_lines():
    assert match_field("DOCUMENTO DE ARRECADAÇÃO DE RECEITAS FEDERAIS") is None
    assert match_field("1.500,00") is None


def test_parse_two_blocks_without_cross_block_bleed(two_darfs_text, id_factory):
    records = parse_darfs(two_darfs_text, id_factory)

    assert len(records) == 2
    alfa, beta = records

    assert alfa.id == "darf-1"
    assert alfa.name == "EMPRESA ALFA LTDA"
    assert alfa.period == "31/12/2023"
    assert alfa.cnpj == "12.345.678/0001-90"
    assert alfa.revenue_code == "2089"
    assert alfa.reference_number == "123456789"
    assert alfa.due_date == "31/01/2024"
    assert alfa.principal == 1500.00
    assert alfa.fine == 0.00
    assert alfa.total == 1500.00

    assert beta.id == "darf-2"
    assert beta.name == "EMPRESA BETA SA"
    assert beta.revenue_code == "5952"
    assert beta.principal == 250.00
    assert beta.fine == 10.00
    assert beta.interest == 5.00
    assert beta.total == 265.00


def test_split_blocks_on_darf_marker(two_darfs_text):
    blocks = split_blocks(two_darfs_text)
    assert len([block for block in blocks if "01 NOME" in block]) == 2


def test_split_blocks_falls_back_to_name_field():
    text = (
        "01 NOME: EMPRESA ALFA\n"
        "07 VALOR DO PRINCIPAL: 100,00\n"
        "10 VALOR TOTAL: 100,00\n"
        "01 NOME: EMPRESA BETA\n"
        "10 VALOR TOTAL: 200,00\n"
    )
    blocks = split_blocks(text)

    assert len(blocks) == 2
    assert all(block.startswith("01 NOME") for block in blocks)

    records = parse_darfs(text)
    assert [record.name for record in records] == ["EMPRESA ALFA", "EMPRESA BETA"]
    assert [record.total for record in records] == [100.00, 200.00]
    assert records[1].principal == 0.0


def test_text_without_field_codes_yields_no_records():
    text = "Comprovante de pagamento\nBanco do Brasil\nObrigado pela preferência"

    assert parse_darfs(text) == []
    assert parse_darfs(text) == []


def test_blank_text_yields_no_records():
    assert parse_darfs("") == []


def test_duplicate_code_overwrites_previous_value(id_factory):
    block = (
        "01 NOME: PRIMEIRO NOME\n"
        "01 NOME: SEGUNDO NOME\n"
        "10 VALOR TOTAL: 50,00\n"
    )
    records = parse_block(block, id_factory)

    assert len(records) == 1
    assert records[0].name == "SEGUNDO NOME"


def test_total_flushes_each_record_in_the_same_block(id_factory):
    block = (
        "01 NOME: A\n"
        "10 VALOR TOTAL: 1,00\n"
        "01 NOME: B\n"
        "10 VALOR TOTAL: 2,00\n"
    )
    records = parse_block(block, id_factory)

    assert [(r.name, r.total) for r in records] == [("A", 1.00), ("B", 2.00)]
    assert len({r.id for r in records}) == 2


def test_block_without_total_is_still_flushed():
    text = (
        "DARF\n"
        "01 NOME: SEM TOTAL\n"
        "07 VALOR DO PRINCIPAL: 99,90\n"
    )
    records = parse_darfs(text)

    assert len(records) == 1
    assert records[0].name == "SEM TOTAL"
    assert records[0].principal == 99.90
    assert records[0].total == 0.0
    assert records[0].due_date == ""


def test_value_wrapped_to_next_line():
    text = (
        "DARF\n"
        "01 NOME: EMPRESA GAMA\n"
        "10 VALOR TOTAL:\n"
        "1.750,00\n"
    )
    records = parse_darfs(text)

    assert len(records) == 1
    assert records[0].total == 1750.00


def test_fields_in_any_order(id_factory):
    block = (
        "06 DATA DE VENCIMENTO: 20/02/2024\n"
        "04 CÓDIGO DA RECEITA: 0561\n"
        "01 NOME: EMPRESA DELTA\n"
        "10 VALOR TOTAL: 10,00\n"
    )
    records = parse_block(block, id_factory)

    assert len(records) == 1
    record = records[0]

    assert record.due_date == "20/02/2024"
    assert record.revenue_code == "0561"
    assert record.name == "EMPRESA DELTA"


def test_default_identifiers_are_unique(two_darfs_text):
    records = parse_darfs(two_darfs_text)
    assert len({record.id for record in records}) == len(records)


def test_extractor_uses_injected_id_factory(two_darfs_text, id_factory):
    extractor = DarfExtractor(id_factory=id_factory)
    records = extractor.extract_from_text(two_darfs_text)
    assert [record.id for record in records] == ["darf-1", "darf-2"]


def test_extract_text_wraps_pdf_errors(tmp_path):
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"not a pdf at all")

    with pytest.raises(PDFExtractionError) as exc_info:
        DarfExtractor().extract_text(str(broken), filename="broken.pdf")

    assert exc_info.value.__cause__ is not None
    assert exc_info.value.details["pdf_name"] == "broken.pdf"


class FakePage:

    def __init__(self, text):
        self.text = text

    def extract_text(self):
        return self.text


class FakePdf:

    def __init__(self, *texts):
        self.pages = [FakePage(text) for text in texts]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_extract_text_joins_pages(monkeypatch, two_darfs_text):
    monkeypatch.setattr(
        "extractors.darf_extractor.pdfplumber.open", lambda source: FakePdf(two_darfs_text, None, "fim")
    )

    text = DarfExtractor().extract_text("guias.pdf")

    assert text == f"{two_darfs_text}\n\nfim"


def test_extract_text_rejects_short_text(monkeypatch):
    monkeypatch.setattr("extractors.darf_extractor.pdfplumber.open", lambda source: FakePdf("  DARF  "))

    with pytest.raises(PDFExtractionError) as exc_info:
        DarfExtractor(min_text_length=20).extract_text("vazio.pdf")

    assert exc_info.value.text_length == 4
    assert exc_info.value.details == {"pdf_name": "vazio.pdf", "text_length": 4}
