from dataclasses import dataclass
from typing import List

from processors.cnab240_writer import LINE_SEPARATOR

REMITTANCE_MIMETYPE = "text/plain; charset=utf-8"


@dataclass(frozen=True)
class RemittanceFile:
    """Arquivo .rem pronto para download: linhas CNAB 240 e o nome REM_*.rem"""
    filename: str
    lines: List[str]
    record_count: int

    @property
    def content(self) -> str:
        return LINE_SEPARATOR.join(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def to_bytes(self) -> bytes:
        return self.content.encode("utf-8")
