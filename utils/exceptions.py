from typing import Any, Dict, Optional


class RemittanceError(Exception):
    """Erro base do núcleo de extração de DARF e geração da remessa"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class PDFExtractionError(RemittanceError):
    """O pdfplumber não entregou texto utilizável do PDF

    ``text_length`` vem preenchido quando o PDF abriu mas o texto extraído
    é curto demais para conter uma guia (PDF escaneado, sem camada de texto).
    """

    def __init__(self, message: str, pdf_name: str = "", text_length: Optional[int] = None):
        details: Dict[str, Any] = {"pdf_name": pdf_name} if pdf_name else {}
        if text_length is not None:
            details["text_length"] = text_length
        super().__init__(message, details)
        self.pdf_name = pdf_name
        self.text_length = text_length
