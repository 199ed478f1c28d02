"""Erros da API de remessa; cada um carrega o status HTTP e o código devolvidos ao cliente"""

from typing import Any, Dict, List, Optional


class RemittanceServiceException(Exception):

    status_code = 500
    error_code = "INTERNAL_ERROR"
    message = "Erro interno ao processar a solicitação."

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message or type(self).message
        self.status_code = status_code or type(self).status_code
        self.error_code = error_code or type(self).error_code
        self.details = dict(details or {})
        super().__init__(self.message)


class ValidationError(RemittanceServiceException):
    """Requisição recusada antes de qualquer processamento (400)"""

    status_code = 400
    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        if field:
            details["field"] = field
        super().__init__(message, details=details)


class IncompleteCompanyError(ValidationError):
    """Dados bancários da empresa sem algum campo obrigatório"""

    error_code = "INCOMPLETE_COMPANY"

    def __init__(self, missing_fields: List[str]):
        super().__init__(
            f"Preencha os campos obrigatórios: {', '.join(missing_fields)}.",
            details={"missing_fields": list(missing_fields)}
        )


class FileProcessingError(RemittanceServiceException):
    """O PDF chegou mas não rendeu guias utilizáveis (422)"""

    status_code = 422
    error_code = "FILE_PROCESSING_ERROR"
    message = "Não foi possível processar o arquivo enviado."


class PDFExtractionError(FileProcessingError):

    error_code = "PDF_EXTRACTION_ERROR"

    def __init__(self, message: Optional[str] = None, pdf_path: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        if pdf_path:
            details["file"] = pdf_path
        super().__init__(message, details=details)


class NoDarfsFoundError(FileProcessingError):

    error_code = "NO_DARFS_FOUND"
    message = "Nenhuma guia de DARF foi identificada no PDF enviado."
