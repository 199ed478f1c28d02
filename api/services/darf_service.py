from dataclasses import replace
from typing import List
from werkzeug.datastructures import FileStorage

from data.models import PaymentRecord
from extractors import DarfExtractor
from utils import PDFExtractionError as TextExtractionError, only_digits

from ..config import Config
from ..exceptions import ValidationError, PDFExtractionError, NoDarfsFoundError
from ..utils.helpers import FileHelper
from ..utils.logger import get_service_logger, log_performance


class DarfService:
    """Recebe o PDF enviado, extrai o texto e devolve as guias encontradas"""

    def __init__(self, config: Config, extractor: DarfExtractor = None):
        self.config = config
        self.logger = get_service_logger('darf')
        self.extractor = extractor or DarfExtractor(min_text_length=config.MIN_TEXT_LENGTH)

    def parse_upload(self, file: FileStorage) -> List[PaymentRecord]:
        if file is None or not file.filename:
            raise ValidationError("Arquivo PDF não encontrado.", field="file")

        if not FileHelper.is_allowed(file.filename, self.config.ALLOWED_EXTENSIONS):
            raise ValidationError("O arquivo enviado deve ser um PDF.", field="file")

        with log_performance("parse_darf_pdf", pdf_name=file.filename):
            try:
                text = self.extractor.extract_text(file.stream, filename=file.filename)
            except TextExtractionError as e:
                raise PDFExtractionError(pdf_path=file.filename, details={"reason": str(e), **e.details}) from e

            records = self.parse_text(text)

        if not records:
            self.logger.warning(
                f"Nenhuma guia de DARF em {file.filename}",
                extra={"event": "no_darfs_found", "text_length": len(text)}
            )
            raise NoDarfsFoundError(details={"file": file.filename})

        self.logger.info(
            f"{len(records)} guia(s) de DARF lidas de {file.filename}",
            extra={"event": "darfs_parsed", "darfs": len(records)}
        )
        return records

    def parse_text(self, text: str) -> List[PaymentRecord]:
        records = self.extractor.extract_from_text(text)
        return [replace(record, cnpj=only_digits(record.cnpj)) for record in records]
