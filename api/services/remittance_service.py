from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from data.models import CompanyProfile, PaymentRecord
from processors import Cnab240Writer

from ..config import Config
from ..exceptions import IncompleteCompanyError, NoDarfsFoundError
from ..models import RemittanceFile
from ..utils.helpers import FileHelper
from ..utils.logger import get_service_logger, log_performance
from ..utils.validators import CompanyValidator


class RemittanceService:
    """Valida os dados da empresa e monta o arquivo .rem"""

    def __init__(self, config: Config, clock: Optional[Callable[[], datetime]] = None):
        self.config = config
        self.logger = get_service_logger('remittance')
        self.writer = Cnab240Writer(
            bank_name=config.REMITTANCE_BANK_NAME,
            default_bank_code=config.REMITTANCE_DEFAULT_BANK,
            clock=clock or datetime.now
        )

    def generate(self, company: CompanyProfile, records: Sequence[PaymentRecord]) -> RemittanceFile:
        missing = CompanyValidator.missing_fields(company)
        if missing:
            raise IncompleteCompanyError(missing)

        if not records:
            raise NoDarfsFoundError(
                "Importe um PDF com ao menos uma guia de DARF antes de gerar a remessa."
            )

        with log_performance("generate_remittance", darfs=len(records)):
            lines = self.writer.build_lines(company, records)

        remittance = RemittanceFile(
            filename=FileHelper.remittance_filename(
                datetime.now(timezone.utc),
                prefix=self.config.REMITTANCE_FILE_PREFIX,
                suffix=self.config.REMITTANCE_FILE_SUFFIX
            ),
            lines=lines,
            record_count=len(records)
        )
        self.logger.info(
            f"Remessa {remittance.filename} gerada",
            extra={"event": "remittance_generated", "darfs": remittance.record_count, "lines": remittance.line_count}
        )
        return remittance
