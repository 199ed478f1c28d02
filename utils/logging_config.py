"""Logging do núcleo (extrator de DARF e gerador CNAB 240).

Os módulos do núcleo logam sob ``remessa_darf.<Classe>``. ``setup_logging``
liga esse ramo a um arquivo próprio e ao console, sempre com CPF e CNPJ
mascarados; quem roda só o núcleo, sem a API, chama ``setup_logging()`` uma vez.
"""

import logging
import logging.handlers
import os
import re
import sys
from pathlib import Path
from typing import Iterable, Optional

try:
    from ..config import Config
except ImportError:
    from config import Config

from .validators import sanitize_log_data

CNPJ_PATTERN = r'\b\d{2}\.?\d{3}\.?\d{3}/?\d{4}-?\d{2}\b'
CPF_PATTERN = r'\b\d{3}\.?\d{3}\.?\d{3}-?\d{2}\b'
MASK = '***'

CORE_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class SensitiveDataFilter(logging.Filter):
    """Troca CPF e CNPJ por *** na mensagem e nos argumentos do registro"""

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        super().__init__()
        self.pattern = re.compile('|'.join(patterns or (CNPJ_PATTERN, CPF_PATTERN)))

    def mask(self, value):
        return self.pattern.sub(MASK, value) if isinstance(value, str) else value

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self.mask(str(record.msg))
        if isinstance(record.args, tuple):
            record.args = tuple(self.mask(arg) for arg in record.args)
        return True


def setup_logging(config: Optional[Config] = None) -> logging.Logger:
    config = config or Config.from_env()

    log_dir = Path(config.LOGS_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(config.LOGGER_NAME)
    logger.setLevel(config.LOG_LEVEL.upper())
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.handlers.RotatingFileHandler(
        log_dir / config.LOG_FILENAME,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    for handler in (logging.StreamHandler(sys.stdout), file_handler):
        handler.setFormatter(logging.Formatter(CORE_FORMAT))
        handler.addFilter(SensitiveDataFilter())
        logger.addHandler(handler)

    logger.info(f"Log do núcleo em {log_dir / config.LOG_FILENAME}")
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{os.getenv('LOGGER_NAME', 'remessa_darf')}.{name}")


class LoggerMixin:
    """Logger por classe; o contexto passa por ``sanitize_log_data``"""

    @property
    def logger(self) -> logging.Logger:
        return get_logger(type(self).__name__)

    def log_operation(self, operation: str, **context) -> None:
        self.logger.info(f"{operation} concluído", extra={'operation': operation, **sanitize_log_data(context)})

    def log_warning(self, message: str, **context) -> None:
        self.logger.warning(message, extra=sanitize_log_data(context))

    def log_error(self, error: Exception, operation: str, **context) -> None:
        self.logger.error(f"{operation} falhou: {error}", extra=sanitize_log_data(context), exc_info=True)
