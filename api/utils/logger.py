"""Logging da API: JSON no console e em arquivos rotativos.

``app.log`` recebe tudo a partir de INFO, ``errors.log`` só erros e
``performance.log`` os tempos de leitura dos PDFs e de geração das remessas.
O ramo ``remessa_darf`` (extrator e gerador CNAB) tem arquivo próprio,
configurado pelo ``setup_logging`` do núcleo.
"""

import json
import logging
import logging.handlers
import sys
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

from config.settings import Config as CoreConfig
from utils import SensitiveDataFilter, setup_logging

from ..config import Config

PERFORMANCE_LOGGER = 'remessa.performance'

# tudo que não estiver aqui veio de extra=
STANDARD_ATTRS = set(vars(logging.LogRecord('', 0, '', 0, '', None, None))) | {'message', 'asctime'}


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "where": f"{record.module}:{record.lineno}",
        }

        extra = {key: value for key, value in vars(record).items() if key not in STANDARD_ATTRS}
        if extra:
            entry["extra"] = extra

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


def rotating_handler(path: Path, config: Config, level: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(SensitiveDataFilter())
    return handler


class LoggerManager:
    """Instala os handlers uma vez por processo"""

    _configured = False

    @classmethod
    def configure(cls, config: Config) -> None:
        if cls._configured:
            return

        log_dir = Path(config.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        level = getattr(logging, config.LOG_LEVEL.upper())

        console = logging.StreamHandler(sys.stdout)
        console.setLevel(level)
        if config.DEBUG and config.LOG_FORMAT_CONSOLE:
            console.setFormatter(logging.Formatter(config.LOG_FORMAT_CONSOLE))
        else:
            console.setFormatter(JSONFormatter())
        console.addFilter(SensitiveDataFilter())

        root = logging.getLogger()
        root.setLevel(level)
        root.handlers.clear()
        root.addHandler(console)
        root.addHandler(rotating_handler(log_dir / config.LOG_FILE, config, logging.INFO))
        root.addHandler(rotating_handler(log_dir / 'errors.log', config, logging.ERROR))

        performance = logging.getLogger(PERFORMANCE_LOGGER)
        performance.setLevel(logging.INFO)
        performance.propagate = False
        performance.addHandler(rotating_handler(log_dir / 'performance.log', config, logging.INFO))

        setup_logging(CoreConfig(
            LOGS_DIR=log_dir,
            LOG_LEVEL=config.LOG_LEVEL,
            LOG_MAX_BYTES=config.LOG_MAX_BYTES,
            LOG_BACKUP_COUNT=config.LOG_BACKUP_COUNT
        ))

        cls._configured = True


def get_app_logger() -> logging.Logger:
    return logging.getLogger('remessa.app')


def get_api_logger() -> logging.Logger:
    return logging.getLogger('remessa.api')


def get_service_logger(service_name: str) -> logging.Logger:
    return logging.getLogger(f'remessa.service.{service_name}')


@contextmanager
def log_performance(operation: str, **context):
    """Registra a duração de ``operation`` em performance.log, com falha ou sucesso"""
    logger = logging.getLogger(PERFORMANCE_LOGGER)
    started = time.perf_counter()
    try:
        yield
    except Exception as e:
        logger.error(
            f"{operation} falhou",
            extra={
                "operation": operation,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
                "error_type": type(e).__name__,
                **context
            }
        )
        raise
    logger.info(
        f"{operation} concluído",
        extra={
            "operation": operation,
            "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            **context
        }
    )
