from .settings import Config
from .logging_config import suppress_external_loggers, suppress_external_warnings

__all__ = ['Config', 'suppress_external_loggers', 'suppress_external_warnings']
