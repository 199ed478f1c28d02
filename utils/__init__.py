from .validators import only_digits, sanitize_log_data
from .logging_config import setup_logging, get_logger, LoggerMixin, SensitiveDataFilter
from .exceptions import RemittanceError, PDFExtractionError

__all__ = ['only_digits', 'sanitize_log_data', 'setup_logging', 'get_logger', 'LoggerMixin', 'SensitiveDataFilter', 'RemittanceError', 'PDFExtractionError']
