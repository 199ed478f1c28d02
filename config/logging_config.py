import logging
import warnings
from typing import Optional, List

# pdfplumber delega a leitura ao pdfminer, que é muito verboso em PDFs gerados por sistemas da Receita
DEFAULT_EXTERNAL_LIBS = ['pdfminer', 'pdfplumber']
DEFAULT_WARNING_PATTERNS = [".*CropBox missing.*", ".*Cannot set gray non-stroke color.*"]


def suppress_external_loggers(external_libs: Optional[List[str]] = None):
    libs_to_suppress = external_libs or DEFAULT_EXTERNAL_LIBS
    for lib in libs_to_suppress:
        logging.getLogger(lib).setLevel(logging.ERROR)


def suppress_external_warnings(warning_patterns: Optional[List[str]] = None):
    patterns = warning_patterns or DEFAULT_WARNING_PATTERNS
    for pattern in patterns:
        warnings.filterwarnings("ignore", message=pattern)
