"""Utilities module"""

from .validators import CompanyValidator
from .helpers import ResponseBuilder, RequestHelper, FileHelper

__all__ = [
    "CompanyValidator",
    "ResponseBuilder",
    "RequestHelper",
    "FileHelper"
]
