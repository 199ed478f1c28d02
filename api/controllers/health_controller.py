"""Health check endpoints"""

import os
import platform
import sys

import pdfplumber
import psutil
from flask import Blueprint

from ..config import Config
from ..exceptions import RemittanceServiceException
from ..utils.helpers import ResponseBuilder
from ..utils.logger import get_api_logger


def create_health_controller(config: Config) -> Blueprint:

    bp = Blueprint('health', __name__, url_prefix='/api/health')
    logger = get_api_logger()

    @bp.route('', methods=['GET'])
    def health_check():
        # sem diretório de log gravável o serviço roda, mas perde o histórico das remessas
        log_dir_writable = os.access(config.LOG_DIR, os.W_OK)
        data = {
            "status": "healthy" if log_dir_writable else "degraded",
            "version": config.APP_VERSION,
            "log_dir_writable": log_dir_writable
        }
        return ResponseBuilder.success(data=data), 200 if log_dir_writable else 503

    @bp.route('/live', methods=['GET'])
    def liveness_check():
        return ResponseBuilder.success(data={"alive": True}), 200

    @bp.route('/detailed', methods=['GET'])
    def detailed_health_check():
        try:
            process = psutil.Process(os.getpid())
            system = {
                "cpu_percent": psutil.cpu_percent(interval=None),
                "memory_percent": psutil.virtual_memory().percent,
                "process_rss_bytes": process.memory_info().rss
            }
        except psutil.Error as e:
            logger.error(f"Falha ao coletar métricas do sistema: {e}")
            raise RemittanceServiceException(
                "Falha ao coletar métricas do sistema.",
                status_code=503,
                error_code="HEALTH_CHECK_FAILED"
            ) from e

        return ResponseBuilder.success(data={
            "status": "healthy",
            "system": system,
            "remittance": {
                "bank_code": config.REMITTANCE_DEFAULT_BANK,
                "bank_name": config.REMITTANCE_BANK_NAME,
                "max_pdf_bytes": config.MAX_CONTENT_LENGTH,
                "min_text_length": config.MIN_TEXT_LENGTH
            }
        }), 200

    @bp.route('/version', methods=['GET'])
    def get_version():
        return ResponseBuilder.success(data={
            "app": {"name": config.APP_NAME, "version": config.APP_VERSION, "environment": config.ENV},
            "runtime": {
                "python": platform.python_version(),
                "platform": sys.platform,
                "pdfplumber": pdfplumber.__version__
            }
        }), 200

    return bp
