"""Respostas JSON de erro da API de remessa"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from flask import Flask, current_app, jsonify, request
from marshmallow import ValidationError as MarshmallowValidationError
from werkzeug.exceptions import HTTPException

from .custom_exceptions import RemittanceServiceException

logger = logging.getLogger('remessa.errors')

HTTP_ERRORS = {
    404: ("NOT_FOUND", "Rota não encontrada."),
    405: ("METHOD_NOT_ALLOWED", "Método não permitido para esta rota."),
    413: ("PDF_TOO_LARGE", "O PDF enviado excede o limite de {max_mb:.0f} MB."),
}


def error_response(
    status_code: int,
    error_code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    error_id: Optional[str] = None
):
    meta = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": request.path,
        "method": request.method,
    }
    if error_id:
        meta["error_id"] = error_id
    if getattr(request, "request_id", None):
        meta["request_id"] = request.request_id

    body = {
        "success": False,
        "error": {"code": error_code, "message": message, "details": details or {}},
        "meta": meta
    }
    return jsonify(body), status_code


def register_error_handlers(app: Flask) -> None:

    @app.errorhandler(RemittanceServiceException)
    def handle_remittance_error(error: RemittanceServiceException):
        error_id = str(uuid.uuid4())
        level = logging.ERROR if error.status_code >= 500 else logging.WARNING
        logger.log(
            level,
            f"{error.error_code} em {request.path}: {error.message}",
            extra={"error_id": error_id, "error_details": error.details}
        )
        return error_response(error.status_code, error.error_code, error.message, error.details, error_id)

    @app.errorhandler(MarshmallowValidationError)
    def handle_payload_error(error: MarshmallowValidationError):
        logger.warning(f"Payload inválido em {request.path}", extra={"invalid_fields": sorted(error.messages)})
        return error_response(
            400,
            "VALIDATION_ERROR",
            "Dados inválidos na requisição.",
            {"validation_errors": error.messages}
        )

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        error_code, message = HTTP_ERRORS.get(error.code, (f"HTTP_{error.code}", error.description))
        if error.code == 413:
            max_size = current_app.config.get("MAX_CONTENT_LENGTH") or 0
            message = message.format(max_mb=max_size / (1024 * 1024))
            return error_response(413, error_code, message, {"max_size_bytes": max_size})
        return error_response(error.code, error_code, message)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        error_id = str(uuid.uuid4())
        logger.exception(f"Erro inesperado em {request.method} {request.path}", extra={"error_id": error_id})
        return error_response(500, "INTERNAL_ERROR", "Erro interno ao processar a solicitação.", error_id=error_id)
