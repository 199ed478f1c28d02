"""Helpers de requisição, resposta e nomes de arquivo da API"""

import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from flask import request


class ResponseBuilder:

    @staticmethod
    def success(data: Optional[Dict[str, Any]] = None, message: Optional[str] = None) -> Dict[str, Any]:
        """Envelope {"success": true, "data", "message", "meta"} das respostas JSON"""
        body: Dict[str, Any] = {"success": True, "data": data or {}}
        if message:
            body["message"] = message
        body["meta"] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": RequestHelper.request_id()
        }
        return body


class RequestHelper:

    @staticmethod
    def client_ip() -> str:
        forwarded = request.headers.get('X-Forwarded-For', '')
        return forwarded.split(',')[0].strip() or request.remote_addr or 'unknown'

    @staticmethod
    def request_id() -> str:
        """Reaproveita o X-Request-ID do cliente ou gera um novo por requisição"""
        if not getattr(request, 'request_id', None):
            request.request_id = request.headers.get('X-Request-ID') or uuid.uuid4().hex
        return request.request_id

    @staticmethod
    def log_context(action: str) -> Dict[str, Any]:
        return {
            "action": action,
            "ip": RequestHelper.client_ip(),
            "request_id": RequestHelper.request_id()
        }


class FileHelper:

    @staticmethod
    def is_allowed(filename: str, allowed_extensions: Iterable[str]) -> bool:
        return Path(filename or '').suffix.lower().lstrip('.') in set(allowed_extensions)

    @staticmethod
    def remittance_filename(created_at: Optional[datetime] = None, prefix: str = "REM_", suffix: str = ".rem") -> str:
        """REM_AAAAMMDDHHMMSS.rem, com horário UTC"""
        created_at = created_at or datetime.now(timezone.utc)
        return f"{prefix}{created_at.strftime('%Y%m%d%H%M%S')}{suffix}"
