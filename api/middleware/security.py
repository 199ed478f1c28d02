"""Security middleware"""

import time
from flask import Flask, Response, g, request

from ..utils.helpers import RequestHelper
from ..utils.logger import get_api_logger

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'DENY',
    'Referrer-Policy': 'strict-origin-when-cross-origin',
    'Content-Security-Policy': "default-src 'self'"
}

# sondas de liveness rodam a cada poucos segundos
QUIET_PATHS = {'/api/health', '/api/health/live'}


class SecurityMiddleware:
    """Request id, cabeçalhos de segurança e log de acesso por requisição"""

    def __init__(self, app: Flask = None):
        self.logger = get_api_logger()
        if app:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        app.before_request(self.before_request)
        app.after_request(self.after_request)

    def before_request(self) -> None:
        RequestHelper.request_id()
        g.start_time = time.perf_counter()

    def after_request(self, response: Response) -> Response:
        response.headers.update(SECURITY_HEADERS)
        response.headers['X-Request-ID'] = RequestHelper.request_id()

        if request.path not in QUIET_PATHS:
            self.log_access(response)
        return response

    def log_access(self, response: Response) -> None:
        extra = {
            "event": "api_request",
            "status_code": response.status_code,
            "duration_ms": round((time.perf_counter() - g.get('start_time', time.perf_counter())) * 1000, 1),
            "request_id": RequestHelper.request_id()
        }
        # download da remessa: registra o arquivo entregue
        if response.headers.get('X-Record-Count'):
            extra["darfs"] = int(response.headers['X-Record-Count'])
            extra["download"] = response.headers.get('Content-Disposition', '')

        level = 'error' if response.status_code >= 500 else 'warning' if response.status_code >= 400 else 'info'
        getattr(self.logger, level)(f"{request.method} {request.path} {response.status_code}", extra=extra)
