"""Remessa DARF API: leitura de guias de DARF e geração de remessa CNAB 240"""

import os
from flask import Flask
from flask_cors import CORS

from api.config import get_config
from api.exceptions import register_error_handlers
from api.middleware import SecurityMiddleware
from api.utils.logger import LoggerManager, get_app_logger
from api.utils.startup import startup_message
from api.services import DarfService, RemittanceService
from api.controllers import (
    create_darf_controller,
    create_remittance_controller,
    create_health_controller
)
from config import suppress_external_loggers, suppress_external_warnings


def create_app(config_name: str = None) -> Flask:
    """Application factory"""
    config = get_config(config_name)
    config.init_app()

    LoggerManager.configure(config)
    suppress_external_loggers()
    suppress_external_warnings()

    # o reloader do werkzeug importa o app duas vezes
    announce = not config.TESTING and not os.environ.get('WERKZEUG_RUN_MAIN')
    if announce:
        startup_message(f"Iniciando {config.APP_NAME} v{config.APP_VERSION}")

    app = Flask(__name__)
    app.config.from_object(config)

    CORS(app, resources={r"/api/*": {
        "origins": config.CORS_ORIGINS,
        "methods": config.CORS_METHODS,
        "allow_headers": config.CORS_ALLOW_HEADERS,
        "expose_headers": config.CORS_EXPOSE_HEADERS
    }})
    SecurityMiddleware(app)
    register_error_handlers(app)

    app.darf_service = DarfService(config)
    app.remittance_service = RemittanceService(config)

    app.register_blueprint(create_health_controller(config))
    app.register_blueprint(create_darf_controller(app.darf_service))
    app.register_blueprint(create_remittance_controller(app.remittance_service))

    get_app_logger().info(
        "Aplicação pronta",
        extra={"environment": config.ENV, "remitting_bank": config.REMITTANCE_DEFAULT_BANK}
    )
    if announce:
        startup_message("Aplicação pronta para receber PDFs", level="success")

    return app


if __name__ == '__main__':
    import signal
    import sys
    from api.utils.startup import print_shutdown_message, print_startup_banner, quiet_werkzeug

    config = get_config()
    app = create_app()

    def handle_sigint(sig, frame):
        print_shutdown_message()
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)
    quiet_werkzeug()

    if not os.environ.get('WERKZEUG_RUN_MAIN'):
        print_startup_banner(config)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG, use_reloader=config.DEBUG)
