import os
from pathlib import Path
from typing import List, Optional


def env_list(name: str, default: str = "") -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Config:

    APP_NAME: str = "Remessa DARF API"
    APP_VERSION: str = "1.0.0"
    ENV: str = "Default"
    DEBUG: bool = False
    TESTING: bool = False

    HOST: str = os.getenv("API_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("API_PORT", "5000"))

    # o front-end lê o nome do .rem e a quantidade de guias pelos cabeçalhos
    CORS_ORIGINS: List[str] = env_list("CORS_ORIGINS", "http://localhost:3000")
    CORS_METHODS: List[str] = ["GET", "POST", "OPTIONS"]
    CORS_ALLOW_HEADERS: List[str] = ["Content-Type", "X-Request-ID"]
    CORS_EXPOSE_HEADERS: List[str] = ["Content-Disposition", "X-Record-Count", "X-Request-ID"]

    # upload de PDF com as guias
    MAX_CONTENT_LENGTH: int = int(os.getenv("MAX_CONTENT_LENGTH", str(16 * 1024 * 1024)))
    ALLOWED_EXTENSIONS: frozenset = frozenset({"pdf"})
    MIN_TEXT_LENGTH: int = int(os.getenv("MIN_TEXT_LENGTH", "20"))

    # remessa CNAB 240
    REMITTANCE_DEFAULT_BANK: str = os.getenv("REMITTANCE_DEFAULT_BANK", "033")
    REMITTANCE_BANK_NAME: str = os.getenv("REMITTANCE_BANK_NAME", "BANCO SANTANDER")
    REMITTANCE_FILE_PREFIX: str = "REM_"
    REMITTANCE_FILE_SUFFIX: str = ".rem"

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: Path = Path(os.getenv("LOG_DIR", Path.home() / "tmp" / "remessa-darf" / "logs"))
    LOG_FILE: str = "app.log"
    LOG_MAX_BYTES: int = 10 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 10
    LOG_FORMAT_CONSOLE: Optional[str] = os.getenv("LOG_FORMAT_CONSOLE")

    @classmethod
    def init_app(cls) -> None:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


class DevelopmentConfig(Config):
    ENV = "Development"
    DEBUG = True
    LOG_LEVEL = "DEBUG"
    LOG_FORMAT_CONSOLE = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class TestingConfig(Config):
    ENV = "Testing"
    TESTING = True
    LOG_DIR = Path("/tmp/remessa_darf_test_logs")


class ProductionConfig(Config):
    ENV = "Production"
    LOG_LEVEL = "WARNING"
    # sem CORS_ORIGINS explícito, nenhuma origem é liberada
    CORS_ORIGINS = env_list("CORS_ORIGINS")


CONFIGS = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config(env: Optional[str] = None) -> type:
    return CONFIGS.get(env or os.getenv("FLASK_ENV", "development"), DevelopmentConfig)
