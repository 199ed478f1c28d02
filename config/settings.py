import os
from pathlib import Path
from dataclasses import dataclass

@dataclass
class Config:
    LOGS_DIR: Path = Path("logs")
    LOGGER_NAME: str = "remessa_darf"
    LOG_FILENAME: str = "remessa_darf.log"

    LOG_LEVEL: str = "INFO"
    LOG_MAX_BYTES: int = 10_000_000
    LOG_BACKUP_COUNT: int = 5

    @classmethod
    def from_env(cls) -> 'Config':
        return cls(
            LOGS_DIR=Path(os.getenv('REMESSA_LOGS_DIR', 'logs')),
            LOGGER_NAME=os.getenv('LOGGER_NAME', 'remessa_darf'),
            LOG_LEVEL=os.getenv('REMESSA_LOG_LEVEL', 'INFO'))
