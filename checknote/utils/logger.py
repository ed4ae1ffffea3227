"""
Logger utility for Checknote
Provides centralized logging functionality
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Union

from .config_loader import get_default_data_dir


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def default_log_dir() -> Path:
    """Log directory before config is loaded: <data dir>/logs"""
    return get_default_data_dir() / "logs"


class Logger:
    """Centralized logging utility"""

    _instance: Optional['Logger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs) -> 'Logger':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: Optional[Path] = None,
                 level: Union[int, str] = logging.INFO):
        if not self._initialized:
            self.setup_logging(log_dir or default_log_dir(), level)
            Logger._initialized = True

    def setup_logging(self, log_dir: Path,
                      level: Union[int, str] = logging.INFO) -> None:
        """Setup logging configuration"""
        self.logger = logging.getLogger('Checknote')
        self.logger.setLevel(self._resolve_level(level))
        self.logger.propagate = False

        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(LOG_FORMAT)

        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        self.logger.addHandler(stream_handler)

        # File logging is best-effort; an unwritable log dir keeps stdout only
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d")
            log_file = log_dir / f"checknote_{timestamp}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
        except OSError as e:
            self.logger.warning(f"File logging disabled: {e}")

    @staticmethod
    def _resolve_level(level: Union[int, str]) -> int:
        if isinstance(level, int):
            return level
        resolved = logging.getLevelName(str(level).upper())
        return resolved if isinstance(resolved, int) else logging.INFO

    @classmethod
    def configure(cls, log_dir: Path,
                  level: Union[int, str] = logging.INFO) -> 'Logger':
        """(Re)configure the shared logger, e.g. once config is loaded"""
        instance = cls.__new__(cls)
        instance.setup_logging(log_dir, level)
        cls._initialized = True
        return instance

    def info(self, message: str) -> None:
        """Log info message"""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log warning message"""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log error message"""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log debug message"""
        self.logger.debug(message)

    def critical(self, message: str) -> None:
        """Log critical message"""
        self.logger.critical(message)


# Convenience functions for direct import
def log_warning(message: str) -> None:
    Logger().warning(message)

def log_error(message: str) -> None:
    Logger().error(message)