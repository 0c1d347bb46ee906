# Configuration package

from zeroarg.config.app_config import AppConfig, LoggingConfig, LogLevel

__all__ = ["AppConfig", "LogLevel", "LoggingConfig"]
