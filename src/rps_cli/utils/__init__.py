"""
工具类模块
Utility Classes
"""
from .logger import setup_logger, setup_logger_from_config, get_log_level, get_logger
from .config_loader import ConfigLoader
from .error_handler import ErrorHandler
from .exceptions import (
    RPSException,
    GameException,
    ConfigurationException,
    StatisticsStorageException,
    PromptCancelled
)

__all__ = [
    'setup_logger',
    'setup_logger_from_config',
    'get_log_level',
    'get_logger',
    'ConfigLoader',
    'ErrorHandler',
    'RPSException',
    'GameException',
    'ConfigurationException',
    'StatisticsStorageException',
    'PromptCancelled'
]
