"""
工具类模块
Utility Classes
"""
from .logger import setup_logger, setup_logger_from_config, get_log_level, get_logger
from .config_loader import ConfigLoader
from .error_handler import ErrorHandler, global_error_handler
from .exceptions import (
    FairRPSException,
    ConfigurationException,
    MoveSetException,
    GameException,
    InvalidInputException,
    RandomnessSourceException
)

__all__ = [
    'setup_logger',
    'setup_logger_from_config',
    'get_log_level',
    'get_logger',
    'ConfigLoader',
    'ErrorHandler',
    'global_error_handler',
    'FairRPSException',
    'ConfigurationException',
    'MoveSetException',
    'GameException',
    'InvalidInputException',
    'RandomnessSourceException'
]
