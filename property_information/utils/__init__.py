"""
Utility modules for property-information.
"""

from property_information.utils.config import Config
from property_information.utils.logging import setup_logging, set_console_level, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'set_console_level',
    'log_exception',
    'PerformanceLogger',
]
