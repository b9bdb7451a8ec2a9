"""
Kogito Steps Utils Module

- logger: Logging setup and configuration

Usage:
    from kogitosteps.utils import setup_logger, parse_module_levels
"""

from .logger import setup_logger, parse_module_levels

__all__ = [
    'setup_logger',
    'parse_module_levels',
]
