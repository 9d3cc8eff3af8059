"""
Logging setup for htmlelements
"""

from .log_manager import LogManager

__all__ = [
    'LogManager'
]
