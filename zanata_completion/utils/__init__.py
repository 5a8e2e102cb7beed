"""Utility functions and helpers"""

from .validators import *

__all__ = [
    'validate_option_name',
    'validate_command_name',
]
