"""Utility modules."""

from .colors import Colors
from .config import Config, ConfigValidationError, create_default_config
from .github import set_github_output, escape_command_value
from .logging import get_logger, configure_logging, reset_logger

__all__ = [
    'Colors',
    'Config',
    'ConfigValidationError',
    'create_default_config',
    'set_github_output',
    'escape_command_value',
    'get_logger',
    'configure_logging',
    'reset_logger',
]
