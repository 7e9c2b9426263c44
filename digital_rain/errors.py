"""
Error types for Digital Rain.

Every failure raised by the package carries an ErrorCategory so the entry
point can decide how to report it:

    ENVIRONMENT - the host cannot run the animation (stdout is not a TTY)
    CONFIG      - a RainConfig value is out of range
    RENDER      - a frame could not be produced or written

USAGE:
    from digital_rain.errors import NotATerminalError

    try:
        run()
    except NotATerminalError as e:
        print(e, file=sys.stderr)
"""

from enum import Enum
from typing import Optional


class ErrorCategory(Enum):
    """Categories of errors for proper handling and reporting."""
    # Host environment cannot display the animation
    ENVIRONMENT = "environment"

    # Invalid configuration values
    CONFIG = "configuration"

    # Frame compositing or output failures
    RENDER = "render"


class RainError(Exception):
    """Base class for all Digital Rain errors."""

    category: ErrorCategory = ErrorCategory.RENDER

    def __init__(self, message: str, category: Optional[ErrorCategory] = None):
        super().__init__(message)
        if category is not None:
            self.category = category

    def __str__(self) -> str:
        return f"[{self.category.value}] {super().__str__()}"


class NotATerminalError(RainError):
    """Output stream is not an interactive terminal."""

    category = ErrorCategory.ENVIRONMENT


class ConfigError(RainError):
    """A configuration value is invalid."""

    category = ErrorCategory.CONFIG
