"""Custom exceptions for simpleui.

This module defines a hierarchy of exceptions for different error types:
- SimpleUIError: Base exception for all simpleui errors
- InputClosedError: Input stream exhausted while a read was pending
- TerminalModeError: Terminal attribute query/update failures (with operation)
- SubmenuGoneError: A borrowed submenu was collected before being entered
- ConfigurationError: Configuration related errors
"""

from typing import Optional


class SimpleUIError(Exception):
    """Base exception for all simpleui errors.

    All simpleui-specific exceptions inherit from this class, allowing
    callers to catch all simpleui errors with a single except clause.
    """

    pass


class InputClosedError(SimpleUIError, EOFError):
    """Input stream reached end of file while waiting for a selection.

    Also an EOFError so callers handling the builtin input() behaviour
    keep working.
    """

    pass


class TerminalModeError(SimpleUIError):
    """Terminal attribute errors.

    Attributes:
        operation: Name of the failed call (e.g. "tcgetattr", "tcsetattr")
    """

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation


class SubmenuGoneError(SimpleUIError):
    """Borrowed submenu no longer exists.

    Raised when a submenu attached with borrowed=True has been garbage
    collected before its parent tried to enter it.
    """

    pass


class ConfigurationError(SimpleUIError):
    """Configuration related errors.

    Raised when configuration is invalid, such as:
    - Unknown toggle names
    - Invalid config format
    """

    pass
