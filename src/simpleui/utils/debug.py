"""Debug logging utility."""

import sys
from datetime import datetime
from typing import Optional

from simpleui.utils.config import Config, get_simpleui_dir

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_simpleui_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_path = _get_config().log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def _emit(line: str):
    _log_to_file(line)
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'menu', 'input', 'terminal'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    if not _get_config().debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v!r}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[simpleui:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    _emit(line)


def debug_menu(message: str, **kwargs):
    """Log menu dispatch debug message."""
    debug("menu", message, **kwargs)


def debug_input(message: str, **kwargs):
    """Log input-related debug message."""
    debug("input", message, **kwargs)


def debug_terminal(message: str, **kwargs):
    """Log terminal-mode debug message."""
    debug("terminal", message, **kwargs)


def log_error(category: str, message: str, exc: Optional[BaseException] = None):
    """Log error message ALWAYS (even if debug mode is off).

    Used for conditions the operator should see, like a terminal that
    refused to switch modes.

    Args:
        category: Category like 'terminal'
        message: Error message
        exc: Optional exception, appended to the line
    """
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    line = f"[simpleui:{category}] {timestamp} ERROR: {message}"
    if exc is not None:
        line += f": {exc}"

    _emit(line)
