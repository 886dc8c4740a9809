"""Utilities for simpleui."""

from simpleui.utils.config import Config, get_simpleui_dir

__all__ = ["Config", "get_simpleui_dir"]
