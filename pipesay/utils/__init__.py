"""Utility modules for pipesay."""

from .terminal_utils import (
    calculate_text_width,
    pad_to_width,
)

__all__ = [
    "calculate_text_width",
    "pad_to_width",
]
