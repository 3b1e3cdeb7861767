"""
Extended input implementations.

Specialized widget subclasses that build on the protocol layer
with enhanced behavior.
"""

from .no_scroll_inputs import (
    NoScrollNumberInput,
    NoScrollComboBox,
    NoScrollDateTimeEdit,
)

__all__ = [
    "NoScrollNumberInput",
    "NoScrollComboBox",
    "NoScrollDateTimeEdit",
]
