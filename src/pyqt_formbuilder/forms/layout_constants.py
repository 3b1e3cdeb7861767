"""
Layout constants for scaffolded forms.

This module centralizes all spacing and margin configuration
to ensure uniform appearance across all forms.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormLayoutConfig:
    """Configuration for form layout spacing and margins."""

    # Outer form layout (field area, submit row)
    main_layout_spacing: int = 6
    main_layout_margins: tuple = (4, 4, 4, 4)

    # Between columns
    column_spacing: int = 12

    # Between field rows inside a column
    content_layout_spacing: int = 4

    # Between fields sharing one row
    row_spacing: int = 8

    # Between label, input, description and error text of one field
    field_spacing: int = 1

    # Group sections
    groupbox_spacing: int = 4
    groupbox_margins: tuple = (6, 6, 6, 6)

    # Submit row
    submit_row_spacing: int = 8


# Default compact configuration
COMPACT_LAYOUT = FormLayoutConfig()

SPACIOUS_LAYOUT = FormLayoutConfig(
    main_layout_spacing=10,
    main_layout_margins=(8, 8, 8, 8),
    column_spacing=20,
    content_layout_spacing=8,
    row_spacing=12,
    field_spacing=3,
    groupbox_spacing=6,
    groupbox_margins=(10, 10, 10, 10),
)

# Current active configuration - change this to switch layouts globally
CURRENT_LAYOUT = COMPACT_LAYOUT
