"""
Widget-selection heuristic.

Picks a default input for a member from its name and declared type. Rules
are ordered and the first match wins; name-suffix conventions (Id, Email,
Color, Password) come before the generic type rules so an 'Email' string
never scaffolds as plain text.

    1. Path                              -> FILE
    2. *Id  with str/int/UUID            -> READ_ONLY
    3. *Email with str                   -> EMAIL
    4. *Color/*Colour with str           -> COLOR
    5. bool                              -> BOOL
    6. str: *Password -> PASSWORD, else  -> TEXT
    7. Enum                              -> SELECT
    8. collection of Enum                -> MULTI_SELECT
    9. int/float/Decimal                 -> NUMBER
   10. datetime/date/time                -> DATE_TIME
   11. anything else                     -> None (field stays unrendered)
"""

import logging
from typing import Any, Callable, Optional, Type

from pyqt_formbuilder.protocols import Labelable, NumberConfigurable
from .form_field import WidgetFactory
from .labels import bool_caption, ends_with_id, ends_with_word, has_custom_label
from .type_utils import (
    FILE_TYPES, IDENTIFIER_TYPES, is_bool, is_collection_of_enums, is_date,
    is_enum, is_numeric, resolve_optional,
)
from .widget_factory import WidgetKind, create_input

logger = logging.getLogger(__name__)

LabelLookup = Callable[[str], Optional[str]]


def select_widget_kind(name: str, field_type: Type) -> Optional[WidgetKind]:
    """Pure rule table: same (name, type) always yields the same kind."""
    resolved = resolve_optional(field_type)

    if resolved in FILE_TYPES:
        return WidgetKind.FILE
    if ends_with_id(name) and resolved in IDENTIFIER_TYPES:
        return WidgetKind.READ_ONLY
    if ends_with_word(name, "Email") and resolved is str:
        return WidgetKind.EMAIL
    if ends_with_word(name, "Color", "Colour") and resolved is str:
        return WidgetKind.COLOR
    if is_bool(resolved):
        return WidgetKind.BOOL
    if resolved is str:
        return WidgetKind.PASSWORD if ends_with_word(name, "Password") else WidgetKind.TEXT
    if is_enum(resolved):
        return WidgetKind.SELECT
    if is_collection_of_enums(resolved):
        return WidgetKind.MULTI_SELECT
    if is_numeric(resolved):
        return WidgetKind.NUMBER
    if is_date(resolved):
        return WidgetKind.DATE_TIME
    return None


class ScaffoldDefaults:
    """Type-specific presentation defaults applied on top of created inputs."""

    PERCENT_WORDS = ("Percent", "Percentage", "Pct")
    NON_NEGATIVE_WORDS = ("Price", "Amount", "Cost", "Count", "Quantity", "Qty", "Age")

    @staticmethod
    def apply_bool(widget: Labelable, name: str, field_type: Type) -> None:
        widget.set_label(bool_caption(name))

    @staticmethod
    def apply_number(widget: NumberConfigurable, name: str, field_type: Type) -> None:
        resolved = resolve_optional(field_type)
        decimals, step = (0, 1) if resolved is int else (2, 0.01)
        minimum = maximum = None
        if ends_with_word(name, *ScaffoldDefaults.PERCENT_WORDS):
            minimum, maximum = 0, 100
        elif ends_with_word(name, *ScaffoldDefaults.NON_NEGATIVE_WORDS):
            minimum = 0
        widget.configure_number(decimals, step, minimum, maximum)

    @staticmethod
    def apply(widget: Any, name: str, field_type: Type, label: Optional[str]) -> Any:
        """
        Apply defaults by input capability.

        A checkbox keeps a custom label when one was set on the descriptor;
        otherwise it gets the scaffold caption derived from the name.
        """
        if isinstance(widget, Labelable):
            if label is not None and has_custom_label(label, name):
                widget.set_label(label)
            else:
                ScaffoldDefaults.apply_bool(widget, name, field_type)
        elif isinstance(widget, NumberConfigurable):
            ScaffoldDefaults.apply_number(widget, name, field_type)
        return widget


class WidgetHeuristics:
    """Turns the rule table into input factories."""

    @staticmethod
    def editor_for(name: str, field_type: Type, label_lookup: LabelLookup) -> Optional[WidgetFactory]:
        """
        Default input factory for a member, or None on a heuristic miss.

        Args:
            name: Member name
            field_type: Declared member type
            label_lookup: Returns the descriptor's current label when the
                factory runs, so labels set after scaffolding are honored
        """
        kind = select_widget_kind(name, field_type)
        if kind is None:
            return None

        def factory(state) -> Any:
            widget = create_input(kind, state)
            if kind in (WidgetKind.BOOL, WidgetKind.NUMBER):
                ScaffoldDefaults.apply(widget, name, field_type, label_lookup(name))
            return widget

        factory.widget_kind = kind
        return factory
