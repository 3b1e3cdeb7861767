"""
Input factory registry with explicit kind-based dispatch.

Design:
- WidgetKind: the categories the scaffold heuristic can choose
- WIDGET_KIND_FACTORIES: WidgetKind -> factory(FieldState) -> input widget
- Fail-loud if a kind has no registered factory
- Applications swap a category's input with register_widget_kind()
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict

from pyqt_formbuilder.exceptions import WidgetKindError
from pyqt_formbuilder.protocols import (
    CheckBoxAdapter, CheckboxGroupAdapter, ColorEditAdapter, EmailEditAdapter,
    FileEditAdapter, LineEditAdapter, PasswordEditAdapter, ReadOnlyAdapter,
)
from pyqt_formbuilder.widgets import NoScrollComboBox, NoScrollDateTimeEdit, NoScrollNumberInput
from .type_utils import collection_container, collection_element_type, resolve_optional

logger = logging.getLogger(__name__)


class WidgetKind(Enum):
    """Input categories chosen by the scaffold heuristic."""
    FILE = "file"
    READ_ONLY = "read_only"
    EMAIL = "email"
    COLOR = "color"
    BOOL = "bool"
    PASSWORD = "password"
    TEXT = "text"
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    NUMBER = "number"
    DATE_TIME = "date_time"


def _create_select(state) -> Any:
    widget = NoScrollComboBox()
    widget.populate_enum(resolve_optional(state.field_type))
    return widget


def _create_multi_select(state) -> Any:
    field_type = resolve_optional(state.field_type)
    return CheckboxGroupAdapter(collection_element_type(field_type), collection_container(field_type))


# Kind-based input creation dispatch - NO DUCK TYPING
WIDGET_KIND_FACTORIES: Dict[WidgetKind, Callable[[Any], Any]] = {
    WidgetKind.FILE: lambda state: FileEditAdapter(),
    WidgetKind.READ_ONLY: lambda state: ReadOnlyAdapter(),
    WidgetKind.EMAIL: lambda state: EmailEditAdapter(),
    WidgetKind.COLOR: lambda state: ColorEditAdapter(),
    WidgetKind.BOOL: lambda state: CheckBoxAdapter(),
    WidgetKind.PASSWORD: lambda state: PasswordEditAdapter(),
    WidgetKind.TEXT: lambda state: LineEditAdapter(),
    WidgetKind.SELECT: _create_select,
    WidgetKind.MULTI_SELECT: _create_multi_select,
    WidgetKind.NUMBER: lambda state: NoScrollNumberInput(resolve_optional(state.field_type)),
    WidgetKind.DATE_TIME: lambda state: NoScrollDateTimeEdit(resolve_optional(state.field_type)),
}


def create_input(kind: WidgetKind, state) -> Any:
    """
    Create the input widget for a kind.

    Args:
        kind: Category chosen by the heuristic
        state: FieldState the input will be bound to

    Raises:
        WidgetKindError: If no factory is registered for kind
    """
    factory = WIDGET_KIND_FACTORIES.get(kind)
    if factory is None:
        raise WidgetKindError(
            f"No input factory registered for {kind}. "
            f"Available kinds: {[k.value for k in WIDGET_KIND_FACTORIES]}"
        )
    widget = factory(state)
    logger.debug(f"Created {type(widget).__name__} for field '{state.name}' ({kind.value})")
    return widget


def register_widget_kind(kind: WidgetKind, factory: Callable[[Any], Any]) -> None:
    """
    Replace the input factory used for every field of a kind.

    Example:
        >>> register_widget_kind(WidgetKind.TEXT, lambda state: MyRichTextEdit())
    """
    if kind in WIDGET_KIND_FACTORIES:
        logger.warning(f"Overwriting existing input factory for {kind}")
    WIDGET_KIND_FACTORIES[kind] = factory
