"""
Field descriptors.

A FormField holds one model member's metadata: label, layout coordinates,
group, visibility predicate, validators, input factory and flags. The builder
mutates descriptors in place; the runtime binder only ever sees immutable
FieldSnapshot copies taken at bind time.
"""

import sys
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple, Type

# Sorts after every explicitly placed field
UNORDERED = sys.maxsize

# Column index of fields spanning the whole form width
FULL_WIDTH = -1

Validator = Callable[[Any], Tuple[bool, str]]
WidgetFactory = Callable[["FieldState"], Any]
VisibilityPredicate = Callable[[Any], bool]


def always_visible(_model: Any) -> bool:
    return True


def is_valid_required(value: Any) -> bool:
    """A required value is present: not None, not blank text, not an empty collection."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) > 0
    return True


def required_validator(message: str = "Required field") -> Validator:
    """Built-in 'must have a value' check."""
    def validate(value: Any) -> Tuple[bool, str]:
        return is_valid_required(value), message
    return validate


@dataclass
class FormField:
    """Mutable descriptor of one scaffolded member."""

    name: str
    label: str
    field_type: Type
    widget_factory: Optional[WidgetFactory] = None
    required: bool = False
    settable: bool = True
    order: int = UNORDERED
    column: int = 0
    row_key: uuid.UUID = field(default_factory=uuid.uuid4)
    group: Optional[str] = None
    removed: bool = False
    disabled: bool = True
    description: Optional[str] = None
    visible: VisibilityPredicate = always_visible
    validators: List[Validator] = field(default_factory=list)

    def __setattr__(self, key, value):
        if key == "name" and "name" in self.__dict__:
            raise AttributeError(f"Field name '{self.name}' is immutable")
        super().__setattr__(key, value)

    @property
    def is_renderable(self) -> bool:
        """Removed or factory-less descriptors never reach a rendered form."""
        return not self.removed and self.widget_factory is not None

    @property
    def is_ordered(self) -> bool:
        return self.order != UNORDERED

    def snapshot(self) -> "FieldSnapshot":
        return FieldSnapshot(
            name=self.name,
            label=self.label,
            field_type=self.field_type,
            widget_factory=self.widget_factory,
            required=self.required,
            settable=self.settable,
            order=self.order,
            column=self.column,
            row_key=self.row_key,
            group=self.group,
            disabled=self.disabled,
            description=self.description,
            visible=self.visible,
            validators=tuple(self.validators),
        )


@dataclass(frozen=True)
class FieldSnapshot:
    """Immutable copy of a FormField, owned by one render pass."""

    name: str
    label: str
    field_type: Type
    widget_factory: WidgetFactory
    required: bool
    settable: bool
    order: int
    column: int
    row_key: uuid.UUID
    group: Optional[str]
    disabled: bool
    description: Optional[str]
    visible: VisibilityPredicate
    validators: Tuple[Validator, ...]

    def validate(self, value: Any) -> Tuple[bool, Optional[str]]:
        """Run every validator; returns (valid, first failing message)."""
        first_error: Optional[str] = None
        for validator in self.validators:
            valid, message = validator(value)
            if not valid and first_error is None:
                first_error = message
        return first_error is None, first_error
