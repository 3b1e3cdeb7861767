"""
Typed field selectors.

Fluent builder calls accept a selector naming one scaffolded member:

    F = fields_of(User)
    builder.label(F.email, "E-mail").place(F.name, F.email)

A selector may also be the member name as a string or the property object
itself (User.display_name). Every form resolves to the member name key.
"""

from dataclasses import dataclass
from typing import Any, Dict, Type, Union

from pyqt_formbuilder.exceptions import FieldLookupError
from .form_field import FormField
from .scaffold import ScaffoldEngine


@dataclass(frozen=True)
class FieldRef:
    """Reference to one named member of a model type."""
    name: str
    model_type: Type = None

    def __str__(self) -> str:
        return self.name


class FieldAccessProxy:
    """
    Attribute access yields FieldRefs for the members of a model type.

    Unknown attributes raise AttributeError immediately, so a typo fails at
    the line that wrote it.
    """

    def __init__(self, model_type: Type):
        self._model_type = model_type
        self._names = frozenset(member.name for member in ScaffoldEngine.enumerate_members(model_type))

    def __getattr__(self, name: str) -> FieldRef:
        if name.startswith("_") or name not in self._names:
            raise AttributeError(f"{self._model_type.__name__} has no member '{name}'")
        return FieldRef(name, self._model_type)

    def __dir__(self):
        return sorted(self._names)


def fields_of(model_type: Type) -> FieldAccessProxy:
    return FieldAccessProxy(model_type)


FieldSelector = Union[str, FieldRef, property]


def selector_name(selector: Any) -> str:
    """Reduce a selector to its member name."""
    if isinstance(selector, str):
        return selector
    if isinstance(selector, FieldRef):
        return selector.name
    if isinstance(selector, property) and selector.fget is not None:
        return selector.fget.__name__
    raise TypeError(f"Unsupported field selector: {selector!r}")


def resolve_field(fields: Dict[str, FormField], selector: Any, model_type: Type = None) -> FormField:
    """
    Look up the descriptor a selector names.

    Raises:
        FieldLookupError: If the name was never scaffolded, or a FieldRef
            was taken from a model type other than model_type (or its bases)
    """
    name = selector_name(selector)
    if (isinstance(selector, FieldRef) and selector.model_type is not None
            and model_type is not None and not issubclass(model_type, selector.model_type)):
        raise FieldLookupError(name, model_type, ref_type=selector.model_type)
    try:
        return fields[name]
    except KeyError:
        raise FieldLookupError(name, model_type) from None
