"""
Type classification utilities for scaffolding.

Provides Optional unwrapping and numeric/date/enum/collection checks used by
the widget-selection heuristic.
"""

import collections.abc
import uuid
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from pathlib import Path, PurePath
from types import UnionType
from typing import Optional, Tuple, Type, Union, get_args, get_origin

FILE_TYPES: Tuple[type, ...] = (Path, PurePath)
IDENTIFIER_TYPES: Tuple[type, ...] = (str, int, uuid.UUID)
NUMERIC_TYPES: Tuple[type, ...] = (int, float, Decimal)
DATE_TYPES: Tuple[type, ...] = (datetime, date, time)

_COLLECTION_ORIGINS = (
    list, set, frozenset, tuple,
    collections.abc.Sequence, collections.abc.MutableSequence,
    collections.abc.Set, collections.abc.MutableSet,
    collections.abc.Collection, collections.abc.Iterable,
)


def resolve_optional(param_type: Type) -> Type:
    """Resolve Optional[T] (or T | None) to T."""
    if get_origin(param_type) in (Union, UnionType):
        args = get_args(param_type)
        if len(args) == 2 and type(None) in args:
            return next(arg for arg in args if arg is not type(None))
    return param_type


def is_enum(param_type: Type) -> bool:
    """Check if type is an Enum."""
    return isinstance(param_type, type) and issubclass(param_type, Enum)


def is_bool(param_type: Type) -> bool:
    return param_type is bool


def is_numeric(param_type: Type) -> bool:
    """int, float or Decimal (bool excluded even though it subclasses int)."""
    return param_type in NUMERIC_TYPES


def is_date(param_type: Type) -> bool:
    return param_type in DATE_TYPES


def collection_element_type(param_type: Type) -> Optional[Type]:
    """Element type of list[T], set[T], tuple[T, ...] and friends, else None."""
    origin = get_origin(param_type)
    if origin not in _COLLECTION_ORIGINS:
        return None
    args = [arg for arg in get_args(param_type) if arg is not Ellipsis]
    return args[0] if args else None


def is_collection_of_enums(param_type: Type) -> bool:
    """Check if type is a collection whose element type is an Enum."""
    element = collection_element_type(param_type)
    return element is not None and is_enum(element)


def collection_container(param_type: Type) -> type:
    """Concrete container class to build values of a collection type with."""
    origin = get_origin(param_type)
    if origin in (set, collections.abc.Set, collections.abc.MutableSet):
        return set
    if origin is frozenset:
        return frozenset
    if origin is tuple:
        return tuple
    return list
