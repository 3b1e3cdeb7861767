"""Tests for the widget-selection heuristic and scaffold defaults."""

import uuid
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import FrozenSet, List, Optional, Set, Tuple

import pytest

from pyqt_formbuilder.forms.widget_factory import WidgetKind
from pyqt_formbuilder.forms.widget_heuristics import (
    ScaffoldDefaults, WidgetHeuristics, select_widget_kind,
)


class Role(Enum):
    ADMIN = "admin"
    EDITOR = "editor"


@pytest.mark.parametrize("name, field_type, expected", [
    ("Avatar", Path, WidgetKind.FILE),
    ("UserId", Path, WidgetKind.FILE),
    ("UserId", uuid.UUID, WidgetKind.READ_ONLY),
    ("order_id", int, WidgetKind.READ_ONLY),
    ("ExternalId", str, WidgetKind.READ_ONLY),
    ("UserID", str, WidgetKind.TEXT),
    ("ID", int, WidgetKind.NUMBER),
    ("Email", str, WidgetKind.EMAIL),
    ("contactEmail", Optional[str], WidgetKind.EMAIL),
    ("FavoriteColor", str, WidgetKind.COLOR),
    ("background_colour", str, WidgetKind.COLOR),
    ("Active", bool, WidgetKind.BOOL),
    ("IsAdmin", Optional[bool], WidgetKind.BOOL),
    ("Password", str, WidgetKind.PASSWORD),
    ("Name", str, WidgetKind.TEXT),
    ("Role", Role, WidgetKind.SELECT),
    ("Roles", List[Role], WidgetKind.MULTI_SELECT),
    ("Roles", Set[Role], WidgetKind.MULTI_SELECT),
    ("Roles", FrozenSet[Role], WidgetKind.MULTI_SELECT),
    ("Roles", Tuple[Role, ...], WidgetKind.MULTI_SELECT),
    ("Age", int, WidgetKind.NUMBER),
    ("Ratio", float, WidgetKind.NUMBER),
    ("Price", Decimal, WidgetKind.NUMBER),
    ("CreatedAt", datetime, WidgetKind.DATE_TIME),
    ("Birthday", date, WidgetKind.DATE_TIME),
    ("Alarm", time, WidgetKind.DATE_TIME),
    ("Tags", List[str], None),
    ("Metadata", dict, None),
    ("EmailCount", int, WidgetKind.NUMBER),
    ("ColorId", float, WidgetKind.NUMBER),
])
def test_select_widget_kind(name, field_type, expected):
    assert select_widget_kind(name, field_type) is expected


def test_select_widget_kind_is_deterministic():
    pairs = [("UserId", uuid.UUID), ("Email", str), ("Roles", List[Role]), ("Tags", List[str])]
    first = [select_widget_kind(n, t) for n, t in pairs]
    for _ in range(5):
        assert [select_widget_kind(n, t) for n, t in pairs] == first


def test_name_rules_win_over_type_rules():
    # A str ending in Email never falls through to plain text
    assert select_widget_kind("WorkEmail", str) is not WidgetKind.TEXT


@dataclass
class Listing:
    Price: float = 0.0
    DiscountPercent: float = 0.0
    Quantity: int = 0
    IsPublished: bool = False


def _state(name, field_type):
    from pyqt_formbuilder.forms.model_state import ModelState

    return ModelState(Listing()).field(name, field_type)


def test_editor_for_returns_none_on_miss():
    assert WidgetHeuristics.editor_for("Tags", List[str], lambda name: None) is None


def test_editor_for_exposes_widget_kind():
    factory = WidgetHeuristics.editor_for("Price", float, lambda name: "Price")
    assert factory.widget_kind is WidgetKind.NUMBER


def test_number_defaults(qapp):
    price = WidgetHeuristics.editor_for("Price", float, lambda n: "Price")(_state("Price", float))
    assert price.decimals() == 2
    assert price.singleStep() == pytest.approx(0.01)
    assert price.minimum() == 0

    percent = WidgetHeuristics.editor_for("DiscountPercent", float, lambda n: "Discount Percent")(
        _state("DiscountPercent", float))
    assert percent.minimum() == 0
    assert percent.maximum() == 100

    quantity = WidgetHeuristics.editor_for("Quantity", int, lambda n: "Quantity")(_state("Quantity", int))
    assert quantity.decimals() == 0
    assert quantity.singleStep() == 1
    quantity.setValue(3)
    assert quantity.get_value() == 3
    assert isinstance(quantity.get_value(), int)


def test_bool_defaults_use_scaffold_caption(qapp):
    checkbox = WidgetHeuristics.editor_for("IsPublished", bool, lambda n: "Is Published")(
        _state("IsPublished", bool))
    assert checkbox.get_label() == "Published"


def test_bool_defaults_keep_custom_label(qapp):
    labels = {"IsPublished": "Is Published"}
    factory = WidgetHeuristics.editor_for("IsPublished", bool, labels.get)

    # Label changed after scaffolding; the factory reads it when invoked
    labels["IsPublished"] = "Visible to customers"
    checkbox = factory(_state("IsPublished", bool))
    assert checkbox.get_label() == "Visible to customers"


def test_scaffold_defaults_ignore_plain_inputs(qapp):
    from pyqt_formbuilder.protocols import LineEditAdapter

    widget = LineEditAdapter()
    assert ScaffoldDefaults.apply(widget, "Name", str, "Name") is widget
