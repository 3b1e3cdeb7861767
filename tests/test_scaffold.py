"""Tests for model member enumeration and descriptor scaffolding."""

import uuid
from dataclasses import dataclass, field
from typing import Annotated, ClassVar, Optional

from pyqt_formbuilder.forms.form_field import UNORDERED
from pyqt_formbuilder.forms.scaffold import Required, ScaffoldEngine
from pyqt_formbuilder.protocols.form_config import FormBuilderConfig


@dataclass
class Account:
    name: Annotated[str, Required]
    email: str = field(default="", metadata={"required": True})
    nickname: Optional[str] = None
    _secret: str = ""
    registry: ClassVar[dict] = {}

    @property
    def display_name(self) -> str:
        return f"{self.name} <{self.email}>"


class PlainModel:
    title: str
    count: int

    @property
    def title(self) -> str:
        return "shadowed"

    @title.setter
    def title(self, value: str) -> None:
        pass


class Empty:
    pass


def no_editor(name, field_type):
    return None


def text_editor(name, field_type):
    return lambda state: None


def test_enumerate_dataclass_fields_and_properties():
    members = {m.name: m for m in ScaffoldEngine.enumerate_members(Account)}

    assert set(members) == {"name", "email", "nickname", "display_name"}
    assert (members["name"].member_type, members["name"].required) == (str, True)
    assert members["email"].required
    assert not members["nickname"].required
    assert members["nickname"].member_type == Optional[str]
    assert members["display_name"].settable is False


def test_enumerate_plain_class_property_replaces_field():
    members = {m.name: m for m in ScaffoldEngine.enumerate_members(PlainModel)}

    # Union by name: one member per distinct name
    assert list(members) == ["title", "count"]
    assert members["title"].settable is True
    assert members["count"].member_type is int


def test_scaffold_one_descriptor_per_member():
    fields = ScaffoldEngine.scaffold(Account, text_editor)

    assert len(fields) == len(ScaffoldEngine.enumerate_members(Account))
    assert all(f.order == UNORDERED for f in fields.values())
    assert fields["display_name"].label == "Display Name"


def test_scaffold_required_members_get_required_validator():
    fields = ScaffoldEngine.scaffold(Account, text_editor)

    assert fields["name"].required
    assert len(fields["name"].validators) == 1
    assert fields["name"].validators[0]("")[0] is False
    assert fields["nickname"].validators == []


def test_scaffold_heuristic_miss_leaves_field_unrenderable():
    fields = ScaffoldEngine.scaffold(Account, no_editor)

    assert "nickname" in fields
    assert fields["nickname"].widget_factory is None
    assert not fields["nickname"].is_renderable


def test_scaffold_uses_config_defaults():
    config = FormBuilderConfig(required_message="Please fill in", default_disabled=False)
    fields = ScaffoldEngine.scaffold(Account, text_editor, config)

    assert fields["name"].disabled is False
    assert fields["name"].validators[0]("") == (False, "Please fill in")


def test_scaffold_empty_model_yields_empty_table():
    assert ScaffoldEngine.scaffold(Empty, text_editor) == {}


def test_id_field_label():
    @dataclass
    class Order:
        customer_id: uuid.UUID

    fields = ScaffoldEngine.scaffold(Order, no_editor)
    assert fields["customer_id"].label == "Customer"


@dataclass
class Ticket:
    subject: str
    body: str = field(default="", metadata={"description": "Full problem report"})

    @property
    def preview(self) -> str:
        """First line of the body."""
        return self.body.splitlines()[0] if self.body else ""


def test_field_without_default_is_not_required_without_marker():
    members = {m.name: m for m in ScaffoldEngine.enumerate_members(Ticket)}
    assert not members["subject"].required


def test_scaffold_picks_up_member_descriptions():
    fields = ScaffoldEngine.scaffold(Ticket, text_editor)

    assert fields["body"].description == "Full problem report"
    assert fields["preview"].description == "First line of the body."
