"""Tests for the fluent field configuration API."""

from dataclasses import dataclass
from typing import Optional

import pytest

from pyqt_formbuilder.exceptions import FieldLookupError
from pyqt_formbuilder.forms.form_builder import FormBuilder
from pyqt_formbuilder.forms.model_state import ModelState
from pyqt_formbuilder.protocols import CheckBoxAdapter, NumberInputAdapter


@dataclass
class Profile:
    Name: str = ""
    Bio: str = ""
    Score: float = 0.0
    Level: int = 0
    Subscribed: bool = False
    Nickname: Optional[str] = None

    @property
    def Summary(self) -> str:
        return f"{self.Name} ({self.Level})"


@pytest.fixture
def builder():
    return FormBuilder(ModelState(Profile()))


def test_fluent_calls_return_builder(builder):
    result = (builder
              .label("Name", "Full name")
              .description("Bio", "Tell us about yourself")
              .visible("Bio", lambda model: bool(model.Name))
              .disabled(False, "Name", "Bio")
              .validate("Score", lambda value: (value >= 0, "Must be positive"))
              .required("Name"))
    assert result is builder

    assert builder.field("Name").label == "Full name"
    assert builder.field("Bio").description == "Tell us about yourself"
    assert builder.field("Bio").visible(Profile(Name="x"))
    assert not builder.field("Bio").visible(Profile())
    assert builder.field("Name").disabled is False
    assert builder.field("Score").disabled is True
    assert builder.field("Score").validators[0](-1) == (False, "Must be positive")


def test_required_twice_appends_two_validators(builder):
    builder.required("Name").required("Name")

    name = builder.field("Name")
    assert name.required
    assert len(name.validators) == 2
    assert all(check("") == (False, "Required field") for check in name.validators)


def test_required_validator_rejects_blank_values(builder):
    builder.required("Name", "Nickname")
    name_check = builder.field("Name").validators[0]
    nickname_check = builder.field("Nickname").validators[0]

    assert name_check("  ") == (False, "Required field")
    assert name_check("Ada")[0]
    assert not nickname_check(None)[0]


def test_property_selector(builder):
    builder.label(Profile.Summary, "Overview")
    assert builder.field("Summary").label == "Overview"


def test_unknown_selector_fails_at_call(builder):
    with pytest.raises(FieldLookupError):
        builder.label("Nope", "x")
    with pytest.raises(FieldLookupError):
        builder.required("Name", "Nope")


def test_builder_for_type_assigns_raw_factory(builder):
    def factory(state):
        return None

    builder.builder_for_type(str, factory)
    assert builder.field("Name").widget_factory is factory
    assert builder.field("Bio").widget_factory is factory
    # Optional[str] is a different declared type
    assert builder.field("Nickname").widget_factory is not factory
    assert builder.field("Score").widget_factory is not factory


def test_builder_wraps_factory_with_number_defaults(qapp, builder):
    builder.builder("Level", lambda state: NumberInputAdapter(int))

    widget = builder.field("Level").widget_factory(None)
    assert isinstance(widget, NumberInputAdapter)
    assert widget.decimals() == 0
    assert widget.singleStep() == 1


def test_builder_wraps_factory_with_bool_defaults(qapp, builder):
    builder.builder("Subscribed", lambda state: CheckBoxAdapter())
    assert builder.field("Subscribed").widget_factory(None).get_label() == "Subscribed"

    builder.label("Subscribed", "Send me the newsletter")
    assert builder.field("Subscribed").widget_factory(None).get_label() == "Send me the newsletter"
