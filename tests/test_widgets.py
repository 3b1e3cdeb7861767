"""Tests for input adapters, no-scroll variants and the widget kind registry."""

import uuid
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import List, Set

import pytest


class Role(Enum):
    ADMIN = "admin"
    CONTENT_EDITOR = "editor"


def test_line_edit_adapter(qapp):
    """Test LineEditAdapter implements protocols."""
    from pyqt_formbuilder.protocols import (
        ChangeSignalEmitter, LineEditAdapter, ReadOnlyCapable, ValueGettable, ValueSettable,
    )

    adapter = LineEditAdapter()
    assert isinstance(adapter, ValueGettable)
    assert isinstance(adapter, ValueSettable)
    assert isinstance(adapter, ChangeSignalEmitter)
    assert isinstance(adapter, ReadOnlyCapable)

    adapter.set_value("test")
    assert adapter.get_value() == "test"
    adapter.set_value(None)
    assert adapter.get_value() == ""


def test_change_callbacks_fire_on_user_edit_only(qapp):
    from pyqt_formbuilder.protocols import LineEditAdapter

    adapter = LineEditAdapter()
    seen = []
    adapter.connect_change_signal(seen.append)

    adapter.set_value("programmatic")
    assert seen == []

    adapter.textEdited.emit("typed")
    assert seen == ["programmatic"]

    adapter.disconnect_change_signal()
    adapter.textEdited.emit("again")
    assert seen == ["programmatic"]


def test_password_adapter_masks_input(qapp):
    from PyQt6.QtWidgets import QLineEdit
    from pyqt_formbuilder.protocols import PasswordEditAdapter

    assert PasswordEditAdapter().echoMode() == QLineEdit.EchoMode.Password


def test_read_only_adapter_keeps_value_object(qapp):
    from pyqt_formbuilder.protocols import ReadOnlyAdapter

    adapter = ReadOnlyAdapter()
    value = uuid.uuid4()
    adapter.set_value(value)
    assert adapter.get_value() is value
    assert adapter.text() == str(value)

    adapter.set_read_only(False)
    assert adapter.isReadOnly()


def test_color_adapter(qapp):
    from pyqt_formbuilder.protocols import ColorEditAdapter

    adapter = ColorEditAdapter()
    adapter.set_value("#ff0000")
    assert adapter.get_value() == "#ff0000"
    assert "background-color" in adapter.swatch.styleSheet()

    adapter.set_read_only(True)
    assert adapter.line_edit.isReadOnly()
    assert not adapter.swatch.isEnabled()


def test_checkbox_adapter(qapp):
    from pyqt_formbuilder.protocols import CheckBoxAdapter, Labelable

    adapter = CheckBoxAdapter()
    assert isinstance(adapter, Labelable)
    adapter.set_value(None)
    assert adapter.get_value() is False
    adapter.set_value(True)
    assert adapter.get_value() is True
    adapter.set_label("Active")
    assert adapter.get_label() == "Active"


def test_combobox_adapter_stores_enum_members(qapp):
    from pyqt_formbuilder.widgets import NoScrollComboBox

    adapter = NoScrollComboBox()
    adapter.populate_enum(Role)
    assert adapter.count() == 2
    assert adapter.itemText(1) == "Content Editor"
    assert adapter.get_value() is None

    adapter.set_value(Role.CONTENT_EDITOR)
    assert adapter.get_value() is Role.CONTENT_EDITOR

    with pytest.raises(TypeError):
        adapter.populate_enum(str)


def test_checkbox_group_adapter(qapp):
    from pyqt_formbuilder.protocols import CheckboxGroupAdapter

    adapter = CheckboxGroupAdapter(Role, set)
    assert adapter.get_value() == set()
    adapter.set_value([Role.ADMIN])
    assert adapter.get_value() == {Role.ADMIN}


@pytest.mark.parametrize("value_type, value", [
    (int, 42),
    (float, 2.5),
    (Decimal, Decimal("9.99")),
])
def test_number_adapter_keeps_value_type(qapp, value_type, value):
    from pyqt_formbuilder.protocols import NumberInputAdapter

    adapter = NumberInputAdapter(value_type)
    adapter.configure_number(0 if value_type is int else 2, 1)
    adapter.set_value(value)
    assert adapter.get_value() == value
    assert type(adapter.get_value()) is value_type


def test_number_adapter_set_value_is_silent(qapp):
    from pyqt_formbuilder.protocols import NumberInputAdapter

    adapter = NumberInputAdapter(float)
    seen = []
    adapter.connect_change_signal(seen.append)
    adapter.set_value(3.0)
    assert seen == []
    adapter.setValue(4.0)
    assert seen == [4.0]


@pytest.mark.parametrize("value_type, value", [
    (datetime, datetime(2024, 5, 17, 9, 30, 15)),
    (date, date(2024, 5, 17)),
    (time, time(9, 30, 15)),
])
def test_date_time_adapter(qapp, value_type, value):
    from pyqt_formbuilder.protocols import DateTimeEditAdapter

    adapter = DateTimeEditAdapter(value_type)
    adapter.set_value(value)
    assert adapter.get_value() == value


def test_file_adapter(qapp):
    from pyqt_formbuilder.protocols import FileEditAdapter

    adapter = FileEditAdapter()
    assert adapter.get_value() is None
    adapter.set_value(Path("/tmp/report.csv"))
    assert adapter.get_value() == Path("/tmp/report.csv")


def test_no_scroll_widgets(qapp):
    """No-scroll variants are still full adapters."""
    from pyqt_formbuilder.protocols import ComboBoxAdapter, DateTimeEditAdapter, NumberInputAdapter
    from pyqt_formbuilder.widgets import NoScrollComboBox, NoScrollDateTimeEdit, NoScrollNumberInput

    assert isinstance(NoScrollNumberInput(), NumberInputAdapter)
    assert isinstance(NoScrollComboBox(), ComboBoxAdapter)
    assert isinstance(NoScrollDateTimeEdit(), DateTimeEditAdapter)


def test_create_input_for_every_kind(qapp):
    from pyqt_formbuilder.forms.model_state import ModelState
    from pyqt_formbuilder.forms.widget_factory import WidgetKind, create_input
    from pyqt_formbuilder.protocols import ValueGettable, ValueSettable

    types = {
        WidgetKind.SELECT: Role,
        WidgetKind.MULTI_SELECT: List[Role],
        WidgetKind.NUMBER: int,
        WidgetKind.DATE_TIME: date,
    }
    state = ModelState(object(), object)
    for kind in WidgetKind:
        widget = create_input(kind, state.field("value", types.get(kind, str)))
        assert isinstance(widget, ValueGettable)
        assert isinstance(widget, ValueSettable)


def test_register_widget_kind_overrides_factory(qapp):
    from pyqt_formbuilder.forms import widget_factory
    from pyqt_formbuilder.forms.model_state import ModelState
    from pyqt_formbuilder.forms.widget_factory import WidgetKind, create_input, register_widget_kind
    from pyqt_formbuilder.protocols import LineEditAdapter

    class RichText(LineEditAdapter):
        pass

    original = widget_factory.WIDGET_KIND_FACTORIES[WidgetKind.TEXT]
    try:
        register_widget_kind(WidgetKind.TEXT, lambda state: RichText())
        widget = create_input(WidgetKind.TEXT, ModelState(object(), object).field("value", str))
        assert isinstance(widget, RichText)
    finally:
        widget_factory.WIDGET_KIND_FACTORIES[WidgetKind.TEXT] = original


def test_create_input_unknown_kind_fails_loud(qapp):
    from pyqt_formbuilder.exceptions import WidgetKindError
    from pyqt_formbuilder.forms import widget_factory
    from pyqt_formbuilder.forms.model_state import ModelState
    from pyqt_formbuilder.forms.widget_factory import WidgetKind, create_input

    original = widget_factory.WIDGET_KIND_FACTORIES.pop(WidgetKind.COLOR)
    try:
        with pytest.raises(WidgetKindError):
            create_input(WidgetKind.COLOR, ModelState(object(), object).field("value", str))
    finally:
        widget_factory.WIDGET_KIND_FACTORIES[WidgetKind.COLOR] = original


def test_signal_service_blocks_and_restores(qapp):
    from pyqt_formbuilder.protocols import NumberInputAdapter
    from pyqt_formbuilder.services import SignalService

    adapter = NumberInputAdapter(float)
    emitted = []
    adapter.valueChanged.connect(emitted.append)

    SignalService.update_widget_value(adapter, 5.0)
    assert emitted == []
    assert adapter.get_value() == 5.0
    assert not adapter.signalsBlocked()

    with pytest.raises(TypeError):
        from PyQt6.QtWidgets import QWidget
        SignalService.update_widget_value(QWidget(), 1)
