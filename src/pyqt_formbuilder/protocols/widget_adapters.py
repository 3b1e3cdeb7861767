"""
Input adapters that wrap Qt widgets to implement the form ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QDoubleSpinBox.value() vs QComboBox.currentData()
- textChanged vs valueChanged vs currentIndexChanged vs toggled
- setReadOnly() vs setEnabled()

All adapters implement a consistent interface via ABCs:
- get_value() / set_value() for all widgets
- connect_change_signal() for all widgets
- set_read_only() for all widgets
"""

import logging
from abc import ABCMeta
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Callable, List, Optional, Type

from PyQt6.QtCore import QDate, QDateTime, QObject, Qt, QTime
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QCheckBox, QColorDialog, QComboBox, QDateTimeEdit, QDoubleSpinBox,
    QFileDialog, QGroupBox, QHBoxLayout, QLineEdit, QPushButton,
    QVBoxLayout, QWidget,
)

from .widget_protocols import (
    ChangeSignalEmitter, Labelable, NumberConfigurable, ReadOnlyCapable,
    ValueGettable, ValueSettable,
)

logger = logging.getLogger(__name__)

# PyQt-specific metaclass that combines Qt's metaclass with ABCMeta
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class _ChangeCallbacks:
    """
    Shared ChangeSignalEmitter implementation.

    Adapters route their native Qt change signal into _notify_change once;
    callbacks registered here receive the normalized value.
    """

    def _init_change_callbacks(self) -> None:
        self._change_callbacks: List[Callable[[Any], None]] = []

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self._change_callbacks.append(callback)

    def disconnect_change_signal(self) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self._change_callbacks.clear()

    def _notify_change(self, *_args) -> None:
        value = self.get_value()
        for callback in list(self._change_callbacks):
            callback(value)


class LineEditAdapter(QLineEdit, _ChangeCallbacks, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, ReadOnlyCapable, metaclass=PyQtWidgetMeta):
    """
    Plain text input.

    Normalizes Qt API:
    - .text() -> .get_value()
    - .setText() -> .set_value()
    - .textEdited -> .connect_change_signal()
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._init_change_callbacks()
        # textEdited fires for user edits only, never for set_value()
        self.textEdited.connect(self._notify_change)

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.text()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setText("" if value is None else str(value))

    def set_read_only(self, read_only: bool) -> None:
        """Implement ReadOnlyCapable ABC."""
        self.setReadOnly(read_only)


class EmailEditAdapter(LineEditAdapter):
    """Text input tuned for e-mail addresses."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setPlaceholderText("name@example.com")
        self.setInputMethodHints(Qt.InputMethodHint.ImhEmailCharactersOnly)


class PasswordEditAdapter(LineEditAdapter):
    """Text input with masked echo."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setEchoMode(QLineEdit.EchoMode.Password)


class ReadOnlyAdapter(LineEditAdapter):
    """
    Display-only input for identifiers.

    Keeps the original value object so get_value() round-trips UUIDs and ints
    instead of their text form.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._value: Any = None
        self.setReadOnly(True)

    def get_value(self) -> Any:
        return self._value

    def set_value(self, value: Any) -> None:
        self._value = value
        super().set_value(value)

    def set_read_only(self, read_only: bool) -> None:
        # Identifiers are never editable through the default scaffold
        self.setReadOnly(True)


class ColorEditAdapter(QWidget, _ChangeCallbacks, ValueGettable, ValueSettable,
                       ChangeSignalEmitter, ReadOnlyCapable, metaclass=PyQtWidgetMeta):
    """Hex color text input with a swatch button opening QColorDialog."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._init_change_callbacks()
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.line_edit = QLineEdit(self)
        self.line_edit.setPlaceholderText("#rrggbb")
        self.line_edit.textEdited.connect(self._on_text_edited)
        layout.addWidget(self.line_edit, 1)

        self.swatch = QPushButton(self)
        self.swatch.setFixedWidth(28)
        self.swatch.clicked.connect(self._pick_color)
        layout.addWidget(self.swatch)

    def get_value(self) -> Any:
        return self.line_edit.text()

    def set_value(self, value: Any) -> None:
        self.line_edit.setText("" if value is None else str(value))
        self._refresh_swatch()

    def set_read_only(self, read_only: bool) -> None:
        self.line_edit.setReadOnly(read_only)
        self.swatch.setEnabled(not read_only)

    def _on_text_edited(self, _text: str) -> None:
        self._refresh_swatch()
        self._notify_change()

    def _refresh_swatch(self) -> None:
        color = QColor(self.line_edit.text())
        style = f"background-color: {color.name()};" if color.isValid() else ""
        self.swatch.setStyleSheet(style)

    def _pick_color(self) -> None:
        initial = QColor(self.line_edit.text())
        color = QColorDialog.getColor(initial if initial.isValid() else QColor("#ffffff"), self)
        if color.isValid():
            self.line_edit.setText(color.name())
            self._on_text_edited(color.name())


class CheckBoxAdapter(QCheckBox, _ChangeCallbacks, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, ReadOnlyCapable, Labelable,
                      metaclass=PyQtWidgetMeta):
    """
    Boolean input.

    Returns bool values, treats None as False. The checkbox renders its own
    caption, so the form does not add a separate label for it.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._init_change_callbacks()
        self.clicked.connect(self._notify_change)

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setChecked(bool(value) if value is not None else False)

    def set_read_only(self, read_only: bool) -> None:
        self.setEnabled(not read_only)

    def set_label(self, text: str) -> None:
        self.setText(text)

    def get_label(self) -> str:
        return self.text()


class ComboBoxAdapter(QComboBox, _ChangeCallbacks, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, ReadOnlyCapable, metaclass=PyQtWidgetMeta):
    """
    Single-select input.

    Stores actual enum members in itemData, not just display text.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._init_change_callbacks()
        self.activated.connect(self._notify_change)

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        if self.currentIndex() < 0:
            return None
        return self.itemData(self.currentIndex())

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        for i in range(self.count()):
            if self.itemData(i) == value:
                self.setCurrentIndex(i)
                return
        # Value not found - clear selection
        self.setCurrentIndex(-1)

    def set_read_only(self, read_only: bool) -> None:
        self.setEnabled(not read_only)

    def populate_enum(self, enum_type: Type[Enum]) -> None:
        """
        Populate combobox with enum members.

        Args:
            enum_type: The Enum class to populate from
        """
        if not isinstance(enum_type, type) or not issubclass(enum_type, Enum):
            raise TypeError(f"{enum_type} is not an Enum type")

        from pyqt_formbuilder.forms.labels import format_enum_display

        self.clear()
        for member in enum_type:
            self.addItem(format_enum_display(member), member)
        self.setCurrentIndex(-1)


class CheckboxGroupAdapter(QGroupBox, _ChangeCallbacks, ValueGettable, ValueSettable,
                           ChangeSignalEmitter, ReadOnlyCapable, metaclass=PyQtWidgetMeta):
    """
    Multi-select input for collections of enum members.

    One checkbox per member; get_value() returns the checked members in enum
    order, wrapped in the collection type the field declares.
    """

    def __init__(self, enum_type: Type[Enum], container: type = list, parent=None):
        super().__init__(parent)
        self._init_change_callbacks()
        self._container = container
        self._checkboxes = {}

        from pyqt_formbuilder.forms.labels import format_enum_display

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        for member in enum_type:
            checkbox = QCheckBox(format_enum_display(member), self)
            checkbox.clicked.connect(self._notify_change)
            layout.addWidget(checkbox)
            self._checkboxes[member] = checkbox

    def get_value(self) -> Any:
        checked = [member for member, checkbox in self._checkboxes.items() if checkbox.isChecked()]
        return self._container(checked)

    def set_value(self, value: Any) -> None:
        selected = set(value or ())
        for member, checkbox in self._checkboxes.items():
            checkbox.setChecked(member in selected)

    def set_read_only(self, read_only: bool) -> None:
        for checkbox in self._checkboxes.values():
            checkbox.setEnabled(not read_only)


class NumberInputAdapter(QDoubleSpinBox, _ChangeCallbacks, ValueGettable, ValueSettable,
                         ChangeSignalEmitter, ReadOnlyCapable, NumberConfigurable,
                         metaclass=PyQtWidgetMeta):
    """
    Numeric input for int, float and Decimal fields.

    A single spin box serves every numeric type; get_value() converts back to
    the declared type so the working copy keeps its value types.
    """

    def __init__(self, value_type: type = float, parent=None):
        super().__init__(parent)
        self._init_change_callbacks()
        self._value_type = value_type
        self._updating = False
        self.setRange(-1e12, 1e12)
        self.setKeyboardTracking(False)
        self.valueChanged.connect(self._on_value_changed)

    def get_value(self) -> Any:
        value = self.value()
        if self._value_type is int:
            return int(round(value))
        if self._value_type is Decimal:
            return Decimal(str(round(value, self.decimals())))
        return value

    def set_value(self, value: Any) -> None:
        self._updating = True
        try:
            self.setValue(float(value) if value is not None else 0.0)
        finally:
            self._updating = False

    def set_read_only(self, read_only: bool) -> None:
        self.setReadOnly(read_only)

    def configure_number(self, decimals: int, step: float,
                         minimum: Optional[float] = None,
                         maximum: Optional[float] = None) -> None:
        """Implement NumberConfigurable ABC."""
        self.setDecimals(decimals)
        self.setSingleStep(step)
        if minimum is not None:
            self.setMinimum(minimum)
        if maximum is not None:
            self.setMaximum(maximum)

    def _on_value_changed(self, _value: float) -> None:
        if not self._updating:
            self._notify_change()


class DateTimeEditAdapter(QDateTimeEdit, _ChangeCallbacks, ValueGettable, ValueSettable,
                          ChangeSignalEmitter, ReadOnlyCapable, metaclass=PyQtWidgetMeta):
    """Date/time input converting between Python and Qt temporal types."""

    DISPLAY_FORMATS = {
        datetime: "yyyy-MM-dd HH:mm:ss",
        date: "yyyy-MM-dd",
        time: "HH:mm:ss",
    }

    def __init__(self, value_type: type = datetime, parent=None):
        super().__init__(parent)
        self._init_change_callbacks()
        self._value_type = value_type
        self._updating = False
        self.setCalendarPopup(value_type is not time)
        self.setDisplayFormat(self.DISPLAY_FORMATS[value_type])
        self.dateTimeChanged.connect(self._on_changed)

    def get_value(self) -> Any:
        qdt = self.dateTime()
        if self._value_type is date:
            return qdt.date().toPyDate()
        if self._value_type is time:
            return qdt.time().toPyTime()
        return qdt.toPyDateTime()

    def set_value(self, value: Any) -> None:
        if value is None:
            return
        self._updating = True
        try:
            if isinstance(value, datetime):
                self.setDateTime(QDateTime(
                    QDate(value.year, value.month, value.day),
                    QTime(value.hour, value.minute, value.second, value.microsecond // 1000),
                ))
            elif isinstance(value, date):
                self.setDate(QDate(value.year, value.month, value.day))
            elif isinstance(value, time):
                self.setTime(QTime(value.hour, value.minute, value.second, value.microsecond // 1000))
            else:
                raise TypeError(f"Cannot show {type(value).__name__} in a date/time input")
        finally:
            self._updating = False

    def set_read_only(self, read_only: bool) -> None:
        self.setReadOnly(read_only)

    def _on_changed(self, _value) -> None:
        if not self._updating:
            self._notify_change()


class FileEditAdapter(QWidget, _ChangeCallbacks, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, ReadOnlyCapable, metaclass=PyQtWidgetMeta):
    """Path input with a browse button."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._init_change_callbacks()
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.path_edit = QLineEdit(self)
        self.path_edit.textEdited.connect(self._notify_change)
        layout.addWidget(self.path_edit, 1)

        self.browse_button = QPushButton("Browse...", self)
        self.browse_button.clicked.connect(self._browse)
        layout.addWidget(self.browse_button)

    def get_value(self) -> Any:
        text = self.path_edit.text().strip()
        return Path(text) if text else None

    def set_value(self, value: Any) -> None:
        self.path_edit.setText("" if value is None else str(value))

    def set_read_only(self, read_only: bool) -> None:
        self.path_edit.setReadOnly(read_only)
        self.browse_button.setEnabled(not read_only)

    def _browse(self) -> None:
        file_name, _ = QFileDialog.getOpenFileName(self, "Select file", self.path_edit.text())
        if file_name:
            self.path_edit.setText(file_name)
            self._notify_change()
