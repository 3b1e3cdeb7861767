"""
No-scroll input widgets for PyQt6.

Prevents accidental value changes from mouse wheel events while a long
form is being scrolled.
"""

from PyQt6.QtGui import QWheelEvent

from pyqt_formbuilder.protocols import NumberInputAdapter, ComboBoxAdapter, DateTimeEditAdapter


class NoScrollNumberInput(NumberInputAdapter):
    """Number input that ignores wheel events."""

    def wheelEvent(self, event: QWheelEvent):
        event.ignore()


class NoScrollComboBox(ComboBoxAdapter):
    """Single-select input that ignores wheel events."""

    def wheelEvent(self, event: QWheelEvent):
        event.ignore()


class NoScrollDateTimeEdit(DateTimeEditAdapter):
    """Date/time input that ignores wheel events."""

    def wheelEvent(self, event: QWheelEvent):
        event.ignore()
