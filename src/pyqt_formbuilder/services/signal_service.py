"""
Signal blocking helpers.

Pushing a model value into an input must not echo back as a user edit. Qt
inputs are updated with their signals blocked; the context manager
guarantees unblocking even when the setter raises.
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Optional

from PyQt6.QtWidgets import QWidget

from pyqt_formbuilder.protocols import ValueSettable

logger = logging.getLogger(__name__)


class SignalService:
    """
    Signal blocking for form inputs.

    Examples:
        with SignalService.block_signals(checkbox):
            checkbox.setChecked(True)

        SignalService.update_widget_value(widget, model.name)
    """

    @staticmethod
    @contextmanager
    def block_signals(*widgets: QWidget):
        """Context manager for blocking widget signals."""
        blocked = [widget for widget in widgets if widget is not None and not widget.signalsBlocked()]
        for widget in blocked:
            widget.blockSignals(True)
        try:
            yield
        finally:
            for widget in blocked:
                widget.blockSignals(False)

    @staticmethod
    def update_widget_value(widget: QWidget, value: Any, setter: Optional[Callable] = None) -> None:
        """
        Update an input's value with signals blocked.

        Raises:
            TypeError: If widget implements no ValueSettable and no setter is given
        """
        with SignalService.block_signals(widget):
            if setter is not None:
                setter(widget, value)
            elif isinstance(widget, ValueSettable):
                widget.set_value(value)
            else:
                raise TypeError(f"{type(widget).__name__} does not implement ValueSettable")
        logger.debug(f"Pushed value into {type(widget).__name__}")
