"""
Field binding: one snapshot wired to the working copy for one render pass.

bind() creates the FieldState handle, builds the input from the snapshot's
factory, pushes the current value into it and subscribes to the pass's
validation and update signals. Everything acquired is released by the
returned disposable.

Data flow:
    input edit -> FieldState.set() -> working copy -> update signal (visibility)
    submit -> validation signal -> validators on current value -> bool
"""

import logging
from contextlib import ExitStack
from typing import Any, Optional, Tuple

from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from pyqt_formbuilder.protocols import (
    ChangeSignalEmitter, Labelable, ReadOnlyCapable, ValueGettable, ValueSettable,
)
from pyqt_formbuilder.protocols.form_config import FormBuilderConfig, get_form_config
from pyqt_formbuilder.services import SignalService
from .form_field import FieldSnapshot
from .form_signal import FormSignal
from .model_state import FieldState, ModelState

logger = logging.getLogger(__name__)


class FormFieldView(QWidget):
    """Label, input, description and error text of one field."""

    def __init__(self, snapshot: FieldSnapshot, input_widget: QWidget,
                 config: FormBuilderConfig, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.snapshot = snapshot
        self.input_widget = input_widget
        self.field_visible = True

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(config.layout.field_spacing)

        # Checkbox-style inputs render their own caption
        self.label: Optional[QLabel] = None
        marker = config.required_marker if snapshot.required else ""
        if isinstance(input_widget, Labelable):
            if marker:
                input_widget.set_label(f"{input_widget.get_label()}{marker}")
        else:
            self.label = QLabel(f"{snapshot.label}{marker}", self)
            self.label.setBuddy(input_widget)
            layout.addWidget(self.label)

        layout.addWidget(input_widget)

        self.description_label: Optional[QLabel] = None
        if snapshot.description:
            self.description_label = QLabel(snapshot.description, self)
            self.description_label.setWordWrap(True)
            self.description_label.setStyleSheet("color: gray;")
            layout.addWidget(self.description_label)

        self.error_label = QLabel(self)
        self.error_label.setStyleSheet("color: #c0392b;")
        self.error_label.hide()
        layout.addWidget(self.error_label)

    @property
    def name(self) -> str:
        return self.snapshot.name

    @property
    def error_text(self) -> Optional[str]:
        return self.error_label.text() if not self.error_label.isHidden() else None

    def show_error(self, message: Optional[str]) -> None:
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))

    def set_field_visible(self, visible: bool) -> None:
        """
        Show or hide the field.

        A view without a parent only records the flag; showing it would open
        a top-level window. FormView applies the flag when it adopts the view.
        """
        self.field_visible = visible
        if visible and self.parentWidget() is None:
            return
        self.setVisible(visible)


class FormFieldBinding:
    """Binds one FieldSnapshot to a working ModelState."""

    def __init__(self, snapshot: FieldSnapshot, update_signal: FormSignal,
                 validation_signal: FormSignal, config: Optional[FormBuilderConfig] = None):
        self.snapshot = snapshot
        self._update_signal = update_signal
        self._validation_signal = validation_signal
        self._config = config or get_form_config()
        self._resources = ExitStack()
        self.field_state: Optional[FieldState] = None
        self.view: Optional[FormFieldView] = None

    def bind(self, model_state: ModelState) -> Tuple["FormFieldBinding", FormFieldView]:
        """
        Build the field view and wire it to model_state.

        Returns:
            (disposable, view); dispose() releases subscriptions and callbacks

        Raises:
            TypeError: If the factory's input does not implement ValueGettable
                and ValueSettable
        """
        snapshot = self.snapshot
        self.field_state = FieldState(model_state, snapshot.name, snapshot.field_type, snapshot.settable)

        widget = snapshot.widget_factory(self.field_state)
        if not (isinstance(widget, ValueGettable) and isinstance(widget, ValueSettable)):
            raise TypeError(
                f"Input for field '{snapshot.name}' must implement ValueGettable and ValueSettable, "
                f"got {type(widget).__name__}"
            )

        SignalService.update_widget_value(widget, self.field_state.get())
        self._apply_disabled(widget)

        self.view = FormFieldView(snapshot, widget, self._config)
        self.view.set_field_visible(self._is_visible())

        if isinstance(widget, ChangeSignalEmitter):
            widget.connect_change_signal(self._on_input_changed)
            self._resources.callback(widget.disconnect_change_signal)

        self._resources.callback(self._validation_signal.subscribe(self._on_validate).dispose)
        self._resources.callback(self._update_signal.subscribe(self._on_update).dispose)

        logger.debug(f"Bound field '{snapshot.name}' to {type(widget).__name__}")
        return self, self.view

    def dispose(self) -> None:
        """Release subscriptions; safe to call more than once."""
        self._resources.close()

    def _apply_disabled(self, widget: Any) -> None:
        if not self.snapshot.disabled:
            return
        if isinstance(widget, ReadOnlyCapable):
            widget.set_read_only(True)
        else:
            widget.setEnabled(False)

    def _is_visible(self) -> bool:
        return bool(self.snapshot.visible(self.field_state.model_state.value))

    def _on_input_changed(self, value: Any) -> None:
        self.field_state.set(value)
        self.view.show_error(None)
        self._update_signal.notify(None)

    async def _on_validate(self, _request: Any) -> bool:
        # Hidden fields are validated too
        valid, error = self.snapshot.validate(self.field_state.get())
        self.view.show_error(error)
        if not valid:
            logger.debug(f"Field '{self.snapshot.name}' failed validation: {error}")
        return valid

    def _on_update(self, _request: Any) -> None:
        self.view.set_field_visible(self._is_visible())
