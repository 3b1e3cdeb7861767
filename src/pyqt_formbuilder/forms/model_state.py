"""
Reactive model state.

ModelState is a state cell holding one model object. Replacing the object
(set) or editing it in place and calling touch() emits value_changed, so every
observer sees the current model.

FieldState is a live handle on one attribute of a ModelState. Field bindings
read and write through it; writes edit the current model object in place and
then touch the owning state.
"""

import logging
from typing import Any, Optional, Type

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


class ModelState(QObject):
    """State cell for one model object."""

    value_changed = pyqtSignal(object)  # the current model object

    def __init__(self, value: Any, state_type: Optional[Type] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        if value is None and state_type is None:
            raise TypeError("ModelState needs a value or an explicit state_type")
        self._value = value
        self._state_type = state_type or type(value)

    @property
    def value(self) -> Any:
        return self._value

    @property
    def state_type(self) -> Type:
        """Declared model type; scaffolding enumerates this, not type(value)."""
        return self._state_type

    def set(self, value: Any) -> None:
        """Replace the held object in one assignment and notify observers."""
        self._value = value
        self.value_changed.emit(value)

    def touch(self) -> None:
        """Re-emit value_changed after an in-place edit of the held object."""
        self.value_changed.emit(self._value)

    def field(self, name: str, field_type: Type = object, settable: bool = True) -> "FieldState":
        return FieldState(self, name, field_type, settable)

    def __repr__(self) -> str:
        return f"ModelState({self._value!r})"


class FieldState(QObject):
    """Live read/write handle on one attribute of a ModelState."""

    value_changed = pyqtSignal(object)  # the attribute's new value

    def __init__(self, model_state: ModelState, name: str, field_type: Type = object,
                 settable: bool = True, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._model_state = model_state
        self.name = name
        self.field_type = field_type
        self.settable = settable

    @property
    def model_state(self) -> ModelState:
        return self._model_state

    def get(self) -> Any:
        return getattr(self._model_state.value, self.name)

    def set(self, value: Any) -> None:
        """Write the attribute on the current model object and touch the state."""
        if not self.settable:
            logger.debug(f"Ignoring write to read-only member '{self.name}'")
            return
        setattr(self._model_state.value, self.name, value)
        self.value_changed.emit(value)
        self._model_state.touch()

    def __repr__(self) -> str:
        return f"FieldState({self.name!r})"
