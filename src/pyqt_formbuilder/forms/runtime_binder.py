"""
Form runtime binder.

A FormSession owns one render pass: the working copy, the validation and
update signals, and one FormFieldBinding per renderable field.

Phases:
    IDLE -> bind() -> BOUND
    BOUND -> submit() -> VALIDATING -> COMMITTED | REJECTED -> BOUND
    any -> dispose() -> IDLE

Submit commits only on a unanimous pass across every bound field, hidden
ones included. A commit replaces the source model with a clone of the
working copy in one assignment; a rejection leaves both untouched and only
publishes the number of failing fields.
"""

import copy
import logging
from contextlib import ExitStack
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from pyqt_formbuilder.exceptions import ModelCloneError
from pyqt_formbuilder.protocols.form_config import FormBuilderConfig, get_form_config
from .field_binding import FormFieldBinding, FormFieldView
from .form_field import FieldSnapshot, FormField
from .form_signal import FormSignal
from .model_state import ModelState

logger = logging.getLogger(__name__)

CloneFunction = Callable[[Any], Any]


class FormPhase(Enum):
    IDLE = "idle"
    BOUND = "bound"
    VALIDATING = "validating"
    COMMITTED = "committed"
    REJECTED = "rejected"


class FormSession(QObject):
    """Working copy, signals and bindings of one render pass."""

    invalid_count_changed = pyqtSignal(int)
    submitting_changed = pyqtSignal(bool)
    phase_changed = pyqtSignal(object)  # FormPhase

    def __init__(self, source: ModelState, fields: Iterable[FormField],
                 config: Optional[FormBuilderConfig] = None,
                 clone: Optional[CloneFunction] = None,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self._source = source
        self._fields = list(fields)
        self._config = config or get_form_config()
        self._clone = clone or copy.deepcopy
        self._resources = ExitStack()

        self._phase = FormPhase.IDLE
        self._invalid_count = 0
        self._submitting = False

        self.working: Optional[ModelState] = None
        self.snapshots: List[FieldSnapshot] = []
        self.bindings: List[FormFieldBinding] = []
        self.validation_signal: Optional[FormSignal] = None
        self.update_signal: Optional[FormSignal] = None

    @property
    def phase(self) -> FormPhase:
        return self._phase

    @property
    def invalid_count(self) -> int:
        return self._invalid_count

    @property
    def submitting(self) -> bool:
        return self._submitting

    @property
    def source(self) -> ModelState:
        return self._source

    def clone(self, value: Any) -> Any:
        """
        Clone a model value with the session's clone function.

        Raises:
            ModelCloneError: If the clone function fails
        """
        try:
            return self._clone(value)
        except Exception as e:
            raise ModelCloneError(f"Cannot clone {type(value).__name__}: {e}") from e

    def bind(self) -> List[FormFieldView]:
        """
        Start a render pass.

        Clones the source into a working copy, freezes the renderable
        descriptors into snapshots and binds one field per snapshot.

        Returns:
            Field views in (column, order) order
        """
        if self._phase is not FormPhase.IDLE:
            self.dispose()

        self.working = ModelState(self.clone(self._source.value), self._source.state_type)
        self.snapshots = sorted(
            (f.snapshot() for f in self._fields if f.is_renderable),
            key=lambda s: (s.column, s.order),
        )

        self.validation_signal = FormSignal("validation")
        self.update_signal = FormSignal("update")
        self._resources.callback(self.validation_signal.close)
        self._resources.callback(self.update_signal.close)

        views: List[FormFieldView] = []
        self.bindings = []
        for snapshot in self.snapshots:
            binding = FormFieldBinding(snapshot, self.update_signal, self.validation_signal, self._config)
            disposable, view = binding.bind(self.working)
            self._resources.callback(disposable.dispose)
            self.bindings.append(binding)
            views.append(view)

        self._set_phase(FormPhase.BOUND)
        logger.debug(f"Bound {len(views)} fields for {self._source.state_type.__name__}")
        return views

    async def submit(self) -> bool:
        """
        Validate every bound field and commit or reject.

        Returns:
            True if the working copy was committed to the source
        """
        if self._phase is FormPhase.IDLE:
            raise RuntimeError("Cannot submit a form session that is not bound")

        self._set_submitting(True)
        self._set_phase(FormPhase.VALIDATING)
        try:
            results = await self.validation_signal.send(None)
            failures = sum(1 for result in results if not result)
            if failures == 0:
                self._source.set(self.clone(self.working.value))
                self._set_invalid_count(0)
                self._set_phase(FormPhase.COMMITTED)
                logger.info(f"Committed {self._source.state_type.__name__} form")
            else:
                self._set_invalid_count(failures)
                self._set_phase(FormPhase.REJECTED)
                logger.debug(f"Rejected submit: {failures} invalid fields")
            return failures == 0
        finally:
            self._set_submitting(False)
            if self._phase is not FormPhase.IDLE:
                self._set_phase(FormPhase.BOUND)

    def dispose(self) -> None:
        """End the render pass; safe to call more than once."""
        self._resources.close()
        self.bindings = []
        if self._phase is not FormPhase.IDLE:
            self._set_phase(FormPhase.IDLE)

    def _set_phase(self, phase: FormPhase) -> None:
        self._phase = phase
        self.phase_changed.emit(phase)

    def _set_invalid_count(self, count: int) -> None:
        if count != self._invalid_count:
            self._invalid_count = count
            self.invalid_count_changed.emit(count)

    def _set_submitting(self, submitting: bool) -> None:
        if submitting != self._submitting:
            self._submitting = submitting
            self.submitting_changed.emit(submitting)
