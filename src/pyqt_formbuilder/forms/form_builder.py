"""
FormBuilder: scaffold a model, configure it fluently, render it bound.

Usage:
    state = ModelState(User(name="", email="", user_id=uuid4(), active=True))
    form = (FormBuilder(state)
            .required("name")
            .disabled(False, "name", "email", "active")
            .place("name", "email", same_row=True)
            .place("active")
            .build())

Construction scaffolds every member of the state's declared type. Fluent
calls then mutate the descriptor table until use_form()/build() freezes it
into snapshots for one render pass. Each render pass edits its own clone of
the model; the source state changes only on a successful submit.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from PyQt6.QtWidgets import QWidget

from pyqt_formbuilder.protocols.form_config import FormBuilderConfig, get_form_config
from .configuration import ConfigurationMixin
from .form_field import FormField, WidgetFactory
from .form_view import FormHandle, FormView, FormWidget, ValidationSummaryView
from .layout_planner import LayoutPlannerMixin
from .model_state import ModelState
from .runtime_binder import CloneFunction, FormSession
from .scaffold import ScaffoldEngine
from .widget_heuristics import WidgetHeuristics

logger = logging.getLogger(__name__)


class FormBuilder(ConfigurationMixin, LayoutPlannerMixin):
    """Descriptor table for one model state plus the operations on it."""

    def __init__(self, model_state: ModelState, config: Optional[FormBuilderConfig] = None,
                 clone: Optional[CloneFunction] = None):
        """
        Args:
            model_state: Source state; committed to on successful submit
            config: Form configuration; the global config when omitted
            clone: Working-copy clone function; copy.deepcopy when omitted
        """
        self._model_state = model_state
        self._model_type = model_state.state_type
        self._config = config or get_form_config()
        self._clone = clone
        self._groups: List[str] = []
        self._fields: Dict[str, FormField] = ScaffoldEngine.scaffold(
            self._model_type, self._editor_for, self._config
        )

    def _editor_for(self, name: str, field_type) -> Optional[WidgetFactory]:
        return WidgetHeuristics.editor_for(name, field_type, self._current_label)

    def _current_label(self, name: str) -> Optional[str]:
        descriptor = self._fields.get(name)
        return descriptor.label if descriptor is not None else None

    @property
    def fields(self) -> Mapping[str, FormField]:
        """Read-only view of the descriptor table, in scaffold order."""
        return MappingProxyType(self._fields)

    @property
    def model_state(self) -> ModelState:
        return self._model_state

    @property
    def config(self) -> FormBuilderConfig:
        return self._config

    def use_form(self, parent: Optional[QWidget] = None) -> FormHandle:
        """
        Bind a render pass and return its pieces for a custom layout.

        The caller owns the returned session and disposes it when the views
        go away.
        """
        session = FormSession(self._model_state, self._fields.values(), self._config, self._clone)
        field_views = session.bind()

        form_view = FormView(field_views, self._groups, self._config, parent)
        validation_view = ValidationSummaryView(parent)
        session.invalid_count_changed.connect(validation_view.set_invalid_count)

        logger.debug(f"Rendered {self._model_type.__name__} form with {len(field_views)} fields")
        return FormHandle(session.submit, form_view, validation_view, session)

    def build(self, parent: Optional[QWidget] = None) -> FormWidget:
        """Bound form with submit button and validation summary."""
        return FormWidget(self.use_form(), self._config, parent)
