"""
Form scaffolding and runtime.

FormBuilder and supporting infrastructure for scaffolding editable,
validated forms from dataclasses and annotated classes.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .form_builder import FormBuilder
    from .form_field import FormField, FieldSnapshot
    from .model_state import ModelState, FieldState
    from .runtime_binder import FormSession, FormPhase
    from .form_view import FormHandle, FormView, FormWidget, ValidationSummaryView
    from .scaffold import ScaffoldEngine, Required

_EXPORTS = {
    "FormBuilder": ("pyqt_formbuilder.forms.form_builder", "FormBuilder"),
    "FormField": ("pyqt_formbuilder.forms.form_field", "FormField"),
    "FieldSnapshot": ("pyqt_formbuilder.forms.form_field", "FieldSnapshot"),
    "UNORDERED": ("pyqt_formbuilder.forms.form_field", "UNORDERED"),
    "FULL_WIDTH": ("pyqt_formbuilder.forms.form_field", "FULL_WIDTH"),
    "required_validator": ("pyqt_formbuilder.forms.form_field", "required_validator"),
    "FieldRef": ("pyqt_formbuilder.forms.field_selectors", "FieldRef"),
    "fields_of": ("pyqt_formbuilder.forms.field_selectors", "fields_of"),
    "ModelState": ("pyqt_formbuilder.forms.model_state", "ModelState"),
    "FieldState": ("pyqt_formbuilder.forms.model_state", "FieldState"),
    "FormSignal": ("pyqt_formbuilder.forms.form_signal", "FormSignal"),
    "FormSession": ("pyqt_formbuilder.forms.runtime_binder", "FormSession"),
    "FormPhase": ("pyqt_formbuilder.forms.runtime_binder", "FormPhase"),
    "FormFieldBinding": ("pyqt_formbuilder.forms.field_binding", "FormFieldBinding"),
    "FormFieldView": ("pyqt_formbuilder.forms.field_binding", "FormFieldView"),
    "FormHandle": ("pyqt_formbuilder.forms.form_view", "FormHandle"),
    "FormView": ("pyqt_formbuilder.forms.form_view", "FormView"),
    "FormWidget": ("pyqt_formbuilder.forms.form_view", "FormWidget"),
    "ValidationSummaryView": ("pyqt_formbuilder.forms.form_view", "ValidationSummaryView"),
    "ScaffoldEngine": ("pyqt_formbuilder.forms.scaffold", "ScaffoldEngine"),
    "Required": ("pyqt_formbuilder.forms.scaffold", "Required"),
    "WidgetKind": ("pyqt_formbuilder.forms.widget_factory", "WidgetKind"),
    "register_widget_kind": ("pyqt_formbuilder.forms.widget_factory", "register_widget_kind"),
    "select_widget_kind": ("pyqt_formbuilder.forms.widget_heuristics", "select_widget_kind"),
    "ScaffoldDefaults": ("pyqt_formbuilder.forms.widget_heuristics", "ScaffoldDefaults"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
