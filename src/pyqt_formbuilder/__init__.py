"""
pyqt-formbuilder: reactive form scaffolding for PyQt6.

Inspects a model type and produces an editable, validated, laid-out form
bound to the model's live state.

Architecture:
- Protocols: input widget ABCs, Qt adapters and form configuration
- Widgets: no-scroll input variants
- Services: signal blocking helpers
- Forms: scaffolding, fluent configuration, layout planning and the
  runtime binder that validates and commits a cloned working copy

Key Features:
- Name/type heuristics choose inputs (Email, Password, Color, Id, enums...)
- Fluent overrides: labels, groups, columns, rows, visibility, validators
- Edits go to a working copy; the source changes only on a valid submit
"""

import importlib

__version__ = "0.1.0"

_EXPORTS = {
    "FormBuilder": ("pyqt_formbuilder.forms.form_builder", "FormBuilder"),
    "ModelState": ("pyqt_formbuilder.forms.model_state", "ModelState"),
    "Required": ("pyqt_formbuilder.forms.scaffold", "Required"),
    "fields_of": ("pyqt_formbuilder.forms.field_selectors", "fields_of"),
    "FormBuilderConfig": ("pyqt_formbuilder.protocols.form_config", "FormBuilderConfig"),
    "set_form_config": ("pyqt_formbuilder.protocols.form_config", "set_form_config"),
    "get_form_config": ("pyqt_formbuilder.protocols.form_config", "get_form_config"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        value = getattr(importlib.import_module(module_name), attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__", *_EXPORTS.keys()]
