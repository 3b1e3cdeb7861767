"""
Widget protocol definitions and adapters.

ABC-based input contracts that eliminate duck typing in favor of
explicit, fail-loud inheritance-based architecture.
"""

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    ChangeSignalEmitter,
    ReadOnlyCapable,
    Labelable,
    NumberConfigurable,
)
from .widget_adapters import (
    PyQtWidgetMeta,
    LineEditAdapter,
    EmailEditAdapter,
    PasswordEditAdapter,
    ReadOnlyAdapter,
    ColorEditAdapter,
    CheckBoxAdapter,
    ComboBoxAdapter,
    CheckboxGroupAdapter,
    NumberInputAdapter,
    DateTimeEditAdapter,
    FileEditAdapter,
)
from .form_config import FormBuilderConfig, set_form_config, get_form_config

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "ChangeSignalEmitter",
    "ReadOnlyCapable",
    "Labelable",
    "NumberConfigurable",
    "PyQtWidgetMeta",
    "LineEditAdapter",
    "EmailEditAdapter",
    "PasswordEditAdapter",
    "ReadOnlyAdapter",
    "ColorEditAdapter",
    "CheckBoxAdapter",
    "ComboBoxAdapter",
    "CheckboxGroupAdapter",
    "NumberInputAdapter",
    "DateTimeEditAdapter",
    "FileEditAdapter",
    "FormBuilderConfig",
    "set_form_config",
    "get_form_config",
]
