"""Base configuration class for form building.

Provides hooks for applications to customize scaffolded forms.
"""

from typing import Optional
from dataclasses import dataclass, field

from pyqt_formbuilder.forms.layout_constants import CURRENT_LAYOUT, FormLayoutConfig


@dataclass
class FormBuilderConfig:
    """Base configuration for form building behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        submit_title: Text of the submit button
        submitting_title: Text of the submit button while a submit is in flight
        required_marker: Suffix appended to labels of required fields
        required_message: Message reported by the built-in required validator
        default_disabled: Initial disabled flag of every scaffolded field
        layout: Spacing and margins used by the form view
    """

    submit_title: str = "Save"
    submitting_title: str = "Saving..."
    required_marker: str = " *"
    required_message: str = "Required field"
    default_disabled: bool = True
    layout: FormLayoutConfig = field(default_factory=lambda: CURRENT_LAYOUT)


# Global config instance (set by application)
_form_config: Optional[FormBuilderConfig] = None


def set_form_config(config: Optional[FormBuilderConfig]) -> None:
    """Set the global form builder configuration.

    Args:
        config: FormBuilderConfig instance, or None to restore defaults
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormBuilderConfig:
    """Get the current form builder configuration.

    Returns:
        Current FormBuilderConfig or default if not set
    """
    if _form_config is None:
        return FormBuilderConfig()
    return _form_config
