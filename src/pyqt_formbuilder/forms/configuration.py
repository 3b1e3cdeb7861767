"""
Fluent field configuration for FormBuilder.

Every method mutates descriptors in place and returns the builder, so calls
chain:

    builder.label("user_id", "Account").required("name").disabled(False, "name")

Unknown selectors raise FieldLookupError at the call.
"""

import logging
from typing import Any, Dict, Type

from pyqt_formbuilder.protocols.form_config import FormBuilderConfig
from .field_selectors import FieldSelector, resolve_field
from .form_field import FormField, Validator, VisibilityPredicate, WidgetFactory, required_validator
from .widget_heuristics import ScaffoldDefaults

logger = logging.getLogger(__name__)


class ConfigurationMixin:
    """
    Descriptor configuration operations for FormBuilder.

    Hosts provide _fields, _model_type and _config.
    """

    _fields: Dict[str, FormField]
    _model_type: Type
    _config: FormBuilderConfig

    def field(self, selector: FieldSelector) -> FormField:
        """Descriptor named by selector (raises FieldLookupError)."""
        return resolve_field(self._fields, selector, self._model_type)

    def builder(self, field: FieldSelector, factory: WidgetFactory):
        """
        Use a custom input factory for one field.

        The factory is wrapped so checkbox and number inputs it returns still
        receive the scaffold defaults (caption, precision, range), read from
        the descriptor at creation time.
        """
        descriptor = self.field(field)

        def wrapped(state) -> Any:
            widget = factory(state)
            return ScaffoldDefaults.apply(widget, descriptor.name, descriptor.field_type, descriptor.label)

        wrapped.__wrapped__ = factory
        descriptor.widget_factory = wrapped
        logger.debug(f"Custom input factory set for '{descriptor.name}'")
        return self

    def builder_for_type(self, field_type: Type, factory: WidgetFactory):
        """Use factory, unwrapped, for every field declared as field_type."""
        matched = [f for f in self._fields.values() if f.field_type == field_type]
        for descriptor in matched:
            descriptor.widget_factory = factory
        logger.debug(f"Input factory for {field_type} applied to {[f.name for f in matched]}")
        return self

    def label(self, field: FieldSelector, text: str):
        self.field(field).label = text
        return self

    def description(self, field: FieldSelector, text: str):
        self.field(field).description = text
        return self

    def visible(self, field: FieldSelector, predicate: VisibilityPredicate):
        """Show the field only while predicate(working_copy) is true."""
        self.field(field).visible = predicate
        return self

    def disabled(self, disabled: bool, *fields: FieldSelector):
        for selector in fields:
            self.field(selector).disabled = disabled
        return self

    def validate(self, field: FieldSelector, validator: Validator):
        """Append validator; it receives the field's raw value and returns (valid, message)."""
        self.field(field).validators.append(validator)
        return self

    def required(self, *fields: FieldSelector):
        """
        Mark fields required.

        Each call appends another required check; calling twice leaves two.
        """
        for selector in fields:
            descriptor = self.field(selector)
            descriptor.required = True
            descriptor.validators.append(required_validator(self._config.required_message))
        return self
