"""
Model scaffolding.

Enumerates a model type's members through python_introspect (dataclass
fields or class annotations, plus typed properties) and turns each into a
FormField with a default label, description, required flag and
heuristically chosen input factory.

Marking a member required:

    @dataclass
    class User:
        name: Annotated[str, Required]
        email: str = field(default="", metadata={"required": True})
"""

import dataclasses
import inspect
import logging
from dataclasses import dataclass
from typing import (
    Annotated, Any, Callable, ClassVar, Dict, List, Optional, Type,
    get_args, get_origin, get_type_hints,
)

from python_introspect import UnifiedParameterAnalyzer

from pyqt_formbuilder.protocols.form_config import FormBuilderConfig, get_form_config
from .form_field import FormField, WidgetFactory, required_validator
from .labels import label_for

logger = logging.getLogger(__name__)

EditorLookup = Callable[[str, Type], Optional[WidgetFactory]]


class Required:
    """Annotation marker for required members: Annotated[str, Required]"""


@dataclass(frozen=True)
class ModelMember:
    """One enumerated member: (name, type, requiredness) plus writability and help text."""
    name: str
    member_type: Type
    required: bool = False
    settable: bool = True
    description: Optional[str] = None


def _split_annotated(hint: Any) -> tuple:
    """Annotated[T, *meta] -> (T, meta); anything else -> (hint, ())."""
    if get_origin(hint) is Annotated:
        args = get_args(hint)
        return args[0], args[1:]
    return hint, ()


def _has_required_marker(metadata) -> bool:
    return any(meta is Required or isinstance(meta, Required) for meta in metadata)


class ScaffoldEngine:
    """
    Attribute enumerator and descriptor factory.

    Stateless; all methods are static so the builder can call them during
    construction without owning an engine instance.
    """

    @staticmethod
    def enumerate_members(model_type: Type) -> List[ModelMember]:
        """
        Enumerate fields and typed properties of model_type.

        Field names, types and descriptions come from UnifiedParameterAnalyzer:
        dataclass fields for dataclasses, constructor parameters otherwise.
        Plain classes enumerate their class annotations and take descriptions
        from the matching constructor parameters. Properties follow; a property
        sharing a name with a field replaces it. Private names and ClassVars
        are skipped.

        The analyzer's is_required only means "no default"; a member is
        required when it carries the Required marker or required=True metadata.
        """
        members: Dict[str, ModelMember] = {}
        param_info = UnifiedParameterAnalyzer.analyze(model_type)

        if dataclasses.is_dataclass(model_type):
            field_metadata = {f.name: f.metadata for f in dataclasses.fields(model_type)}
            for name, info in param_info.items():
                if name.startswith("_"):
                    continue
                member_type, metadata = _split_annotated(info.param_type)
                required = (_has_required_marker(metadata)
                            or bool(field_metadata.get(name, {}).get("required", False)))
                members[name] = ModelMember(name, member_type, required, description=info.description)
        else:
            hints = get_type_hints(model_type, include_extras=True)
            for name, hint in hints.items():
                if name.startswith("_") or get_origin(hint) is ClassVar or hint is ClassVar:
                    continue
                member_type, metadata = _split_annotated(hint)
                info = param_info.get(name)
                members[name] = ModelMember(
                    name, member_type, _has_required_marker(metadata),
                    description=info.description if info is not None else None,
                )

        for name, prop in inspect.getmembers(model_type, lambda attr: isinstance(attr, property)):
            if name.startswith("_") or prop.fget is None:
                continue
            prop_hints = get_type_hints(prop.fget, include_extras=True)
            member_type, metadata = _split_annotated(prop_hints.get("return", Any))
            if name in members:
                logger.debug(f"Property '{name}' shadows field of the same name on {model_type.__name__}")
            members[name] = ModelMember(
                name, member_type, _has_required_marker(metadata),
                settable=prop.fset is not None, description=inspect.getdoc(prop),
            )

        return list(members.values())

    @staticmethod
    def scaffold(model_type: Type, editor_for: EditorLookup,
                 config: Optional[FormBuilderConfig] = None) -> Dict[str, FormField]:
        """
        Build the descriptor table for model_type.

        Args:
            model_type: Dataclass or annotated class to scaffold
            editor_for: Heuristic mapping (name, type) to an input factory or None
            config: Form configuration; the global config when omitted

        Returns:
            Descriptors keyed by member name, in enumeration order
        """
        config = config or get_form_config()
        fields: Dict[str, FormField] = {}

        for member in ScaffoldEngine.enumerate_members(model_type):
            descriptor = FormField(
                name=member.name,
                label=label_for(member.name),
                field_type=member.member_type,
                widget_factory=editor_for(member.name, member.member_type),
                required=member.required,
                settable=member.settable,
                disabled=config.default_disabled,
                description=member.description,
            )
            if member.required:
                descriptor.validators.append(required_validator(config.required_message))
            if descriptor.widget_factory is None:
                logger.debug(f"No default input for {model_type.__name__}.{member.name}; field stays unrendered")
            fields[member.name] = descriptor

        logger.debug(f"Scaffolded {len(fields)} fields for {model_type.__name__}: {list(fields)}")
        return fields
