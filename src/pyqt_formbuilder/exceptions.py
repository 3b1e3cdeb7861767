"""Form builder exceptions."""


class FormBuilderError(Exception):
    """Base class for all form builder errors."""


class FieldLookupError(FormBuilderError, KeyError):
    """Raised when a field selector names a member that was never scaffolded."""

    def __init__(self, name: str, model_type: type = None, ref_type: type = None):
        self.name = name
        self.model_type = model_type
        self.ref_type = ref_type
        if ref_type is not None and model_type is not None:
            message = f"Field '{name}' belongs to {ref_type.__name__}, not {model_type.__name__}"
        else:
            owner = f" on {model_type.__name__}" if model_type is not None else ""
            message = f"No scaffolded field named '{name}'{owner}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class ModelCloneError(FormBuilderError):
    """Raised when the working copy of a model cannot be cloned."""


class WidgetKindError(FormBuilderError, KeyError):
    """Raised when no input factory is registered for a widget kind."""

    def __str__(self) -> str:
        return self.args[0]
