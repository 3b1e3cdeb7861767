"""
Input widget ABC contracts.

Every input produced by a widget factory implements these contracts, so the
field binding can read, write and observe values without duck typing.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class ValueGettable(ABC):
    """
    ABC for widgets that can return a value.

    All input widgets must implement this to participate in form binding.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the widget.

        Returns:
            The widget's current value. None if no value set.
        """
        pass


class ValueSettable(ABC):
    """
    ABC for widgets that can accept a value.

    All input widgets must implement this to show the working copy's value.
    """

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the widget's value.

        Args:
            value: The value to set. None clears the widget.
        """
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that emit change signals.

    Hides the differences between textChanged, valueChanged,
    currentIndexChanged and friends behind one callback contract.
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to widget's change signal.

        Args:
            callback: Called with the new value whenever the user edits the widget.
        """
        pass

    @abstractmethod
    def disconnect_change_signal(self) -> None:
        """Disconnect every callback connected through connect_change_signal."""
        pass


class ReadOnlyCapable(ABC):
    """ABC for widgets that can be switched between editable and read-only."""

    @abstractmethod
    def set_read_only(self, read_only: bool) -> None:
        pass


class Labelable(ABC):
    """
    ABC for widgets that carry their own caption (checkboxes).

    The form renders a separate label for every other input.
    """

    @abstractmethod
    def set_label(self, text: str) -> None:
        pass

    @abstractmethod
    def get_label(self) -> str:
        pass


class NumberConfigurable(ABC):
    """ABC for numeric inputs that accept precision, step and range hints."""

    @abstractmethod
    def configure_number(self, decimals: int, step: float,
                         minimum: Optional[float] = None,
                         maximum: Optional[float] = None) -> None:
        """
        Configure numeric presentation.

        Args:
            decimals: Digits after the decimal point (0 for integers)
            step: Increment used by the step buttons
            minimum: Lower bound, None keeps the widget default
            maximum: Upper bound, None keeps the widget default
        """
        pass
