"""Action base class and action capabilities."""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

# Standard result codes
SUCCESS = "success"
INPUT = "input"
ERROR = "error"
NONE = "none"


@runtime_checkable
class LocaleProvider(Protocol):
    """Capability of actions that choose the locale for rendering."""

    def get_locale(self) -> str: ...


class Action:
    """Base class for actions.

    An action method takes no arguments and returns a result code naming
    one of the results configured for the action.
    """

    def execute(self) -> Optional[str]:
        return SUCCESS

    def apply_parameters(self, params: Mapping[str, Any]) -> None:
        """Copy request parameters onto attributes the action already declares."""
        for name, value in params.items():
            if name.startswith("_") or not hasattr(self, name):
                continue
            if callable(getattr(self, name)):
                continue
            setattr(self, name, value)
