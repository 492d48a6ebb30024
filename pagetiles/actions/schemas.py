"""Action configuration schemas.

An ActionConfig maps an action name to the class and method that handle it,
and each result code the method can return to the result that renders it.
"""

import importlib
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from pagetiles.errors import ConfigurationError

from .base import Action


class ResultConfig(BaseModel):
    """How to render one result code."""

    type: Optional[str] = Field(
        default=None,
        description="Result type ('tiles', 'dispatcher'). None uses the configured default",
    )
    location: str = Field(
        ...,
        description="Definition name for tiles results, template path for dispatcher results",
    )
    parse: bool = Field(
        default=True,
        description="Interpolate ${name} placeholders from action attributes",
    )


class ActionConfig(BaseModel):
    """Mapping of an action name to its handler and results."""

    name: str
    action_class: str = Field(
        ...,
        description="Import path of the action class ('myapp.actions:UserAction')",
    )
    method: str = Field(default="execute")
    results: dict[str, ResultConfig] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _expand_short_results(cls, data: Any) -> Any:
        """Accept `success: userForm` as shorthand for a location."""
        if isinstance(data, dict) and isinstance(data.get("results"), dict):
            data = dict(data)
            data["results"] = {
                code: {"location": value} if isinstance(value, str) else value
                for code, value in data["results"].items()
            }
        return data

    def create_action(self) -> Action:
        """Import and instantiate the action class."""
        if ":" in self.action_class:
            module_name, _, attr = self.action_class.partition(":")
        else:
            module_name, _, attr = self.action_class.rpartition(".")

        try:
            module = importlib.import_module(module_name)
            action_cls = getattr(module, attr)
        except (ImportError, AttributeError, ValueError) as e:
            raise ConfigurationError(
                f"Cannot load action class '{self.action_class}' for action '{self.name}': {e}"
            ) from e

        return action_cls()


class ActionsFile(BaseModel):
    """Top-level layout of actions.yaml."""

    default_result_type: str = Field(default="dispatcher")
    actions: list[ActionConfig] = Field(default_factory=list)
