"""Tiles definition schemas - declarative page layouts.

A TileDefinition names a layout template (its dispatch path) and the
attributes that fill the layout's slots: page title, body fragment, menu,
and so on. Definitions may be localized and may extend a parent definition.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from pagetiles.actions.locale import normalize_locale

from .controllers import Controller, load_controller


class TileDefinition(BaseModel):
    """Named, optionally localized description of a composed page."""

    name: str = Field(
        ...,
        description="Definition name referenced by action results (e.g. 'userForm')",
    )
    locale: str = Field(
        default="",
        description="Locale variant ('en', 'fr_CA'). Empty string is the default variant",
    )
    path: Optional[str] = Field(
        default=None,
        description="Layout template to dispatch to (e.g. '/layouts/main.html')",
    )
    extends: Optional[str] = Field(
        default=None,
        description="Parent definition whose path, controller and attributes are inherited",
    )
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Attribute name -> value (string, fragment template path, ...)",
    )
    controller_class: Optional[str] = Field(
        default=None,
        description="Import path of a pre-render controller ('pkg.module:ClassName')",
    )
    description: str = Field(default="")

    _controller: Optional[Controller] = PrivateAttr(default=None)

    @field_validator("locale")
    @classmethod
    def _normalize_locale(cls, value: str) -> str:
        """'fr-ca' and 'FR_CA' are stored as 'fr_CA'."""
        return normalize_locale(value)

    def get_or_create_controller(self) -> Optional[Controller]:
        """Return this definition's controller, instantiating it on first use."""
        if self.controller_class is None:
            return None
        if self._controller is None:
            self._controller = load_controller(self.controller_class)
        return self._controller

    @property
    def key(self) -> tuple[str, str]:
        return (self.name, self.locale)


class DefinitionSummary(BaseModel):
    """Lightweight definition listing for the admin API."""

    name: str
    locale: str
    path: Optional[str] = None
    extends: Optional[str] = None
    attribute_names: list[str] = Field(default_factory=list)
    has_controller: bool = False
