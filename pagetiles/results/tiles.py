"""Tiles result - renders an action result through a tiles definition.

Configure an action result with type `tiles` and the definition name as its
location:

    actions:
      - name: editUser
        action_class: myapp.actions:UserAction
        method: edit
        results:
          success: {type: tiles, location: userForm}
          input: {type: tiles, location: userList}

or make `tiles` the default result type:

    default_result_type: tiles

The definition is looked up by name and locale, its attributes are merged
into the request's attribute context, its controller (if any) runs, and the
request is forwarded to the definition's layout template.
"""

import logging
from typing import TYPE_CHECKING, Optional

from fastapi.templating import Jinja2Templates

from pagetiles.actions.base import LocaleProvider
from pagetiles.actions.locale import request_locale
from pagetiles.config import DEFAULT_LOCALE_KEY, DEFINITIONS_REGISTRY_KEY
from pagetiles.definitions.context import AttributeContext
from pagetiles.definitions.controllers import Controller
from pagetiles.definitions.registry import DefinitionsRegistry
from pagetiles.definitions.schemas import TileDefinition
from pagetiles.errors import ConfigurationError, DefinitionNotFoundError

from .dispatcher import DispatcherResult

if TYPE_CHECKING:
    from pagetiles.actions.invocation import ActionInvocation

logger = logging.getLogger(__name__)


class TilesResult(DispatcherResult):
    """Dispatcher result whose location names a tiles definition."""

    def __init__(
        self,
        location: str,
        parse: bool = True,
        definitions: Optional[DefinitionsRegistry] = None,
        templates: Optional[Jinja2Templates] = None,
    ):
        super().__init__(location, parse, templates)
        self.definitions = definitions

    def execute(self, location: str, invocation: "ActionInvocation") -> None:
        """Dispatch to the layout of the definition named `location`.

        Args:
            location: Definition name
            invocation: The action invocation being rendered

        Raises:
            ConfigurationError: If no definitions registry is available
            DefinitionNotFoundError: If no definition matches the name and
                locale, or the definition has no path
        """
        request = invocation.request

        registry = self.get_definitions(invocation)
        definition = self.get_definition(registry, location, invocation)
        if definition is None:
            raise DefinitionNotFoundError(
                f"No Tiles definition found for name '{location}'", name=location
            )

        context = self.get_attribute_context(definition, invocation)
        AttributeContext.set_context(context, request)

        controller = definition.get_or_create_controller()
        if controller is not None:
            logger.debug(f"Executing Tiles controller [{controller!r}]")
            self.execute_controller(controller, context, invocation)

        path = definition.path
        if not path:
            raise DefinitionNotFoundError(
                f"Could not determine a path for Tiles definition '{definition.name}'",
                name=definition.name,
            )

        super().execute(path, invocation)

    def get_definitions(self, invocation: "ActionInvocation") -> DefinitionsRegistry:
        registry = self.definitions
        if registry is None:
            registry = getattr(invocation.application, DEFINITIONS_REGISTRY_KEY, None)
        if registry is None:
            raise ConfigurationError(
                f"No Tiles definitions registry configured under '{DEFINITIONS_REGISTRY_KEY}'"
            )
        return registry

    def deduce_locale(self, invocation: "ActionInvocation") -> str:
        """The action's locale if it provides one, else the request's."""
        if isinstance(invocation.action, LocaleProvider):
            return invocation.action.get_locale()
        default = getattr(invocation.application, DEFAULT_LOCALE_KEY, None) or "en"
        return request_locale(invocation.request, default)

    def get_definition(
        self, registry: DefinitionsRegistry, name: str, invocation: "ActionInvocation"
    ) -> Optional[TileDefinition]:
        return registry.get_definition(name, self.deduce_locale(invocation))

    def get_attribute_context(
        self, definition: TileDefinition, invocation: "ActionInvocation"
    ) -> AttributeContext:
        """Reuse the request's context, adding missing attributes, or create one."""
        context = AttributeContext.get_context(invocation.request)
        if context is None:
            context = AttributeContext(definition.attributes)
            AttributeContext.set_context(context, invocation.request)
        else:
            context.add_missing(definition.attributes)
        return context

    def execute_controller(
        self, controller: Controller, context: AttributeContext, invocation: "ActionInvocation"
    ) -> None:
        controller.execute(context, invocation.request, invocation.pending, invocation.application)
