"""Dispatcher result - renders a template at the result location."""

import logging
from typing import TYPE_CHECKING, Any, Optional

from fastapi.templating import Jinja2Templates

from pagetiles.config import TEMPLATES_KEY
from pagetiles.errors import ConfigurationError

from .base import ResultSupport

if TYPE_CHECKING:
    from pagetiles.actions.invocation import ActionInvocation

logger = logging.getLogger(__name__)


class DispatcherResult(ResultSupport):
    """Forwards the request to a Jinja2 template.

    The template gets `request`, `action` and whatever the template
    environment's context processors add. Status and headers already set on
    the invocation's pending response carry over to the rendered one.
    Template lookup and rendering errors propagate to the caller.
    """

    def __init__(
        self,
        location: str,
        parse: bool = True,
        templates: Optional[Jinja2Templates] = None,
    ):
        super().__init__(location, parse)
        self.templates = templates

    def get_templates(self, invocation: "ActionInvocation") -> Jinja2Templates:
        templates = self.templates
        if templates is None:
            templates = getattr(invocation.application, TEMPLATES_KEY, None)
        if templates is None:
            raise ConfigurationError(
                f"No template environment configured under '{TEMPLATES_KEY}'"
            )
        return templates

    def template_context(self, invocation: "ActionInvocation") -> dict[str, Any]:
        return {"action": invocation.action}

    def execute(self, location: str, invocation: "ActionInvocation") -> None:
        templates = self.get_templates(invocation)
        template_name = location.lstrip("/")
        logger.debug(f"Forwarding to template {template_name!r}")

        rendered = templates.TemplateResponse(
            invocation.request,
            template_name,
            self.template_context(invocation),
        )
        invocation.response = invocation.merge_pending(rendered)
