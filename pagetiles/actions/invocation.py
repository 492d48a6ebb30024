"""Action invocation - runs one action and renders its result."""

import logging
from typing import Any, Mapping, Optional

from starlette.requests import Request
from starlette.responses import Response

from pagetiles.errors import ConfigurationError

from .base import NONE, Action
from .schemas import ActionConfig

logger = logging.getLogger(__name__)

_ENTITY_HEADERS = (b"content-length", b"content-type")


def _pending_response() -> Response:
    """Response that collects status and headers set before rendering."""
    response = Response()
    del response.headers["content-length"]
    response.status_code = None  # type: ignore[assignment]
    return response


class ActionInvocation:
    """Execution state of one action for one request.

    Attributes:
        config: The action's configuration
        action: The action instance
        request: Current request
        application: Process-wide state (the app's `state`)
        pending: Collects status and headers set by the action or a controller
        response: The pending response until a result renders, then the rendered one
        result_code: Code returned by the action method, once invoked
    """

    def __init__(
        self,
        config: ActionConfig,
        request: Request,
        application: Any = None,
        default_result_type: str = "dispatcher",
    ):
        self.config = config
        self.request = request
        self.application = application if application is not None else request.app.state
        self.default_result_type = default_result_type
        self.action: Action = config.create_action()
        self.pending: Response = _pending_response()
        self.response: Response = self.pending
        self.result_code: Optional[str] = None

    def invoke(self, params: Optional[Mapping[str, Any]] = None) -> Optional[Response]:
        """Run the action method and render the matching result.

        Returns:
            The rendered response, or None if the action returned NONE

        Raises:
            ConfigurationError: If the method or the result for its code is missing
        """
        from pagetiles.results.types import create_result

        if params:
            self.action.apply_parameters(params)

        method = getattr(self.action, self.config.method, None)
        if method is None or not callable(method):
            raise ConfigurationError(
                f"Action '{self.config.name}' has no method '{self.config.method}'"
            )

        self.result_code = method()
        logger.debug(f"Action {self.config.name}.{self.config.method} returned {self.result_code!r}")

        if self.result_code is None or self.result_code == NONE:
            return None

        result_config = self.config.results.get(self.result_code)
        if result_config is None:
            raise ConfigurationError(
                f"No result defined for action '{self.config.name}' "
                f"and result code '{self.result_code}'"
            )

        result = create_result(result_config, self.default_result_type)
        result.render(self)
        return self.response

    def merge_pending(self, rendered: Response) -> Response:
        """Copy status and headers set on the pending response onto `rendered`.

        Entity headers stay those of `rendered`.
        """
        pending = self.pending
        if pending.status_code:
            rendered.status_code = pending.status_code
        rendered.headers.raw.extend(
            (key, value) for key, value in pending.headers.raw if key not in _ENTITY_HEADERS
        )
        return rendered
