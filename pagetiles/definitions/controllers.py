"""Pre-render controllers bound to tiles definitions.

A controller runs before the layout is rendered. It typically puts extra
attributes into the attribute context (menus built from the database, the
current user's name) or adjusts the pending response headers.
"""

import importlib
import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from starlette.requests import Request
from starlette.responses import Response

from pagetiles.errors import ConfigurationError

if TYPE_CHECKING:
    from .context import AttributeContext

logger = logging.getLogger(__name__)


@runtime_checkable
class Controller(Protocol):
    """Hook executed once per dispatch of its definition."""

    def execute(
        self,
        context: "AttributeContext",
        request: Request,
        response: Response,
        application: Any,
    ) -> None:
        ...


def load_controller(import_path: str) -> Controller:
    """Import and instantiate a controller class.

    Accepts 'package.module:ClassName' or 'package.module.ClassName'.

    Raises:
        ConfigurationError: If the class cannot be imported, instantiated,
            or does not provide an execute() method
    """
    if ":" in import_path:
        module_name, _, attr = import_path.partition(":")
    else:
        module_name, _, attr = import_path.rpartition(".")

    if not module_name or not attr:
        raise ConfigurationError(f"Invalid controller import path: '{import_path}'")

    try:
        module = importlib.import_module(module_name)
        controller_cls = getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(f"Cannot load controller '{import_path}': {e}") from e

    controller = controller_cls()
    if not isinstance(controller, Controller):
        raise ConfigurationError(
            f"Controller '{import_path}' does not define execute()"
        )

    logger.debug(f"Created controller {import_path}")
    return controller
