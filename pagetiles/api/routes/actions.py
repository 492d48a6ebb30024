"""Action dispatch route.

Every `/{action_name}` request runs the named action and returns whatever
its result rendered.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from pagetiles.actions.invocation import ActionInvocation
from pagetiles.actions.registry import ActionRegistry
from pagetiles.actions.schemas import ActionConfig
from pagetiles.config import ACTION_REGISTRY_KEY

logger = logging.getLogger(__name__)

router = APIRouter(tags=["actions"])

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _invoke(
    config: ActionConfig, request: Request, default_result_type: str, params: dict[str, str]
) -> Optional[Response]:
    invocation = ActionInvocation(config, request, default_result_type=default_result_type)
    return invocation.invoke(params)


@router.api_route("/{action_name}", methods=["GET", "POST"], include_in_schema=False)
async def dispatch_action(action_name: str, request: Request):
    """Run an action and return its rendered result."""
    registry: ActionRegistry = getattr(request.app.state, ACTION_REGISTRY_KEY)
    config = registry.get(action_name)
    if config is None:
        raise HTTPException(status_code=404, detail=f"No action mapped for '{action_name}'")

    params: dict[str, str] = dict(request.query_params)
    if request.method == "POST" and request.headers.get("content-type", "").startswith(_FORM_TYPES):
        form = await request.form()
        params.update({k: v for k, v in form.items() if isinstance(v, str)})

    # Actions and controllers may block
    response = await run_in_threadpool(
        _invoke, config, request, registry.default_result_type, params
    )
    if response is None:
        logger.debug(f"Action {action_name} rendered no result")
        return Response(status_code=204)
    return response
