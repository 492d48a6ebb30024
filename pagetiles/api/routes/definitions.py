"""API routes for tiles definitions.

Read-only inspection of the loaded definitions plus a reload hook for
picking up edited definition files without restarting.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from pagetiles.config import DEFINITIONS_REGISTRY_KEY
from pagetiles.definitions.registry import DefinitionsRegistry
from pagetiles.definitions.schemas import DefinitionSummary, TileDefinition

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/definitions", tags=["definitions"])


def _registry(request: Request) -> DefinitionsRegistry:
    return getattr(request.app.state, DEFINITIONS_REGISTRY_KEY)


# ── List endpoints ───────────────────────────────────────


@router.get("", response_model=list[DefinitionSummary])
async def list_definitions(request: Request):
    """List all definitions, one entry per locale variant."""
    return _registry(request).list_summaries()


# ── Reload ───────────────────────────────────────────────


@router.post("/reload")
async def reload_definitions(request: Request):
    """Force reload definitions from disk."""
    registry = _registry(request)
    registry.reload()
    logger.info(f"Reloaded tiles definitions: {registry.count()}")
    return {"reloaded": True, "count": registry.count()}


# ── Detail endpoint ──────────────────────────────────────


@router.get("/{name}", response_model=TileDefinition)
async def get_definition(
    request: Request,
    name: str,
    locale: Optional[str] = Query(None, description="Locale variant to resolve (e.g. 'fr_CA')"),
):
    """Get the definition variant that would be used for a name and locale."""
    registry = _registry(request)
    definition = registry.get_definition(name, locale)
    if definition is None:
        raise HTTPException(
            status_code=404,
            detail=f"Definition '{name}' not found. Available: {registry.list_names()}",
        )
    return definition
