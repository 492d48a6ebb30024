"""pagetiles API - action dispatch with tiles layouts.

Loads tiles definitions, action mappings and the template environment at
startup and serves:
- `/{action}` - runs an action and renders its result
- `/v1/definitions` - inspection of loaded definitions
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pagetiles import __version__
from pagetiles.actions.registry import ActionRegistry
from pagetiles.api.routes import actions, definitions
from pagetiles.config import (
    ACTION_REGISTRY_KEY,
    DEFAULT_LOCALE_KEY,
    DEFINITIONS_REGISTRY_KEY,
    TEMPLATES_KEY,
    TilesSettings,
)
from pagetiles.definitions.registry import DefinitionsRegistry
from pagetiles.errors import ConfigurationError, NotFoundError
from pagetiles.results.templating import create_templates

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[TilesSettings] = None) -> FastAPI:
    """Build the application for the given settings (default: environment)."""
    settings = settings or TilesSettings.from_env()
    logging.getLogger("pagetiles").setLevel(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        logger.info(f"Loading tiles definitions from {settings.definitions_dir}...")
        definitions_registry = DefinitionsRegistry(settings.definitions_dir)
        definitions_registry.load()
        logger.info(f"Loaded {definitions_registry.count()} definitions")

        logger.info(f"Loading actions from {settings.actions_file}...")
        action_registry = ActionRegistry(settings.actions_file)
        action_registry.load()
        logger.info(f"Loaded {action_registry.count()} actions")

        setattr(app.state, DEFINITIONS_REGISTRY_KEY, definitions_registry)
        setattr(app.state, ACTION_REGISTRY_KEY, action_registry)
        setattr(app.state, TEMPLATES_KEY, create_templates(settings.templates_dir))
        setattr(app.state, DEFAULT_LOCALE_KEY, settings.default_locale)

        logger.info("pagetiles ready")
        yield
        # Shutdown
        logger.info("Shutting down pagetiles")

    app = FastAPI(
        title="pagetiles",
        description="Action dispatch rendered through tiles layout definitions",
        version=__version__,
        lifespan=lifespan,
    )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.warning(f"{request.url.path}: {exc}")
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        logger.error(f"{request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "definitions_loaded": getattr(app.state, DEFINITIONS_REGISTRY_KEY).count(),
            "actions_loaded": getattr(app.state, ACTION_REGISTRY_KEY).count(),
        }

    app.include_router(definitions.router, prefix="/v1")
    # Catch-all action route goes last
    app.include_router(actions.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pagetiles.api.main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
    )
