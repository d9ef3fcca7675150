"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shortener import __version__
from shortener.common.url_builder import normalize_path_prefix
from .api import api_router
from .web import web_router
from .middleware.logging import LoggingMiddleware


def create_app(
    store_instance,
    service_instance,
    config,
) -> FastAPI:
    """Create and configure FastAPI application.
    
    Args:
        store_instance: Store instance (may be None until lifespan startup)
        service_instance: Service instance (may be None until lifespan startup)
        config: Configuration instance
        
    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Shortener",
        description="Hash-based URL shortening service",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    
    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.service = service_instance
    app.state.config = config
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    
    # /api first so its routes are never taken as short codes
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Shortener"])
    
    # Short links carry the prefix, so they must resolve under it as well
    path_prefix = normalize_path_prefix(config.path_prefix)
    if path_prefix:
        app.include_router(web_router, prefix=path_prefix, include_in_schema=False)
    
    return app
