#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: requests are served as asyncio tasks by uvicorn. Both store
backends serialize access with an in-process lock, so the file backend
must run with a single worker.

Usage:
    python app.py

Environment variables:
    STORE_BACKEND - 'file' (default) or 'memory'
    STORE_PATH - JSON document for the file backend (default store.json)
    BASE_URL - Domain used in shortened URLs
    PATH_PREFIX - Optional path prefix for shortened URLs
    HOST - Host to bind to
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shortener.service import ShortenerService
from shortener.store import create_store
from shortener.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting URL shortener service...")

    if config.store_backend == "file":
        logger.info(f"Using file store at {config.store_path}")
        if config.workers > 1:
            logger.warning(
                "File store is locked per process; running with "
                f"{config.workers} workers can lose updates"
            )
    else:
        logger.info("Using in-memory store (mappings are lost on restart)")

    store = create_store(
        backend=config.store_backend,
        path=config.store_path,
        logger=logger.getChild("store"),
    )
    service = ShortenerService(
        store=store,
        code_length=config.short_code_length,
        logger=logger.getChild("service"),
    )

    app.state.store = store
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down URL shortener service...")
    await service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    app = create_app(
        store_instance=None,  # Will be set in lifespan
        service_instance=None,
        config=config,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
