"""Index Page – FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from routers import web
from services.assets import AssetLookup, bundled_lookup

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_app(
    message: str = config.INDEX_MESSAGE,
    lookup: AssetLookup = bundled_lookup,
) -> FastAPI:
    app = FastAPI(
        title="Index Page",
        description="Serve the bundled index page, or a configured message.",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(web.build_router(message, lookup))
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    logger.info("Index page service starting...")
    uvicorn.run(app, host="0.0.0.0", port=config.PORT, log_level=config.LOG_LEVEL.lower())
