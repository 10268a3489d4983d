"""Serve the index page."""

import logging
from collections.abc import Callable

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from models import Found
from services.assets import INDEX_ASSET, AssetLookup, bundled_lookup

logger = logging.getLogger(__name__)

IndexHandler = Callable[[Request], Response]


def create_index_handler(
    message: str,
    lookup: AssetLookup = bundled_lookup,
) -> IndexHandler:
    """Build the ``/`` handler.

    The bundled index document is looked up once, here.  When present it
    is served verbatim as ``text/html; charset=utf-8`` on every request;
    otherwise *message* is served as plain text, exactly as given.  Both
    handlers always respond 200.
    """
    asset = lookup(INDEX_ASSET)

    if isinstance(asset, Found):
        html = asset.content
        logger.debug("Index page: serving bundled %s (%d bytes)", INDEX_ASSET, len(html))

        def index(request: Request) -> Response:
            return HTMLResponse(content=html)

        return index

    logger.debug("Index page: %s not bundled, serving fallback message", INDEX_ASSET)

    def index(request: Request) -> Response:
        return PlainTextResponse(content=message)

    return index


def build_router(message: str, lookup: AssetLookup = bundled_lookup) -> APIRouter:
    router = APIRouter(tags=["web"])
    router.add_api_route(
        "/",
        create_index_handler(message, lookup),
        methods=["GET"],
        include_in_schema=False,
    )
    return router
