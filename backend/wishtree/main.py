"""FastAPI app factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wishtree.config import settings
from wishtree.services.messages import HttpMessageSource, MessageSnapshot, MessageSource
from wishtree.shell.selection import SelectionState
from wishtree.storage import MemoryMessageStore

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.wishtree_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(message_source: MessageSource | None = None) -> FastAPI:
    if message_source is None:
        message_source = _default_message_source()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        close = getattr(message_source, "close", None)
        if close is not None:
            logger.info("Closing message source")
            close()

    app = FastAPI(
        title="Wish Tree",
        description="Decorated tree greeting page with one message per ornament",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.message_source = message_source
    app.state.snapshot = MessageSnapshot(message_source)
    app.state.selection = SelectionState()

    from wishtree.api import page
    from wishtree.api.router import api_router

    app.include_router(api_router)
    app.include_router(page.router)

    return app


def _default_message_source() -> MessageSource:
    if settings.message_source_url:
        logger.info("Reading messages from %s", settings.message_source_url)
        return HttpMessageSource(settings.message_source_url)
    return MemoryMessageStore()


app = create_app()
