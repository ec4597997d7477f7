"""Health check endpoint."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends

from wishtree.dependencies import get_message_source
from wishtree.models.responses import HealthResponse
from wishtree.services.messages import MessageSource, fetch_messages

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(source: MessageSource = Depends(get_message_source)) -> HealthResponse:
    # A remote source blocks on I/O; keep the event loop free
    messages = await asyncio.get_running_loop().run_in_executor(None, fetch_messages, source)
    return HealthResponse(status="ok", version="0.1.0", messages=len(messages))
