"""GET /api/messages -- the read-only message list."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends

from wishtree.dependencies import get_message_source
from wishtree.models.message import Message
from wishtree.services.messages import MessageSource, fetch_messages

router = APIRouter()


@router.get("/messages", response_model=list[Message])
async def list_messages(source: MessageSource = Depends(get_message_source)) -> list[Message]:
    return await asyncio.get_running_loop().run_in_executor(None, fetch_messages, source)
