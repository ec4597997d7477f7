"""POST /api/select, POST /api/dismiss -- reveal and hide a message."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from wishtree.dependencies import get_selection, get_shown_scene
from wishtree.models.requests import SelectRequest
from wishtree.models.responses import SelectionResponse, SelectResponse
from wishtree.shell.scene import Scene
from wishtree.shell.selection import ClickEvent, DialogView, SelectionState, TreeShell, Viewport

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/select", response_model=SelectResponse)
async def select(
    req: SelectRequest,
    scene: Scene = Depends(get_shown_scene),
    selection: SelectionState = Depends(get_selection),
) -> SelectResponse:
    try:
        target = scene.target(req.target)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"No item {req.target!r}") from None

    # The burst is handed to the browser, so no server-side effect
    shell = TreeShell(Viewport(req.viewport_width, req.viewport_height), selection)
    burst = shell.select_item(target, ClickEvent(req.target_x, req.target_y))
    if burst is None:
        raise HTTPException(status_code=404, detail=f"Item {req.target!r} has no message")

    message = shell.selected
    logger.info("Selected message %d via %r", message.id, req.target)
    return SelectResponse(message=message, dialog=DialogView.for_message(message), burst=burst)


@router.post("/dismiss", response_model=SelectionResponse)
async def dismiss(selection: SelectionState = Depends(get_selection)) -> SelectionResponse:
    selection.clear()
    return SelectionResponse(selected=None)


@router.get("/selection", response_model=SelectionResponse)
async def current_selection(selection: SelectionState = Depends(get_selection)) -> SelectionResponse:
    message = selection.message
    if message is None:
        return SelectionResponse()
    return SelectionResponse(selected=message, dialog=DialogView.for_message(message))
