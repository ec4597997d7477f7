"""GET / -- the greeting page."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from wishtree.config import Settings
from wishtree.dependencies import get_scene, get_settings
from wishtree.render.page import render_page
from wishtree.shell.scene import Scene

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(scene: Scene = Depends(get_scene), cfg: Settings = Depends(get_settings)) -> HTMLResponse:
    return HTMLResponse(render_page(scene, cfg.page_title, cfg.page_subtitle))
