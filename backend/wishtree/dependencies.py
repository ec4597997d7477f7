"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends, Request

from wishtree.config import Settings, settings
from wishtree.engine.layout import LayoutConfig, LightConfig
from wishtree.engine.silhouette import Silhouette, build_silhouette
from wishtree.models.message import Message
from wishtree.services.messages import MessageSnapshot, MessageSource
from wishtree.shell.scene import Scene, compose_scene
from wishtree.shell.selection import SelectionState


def get_settings() -> Settings:
    return settings


def get_message_source(request: Request) -> MessageSource:
    return request.app.state.message_source


def get_snapshot(request: Request) -> MessageSnapshot:
    return request.app.state.snapshot


def get_selection(request: Request) -> SelectionState:
    return request.app.state.selection


def get_silhouette(cfg: Settings = Depends(get_settings)) -> Silhouette:
    return build_silhouette(cfg.tree_style)


def get_layout_config(cfg: Settings = Depends(get_settings)) -> LayoutConfig:
    return LayoutConfig(seed=cfg.layout_seed)


def get_light_config(cfg: Settings = Depends(get_settings)) -> LightConfig:
    return LightConfig(seed=cfg.layout_seed)


def _compose(
    messages: list[Message],
    silhouette: Silhouette,
    layout: LayoutConfig,
    lights: LightConfig,
    cfg: Settings,
) -> Scene:
    return compose_scene(
        messages,
        silhouette,
        layout,
        lights,
        light_count=cfg.light_count,
        snowflake_count=cfg.snowflake_count,
    )


def get_scene(
    snapshot: MessageSnapshot = Depends(get_snapshot),
    silhouette: Silhouette = Depends(get_silhouette),
    layout: LayoutConfig = Depends(get_layout_config),
    lights: LightConfig = Depends(get_light_config),
    cfg: Settings = Depends(get_settings),
) -> Scene:
    """Scene over freshly loaded messages (a page load)."""
    return _compose(snapshot.refresh(), silhouette, layout, lights, cfg)


def get_shown_scene(
    snapshot: MessageSnapshot = Depends(get_snapshot),
    silhouette: Silhouette = Depends(get_silhouette),
    layout: LayoutConfig = Depends(get_layout_config),
    lights: LightConfig = Depends(get_light_config),
    cfg: Settings = Depends(get_settings),
) -> Scene:
    """Scene over the messages the last page load showed."""
    return _compose(snapshot.current(), silhouette, layout, lights, cfg)
