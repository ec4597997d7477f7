"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from wishtree.engine.layout import LightPoint, PlacedItem
from wishtree.engine.snowfall import Snowflake
from wishtree.models.message import Message
from wishtree.shell.selection import BurstRequest, DialogView


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    messages: int = 0


class LayoutResponse(BaseModel):
    silhouette: str
    ornaments: list[PlacedItem] = Field(default_factory=list)
    lights: list[LightPoint] = Field(default_factory=list)


class OrnamentOut(BaseModel):
    slot: int
    message_id: int
    x: float
    y: float
    color: str
    bob_duration: float
    bob_delay: float


class SceneResponse(BaseModel):
    silhouette: str
    outline: str = ""
    star_message_id: int | None = None
    ornaments: list[OrnamentOut] = Field(default_factory=list)
    lights: list[LightPoint] = Field(default_factory=list)
    snow: list[Snowflake] = Field(default_factory=list)


class SelectResponse(BaseModel):
    message: Message
    dialog: DialogView
    burst: BurstRequest


class SelectionResponse(BaseModel):
    selected: Message | None = None
    dialog: DialogView | None = None
