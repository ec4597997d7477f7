"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, StrictInt


class SelectRequest(BaseModel):
    target: Literal["star"] | StrictInt = Field(..., description='Ornament slot, or "star" for the topper')
    target_x: float = Field(..., description="Click x, screen pixels")
    target_y: float = Field(..., description="Click y, screen pixels")
    viewport_width: float = Field(default=0.0, description="Viewport width, screen pixels")
    viewport_height: float = Field(default=0.0, description="Viewport height, screen pixels")
