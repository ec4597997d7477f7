"""Message model shared by the store, the API and the shell."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """One greeting bound to an ornament. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Stable unique id")
    text: str = Field(..., min_length=1, description="Greeting shown in the dialog")
