"""Selection state, click records and the celebration burst.

Revealing a message and celebrating it are independent. ``select_item``
always updates the selection first; the burst is best-effort and a broken
effect only costs a log line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from wishtree.models.message import Message
from wishtree.shell.scene import Ornament, StarTopper

logger = logging.getLogger(__name__)

BURST_COLORS: tuple[str, ...] = ("#ef4444", "#eab308", "#22c55e", "#ffffff")


@dataclass(frozen=True)
class ClickEvent:
    """Centre of the clicked element, in screen pixels."""

    target_x: float
    target_y: float


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float

    def normalize(self, event: ClickEvent) -> tuple[float, float]:
        """Click position as viewport fractions in [0, 1]."""
        if self.width <= 0 or self.height <= 0:
            return (0.5, 0.5)
        x = min(max(event.target_x / self.width, 0.0), 1.0)
        y = min(max(event.target_y / self.height, 0.0), 1.0)
        return (x, y)


@dataclass(frozen=True)
class BurstRequest:
    origin_x: float
    origin_y: float
    colors: tuple[str, ...] = BURST_COLORS
    particle_count: int = 40
    spread: float = 60.0
    scalar: float = 0.8


class CelebrationEffect(Protocol):
    def burst(self, request: BurstRequest) -> None: ...


@dataclass(frozen=True)
class DialogView:
    title: str
    icon: str
    text: str

    @classmethod
    def for_message(cls, message: Message) -> DialogView:
        if "love" in message.text.lower():
            return cls(title="My Special Message", icon="\U0001f49d", text=message.text)
        return cls(title="A Christmas Wish", icon="\U0001f384", text=message.text)


class SelectionState:
    """At most one displayed message. Process-local, never persisted."""

    def __init__(self) -> None:
        self._message: Message | None = None

    @property
    def message(self) -> Message | None:
        return self._message

    def set(self, message: Message) -> None:
        self._message = message

    def clear(self) -> None:
        self._message = None


class TreeShell:
    """Presentation controller for one scene."""

    def __init__(
        self,
        viewport: Viewport,
        selection: SelectionState | None = None,
        effect: CelebrationEffect | None = None,
    ) -> None:
        self.viewport = viewport
        self.selection = selection if selection is not None else SelectionState()
        self.effect = effect

    @property
    def selected(self) -> Message | None:
        return self.selection.message

    def select_item(self, target: Ornament | StarTopper, event: ClickEvent) -> BurstRequest | None:
        """Reveal the target's message and request a burst at the click point.

        Returns the burst request, or None when the target carries no message.
        """
        if target.message is None:
            logger.debug("Clicked item has no message")
            return None

        self.selection.set(target.message)
        x, y = self.viewport.normalize(event)
        request = BurstRequest(origin_x=x, origin_y=y)

        if self.effect is not None:
            try:
                self.effect.burst(request)
            except Exception as e:
                logger.warning("Celebration effect failed: %s", e)
        return request

    def dismiss(self) -> None:
        self.selection.clear()

    def dialog(self) -> DialogView | None:
        message = self.selection.message
        return DialogView.for_message(message) if message is not None else None
