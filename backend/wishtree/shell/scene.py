"""Scene composition: messages bound to laid-out decorations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from wishtree.engine.layout import (
    LayoutConfig,
    LightConfig,
    LightPoint,
    PlacedItem,
    place_ornament,
    scatter_lights,
)
from wishtree.engine.silhouette import Silhouette
from wishtree.engine.snowfall import Snowflake, snowfall
from wishtree.models.message import Message

logger = logging.getLogger(__name__)

_LOVE_PHRASES = ("i love you", "amo você")

STAR_POINTS: tuple[tuple[float, float], ...] = (
    (210, 5), (220, 30), (245, 30), (228, 42), (236, 65),
    (210, 52), (184, 65), (192, 42), (175, 30), (200, 30),
)


def is_love_message(message: Message) -> bool:
    text = message.text.lower()
    return any(phrase in text for phrase in _LOVE_PHRASES)


@dataclass(frozen=True)
class Ornament:
    """Clickable bauble. ``slot`` is its position in ornament order."""

    slot: int
    item: PlacedItem
    message: Message

    @property
    def bob_duration(self) -> float:
        return 2.5 + (self.slot % 3) * 0.5

    @property
    def bob_delay(self) -> float:
        return (self.slot % 5) * 0.3


@dataclass(frozen=True)
class StarTopper:
    x: float
    y: float
    message: Message | None = None
    points: tuple[tuple[float, float], ...] = STAR_POINTS


@dataclass
class Scene:
    silhouette: Silhouette
    star: StarTopper
    ornaments: list[Ornament] = field(default_factory=list)
    lights: list[LightPoint] = field(default_factory=list)
    snow: list[Snowflake] = field(default_factory=list)

    def target(self, key: str | int) -> StarTopper | Ornament:
        """Look up a clickable item: ``"star"`` or an ornament slot."""
        if key == "star":
            return self.star
        if isinstance(key, int) and 0 <= key < len(self.ornaments):
            return self.ornaments[key]
        raise KeyError(key)


def compose_scene(
    messages: list[Message],
    silhouette: Silhouette,
    layout: LayoutConfig = LayoutConfig(),
    lights: LightConfig = LightConfig(),
    light_count: int = 28,
    snowflake_count: int = 30,
) -> Scene:
    """Bind messages to decorations.

    The first love message goes on the star; the rest become ornaments in
    order, ornament ``k`` sitting at ``place_ornament(k)``.
    """
    love = next((m for m in messages if is_love_message(m)), None)
    others = [m for m in messages if m is not love]

    ornaments = [
        Ornament(slot=k, item=place_ornament(silhouette, k, layout), message=m)
        for k, m in enumerate(others)
    ]
    star = StarTopper(x=silhouette.center_x, y=silhouette.y_min, message=love)

    logger.debug(
        "Composed scene: %d ornaments, star %s",
        len(ornaments),
        "bound" if love else "unbound",
    )
    return Scene(
        silhouette=silhouette,
        star=star,
        ornaments=ornaments,
        lights=scatter_lights(silhouette, light_count, lights),
        snow=snowfall(snowflake_count, lights.seed),
    )
