"""Wish tree layout engine."""

from wishtree.engine.hashing import DEFAULT_SEED, Channel, unit_hash
from wishtree.engine.layout import (
    LayoutConfig,
    LightConfig,
    LightPoint,
    PlacedItem,
    place_ornament,
    place_ornaments,
    plan_rows,
    scatter_lights,
)
from wishtree.engine.silhouette import (
    BoxSilhouette,
    RoundedTieredSilhouette,
    Silhouette,
    Tier,
    TieredSilhouette,
    build_silhouette,
)
from wishtree.engine.snowfall import Snowflake, snowfall

__all__ = [
    "DEFAULT_SEED",
    "Channel",
    "unit_hash",
    "LayoutConfig",
    "LightConfig",
    "LightPoint",
    "PlacedItem",
    "place_ornament",
    "place_ornaments",
    "plan_rows",
    "scatter_lights",
    "BoxSilhouette",
    "RoundedTieredSilhouette",
    "Silhouette",
    "Tier",
    "TieredSilhouette",
    "build_silhouette",
    "Snowflake",
    "snowfall",
]
