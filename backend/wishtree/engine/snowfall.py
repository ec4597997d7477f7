"""Falling snow layer. Deterministic so the page looks the same on reload."""

from __future__ import annotations

from dataclasses import dataclass

from wishtree.engine.hashing import DEFAULT_SEED, Channel, unit_hash


@dataclass(frozen=True)
class Snowflake:
    index: int
    left_pct: float  # horizontal start, percent of viewport width
    duration: float  # seconds per fall
    delay: float  # seconds before the first fall
    scale: float


def snowflake(index: int, seed: int = DEFAULT_SEED) -> Snowflake:
    return Snowflake(
        index=index,
        left_pct=unit_hash(index, seed, Channel.SNOW_LEFT) * 100,
        duration=5 + unit_hash(index, seed, Channel.SNOW_SPEED) * 10,
        delay=unit_hash(index, seed, Channel.SNOW_DELAY) * 5,
        scale=0.5 + unit_hash(index, seed, Channel.SNOW_SIZE),
    )


def snowfall(count: int = 30, seed: int = DEFAULT_SEED) -> list[Snowflake]:
    return [snowflake(i, seed) for i in range(max(0, count))]
