"""Ornament placement and light scattering inside a silhouette.

Ornaments go into precomputed row slots. Rows are spaced by a blend of
uniform spacing and the silhouette's width profile, so wider regions get
more rows. Inside a row, slots sit on an even grid and each ornament is
nudged by a hashed offset smaller than half the grid step, which keeps the
row order and the minimum spacing intact.

Lights are looser: one hashed y per light, one hashed x inside the span at
that y, a small edge margin and nothing else.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

import numpy as np

from wishtree.engine.hashing import DEFAULT_SEED, Channel, unit_hash
from wishtree.engine.silhouette import Silhouette

logger = logging.getLogger(__name__)

ORNAMENT_PALETTE: tuple[str, ...] = (
    "#dc2626",  # red
    "#facc15",  # yellow
    "#3b82f6",  # blue
    "#a855f7",  # purple
    "#ec4899",  # pink
    "#f97316",  # orange
    "#22d3ee",  # cyan
    "#a3e635",  # lime
    "#e11d48",  # rose
    "#f59e0b",  # amber
    "#6366f1",  # indigo
    "#d946ef",  # fuchsia
)

LIGHT_PALETTE: tuple[str, ...] = (
    "#FFD700",
    "#FF69B4",
    "#00BFFF",
    "#00FF00",
    "#FFB6C1",
    "#FF6347",
    "#FFA500",
)

# Samples of the width profile used to place rows
_PROFILE_SAMPLES = 256


@dataclass(frozen=True)
class LayoutConfig:
    """Ornament layout constants, in silhouette (SVG) units."""

    seed: int = DEFAULT_SEED
    row_count: int = 9
    min_spacing: float = 35.0
    edge_margin: float = 25.0
    max_per_row: int = 4

    # x nudge width as a fraction of the row step, capped in absolute units
    jitter_fraction: float = 0.4
    max_x_jitter: float = 15.0
    y_jitter: float = 12.0

    # Row band inside the silhouette's vertical extent
    top_inset: float = 50.0
    bottom_inset: float = 25.0
    # 0 = uniform rows, 1 = equal-area rows
    taper_weight: float = 0.35

    palette: tuple[str, ...] = ORNAMENT_PALETTE

    def __post_init__(self) -> None:
        if not 0.0 <= self.jitter_fraction < 1.0:
            raise ValueError("jitter_fraction must be in [0, 1)")
        if not 0.0 <= self.taper_weight <= 1.0:
            raise ValueError("taper_weight must be in [0, 1]")
        if self.row_count < 1:
            raise ValueError("row_count must be at least 1")
        if self.max_per_row < 1:
            raise ValueError("max_per_row must be at least 1")
        if self.min_spacing <= 0:
            raise ValueError("min_spacing must be positive")
        if self.edge_margin < 0 or self.max_x_jitter < 0 or self.y_jitter < 0:
            raise ValueError("margins and jitters must be non-negative")
        if not self.palette:
            raise ValueError("palette must not be empty")


@dataclass(frozen=True)
class LightConfig:
    seed: int = DEFAULT_SEED
    edge_margin: float = 15.0
    # Used instead of edge_margin when the span is narrower than two margins
    narrow_margin_fraction: float = 0.15
    center_bias: float = 0.25
    radius: float = 2.5
    blink_base: float = 1.5
    blink_spread: float = 1.0
    delay_spread: float = 2.0
    palette: tuple[str, ...] = LIGHT_PALETTE


@dataclass(frozen=True)
class Row:
    y: float
    x_min: float  # usable span, margins already applied
    x_max: float
    capacity: int

    @property
    def span(self) -> float:
        return self.x_max - self.x_min

    @property
    def step(self) -> float:
        if self.capacity < 2:
            return 0.0
        return self.span / (self.capacity - 1)


@dataclass(frozen=True)
class Slot:
    row: int
    column: int
    x: float
    y: float
    jitter: float  # full width of the allowed x nudge


@dataclass(frozen=True)
class PlacedItem:
    index: int
    x: float
    y: float
    color: str


@dataclass(frozen=True)
class LightPoint:
    index: int
    x: float
    y: float
    color: str
    radius: float
    blink_duration: float
    blink_delay: float


def _jitter_width(step: float, config: LayoutConfig) -> float:
    return min(step * config.jitter_fraction, config.max_x_jitter)


def _row_capacity(span: float, config: LayoutConfig) -> int:
    if span <= 0:
        return 0
    for count in range(config.max_per_row, 1, -1):
        step = span / (count - 1)
        if step - _jitter_width(step, config) >= config.min_spacing:
            return count
    return 1


def _row_positions(silhouette: Silhouette, config: LayoutConfig) -> np.ndarray:
    top = silhouette.y_min + config.top_inset
    bottom = silhouette.y_max - config.bottom_inset
    if config.row_count == 1 or bottom <= top:
        return np.array([(top + bottom) / 2] * config.row_count)

    uniform = np.linspace(top, bottom, config.row_count)
    if config.taper_weight == 0:
        return uniform

    ys = np.linspace(top, bottom, _PROFILE_SAMPLES)
    widths = np.array([silhouette.width_at(float(y)) for y in ys])
    # Trapezoid cumulative area, normalised to [0, 1]
    area = np.concatenate([[0.0], np.cumsum((widths[1:] + widths[:-1]) / 2 * np.diff(ys))])
    if area[-1] <= 0:
        return uniform
    area /= area[-1]
    targets = np.linspace(0.0, 1.0, config.row_count)
    equal_area = np.interp(targets, area, ys)
    return (1 - config.taper_weight) * uniform + config.taper_weight * equal_area


@lru_cache(maxsize=64)
def plan_rows(silhouette: Silhouette, config: LayoutConfig = LayoutConfig()) -> tuple[Row, ...]:
    """Rows of ornament slots, top to bottom."""
    rows = []
    for y in _row_positions(silhouette, config):
        y = float(y)
        lo, hi = silhouette.bounds(y)
        x_min = lo + config.edge_margin
        x_max = hi - config.edge_margin
        capacity = _row_capacity(x_max - x_min, config)
        if capacity == 0:
            logger.debug("Row at y=%.1f too narrow (%.1f), skipped", y, x_max - x_min)
        rows.append(Row(y=y, x_min=x_min, x_max=x_max, capacity=capacity))
    logger.debug(
        "Planned %d rows, %d slots for %s silhouette",
        len(rows),
        sum(r.capacity for r in rows),
        silhouette.kind,
    )
    return tuple(rows)


@lru_cache(maxsize=64)
def ornament_slots(silhouette: Silhouette, config: LayoutConfig = LayoutConfig()) -> tuple[Slot, ...]:
    """All slots, row-major, left to right."""
    slots = []
    for r, row in enumerate(plan_rows(silhouette, config)):
        if row.capacity == 1:
            slots.append(Slot(r, 0, (row.x_min + row.x_max) / 2, row.y, 0.0))
            continue
        step = row.step
        jitter = _jitter_width(step, config)
        for c in range(row.capacity):
            slots.append(Slot(r, c, row.x_min + c * step, row.y, jitter))
    return tuple(slots)


def _fallback_item(silhouette: Silhouette, index: int, config: LayoutConfig) -> PlacedItem:
    """No row had room: park the ornament mid-row on the widest row."""
    rows = plan_rows(silhouette, config)
    if rows:
        widest = max(rows, key=lambda r: r.span)
        y = widest.y
    else:
        y = (silhouette.y_min + silhouette.y_max) / 2
    lo, hi = silhouette.bounds(y)
    return PlacedItem(index=index, x=(lo + hi) / 2, y=y, color=config.palette[index % len(config.palette)])


def place_ornament(silhouette: Silhouette, index: int, config: LayoutConfig = LayoutConfig()) -> PlacedItem:
    """Position of ornament ``index``. Pure in (silhouette, index, config)."""
    slots = ornament_slots(silhouette, config)
    if not slots:
        logger.warning("Silhouette has no ornament slots; using fallback position")
        return _fallback_item(silhouette, index, config)

    slot = slots[index % len(slots)]
    row = plan_rows(silhouette, config)[slot.row]

    x = slot.x + (unit_hash(index, config.seed, Channel.ORNAMENT_X) - 0.5) * slot.jitter
    x = min(max(x, row.x_min), row.x_max)

    y = slot.y + (unit_hash(index, config.seed, Channel.ORNAMENT_Y) - 0.5) * config.y_jitter
    lo, hi = silhouette.bounds(y)
    if not lo + config.edge_margin <= x <= hi - config.edge_margin:
        y = slot.y

    return PlacedItem(index=index, x=x, y=y, color=config.palette[index % len(config.palette)])


def place_ornaments(
    silhouette: Silhouette, count: int, config: LayoutConfig = LayoutConfig()
) -> list[PlacedItem]:
    if count <= 0:
        return []
    return [place_ornament(silhouette, i, config) for i in range(count)]


def place_light(silhouette: Silhouette, index: int, config: LightConfig = LightConfig()) -> LightPoint:
    r_y = unit_hash(index, config.seed, Channel.LIGHT_Y)
    r_x = unit_hash(index, config.seed, Channel.LIGHT_X)
    r_bias = unit_hash(index, config.seed, Channel.LIGHT_BIAS)
    r_blink = unit_hash(index, config.seed, Channel.LIGHT_BLINK)

    y = silhouette.y_min + r_y * (silhouette.y_max - silhouette.y_min)
    lo, hi = silhouette.bounds(y)
    width = hi - lo
    margin = config.edge_margin if width > config.edge_margin * 2 else width * config.narrow_margin_fraction
    x_min, x_max = lo + margin, hi - margin

    if x_max <= x_min:
        x = (lo + hi) / 2
    elif r_bias < config.center_bias:
        x = (x_min + x_max) / 2 + (r_x - 0.5) * (x_max - x_min) * 0.5
    else:
        x = x_min + r_x * (x_max - x_min)
    if x_max > x_min:
        x = min(max(x, x_min), x_max)

    return LightPoint(
        index=index,
        x=x,
        y=y,
        color=config.palette[index % len(config.palette)],
        radius=config.radius,
        blink_duration=config.blink_base + r_blink * config.blink_spread,
        blink_delay=r_blink * config.delay_spread,
    )


def scatter_lights(
    silhouette: Silhouette, count: int, config: LightConfig = LightConfig()
) -> list[LightPoint]:
    """Small blinking points; may cluster, stay a margin away from the edges."""
    if count <= 0:
        return []
    return [place_light(silhouette, i, config) for i in range(count)]
