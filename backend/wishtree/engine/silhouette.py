"""Tree silhouettes -- closed-form boundary functions plus shapely outlines.

Every silhouette answers ``bounds(y) -> (x_min, x_max)``. The layout engine
only ever talks to that function; the shapely geometry is for rendering and
for containment checks.

Variants:
  - TieredSilhouette (``triangular``): stacked, overlapping linear tiers.
  - RoundedTieredSilhouette (``rounded``): same tiers, sides bulge outward.
  - BoxSilhouette (``box``): photographic overlay, fixed bounding box.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from shapely.geometry import Polygon, box
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

# SVG canvas the default tree is authored in
CANVAS_W = 420.0
CANVAS_H = 580.0
APEX_X = 210.0


@dataclass(frozen=True)
class Tier:
    """One band of a tiered silhouette, linear between its top and bottom edges."""

    y_top: float
    y_bottom: float
    x_left_top: float
    x_right_top: float
    x_left_bottom: float
    x_right_bottom: float

    @classmethod
    def cone(cls, apex_x: float, y_top: float, y_bottom: float, x_left: float, x_right: float) -> Tier:
        """Triangular tier hanging from a single apex point."""
        return cls(y_top, y_bottom, apex_x, apex_x, x_left, x_right)

    @property
    def height(self) -> float:
        return self.y_bottom - self.y_top

    def covers(self, y: float) -> bool:
        return self.height > 0 and self.y_top <= y <= self.y_bottom

    def interval(self, progress: float) -> tuple[float, float]:
        """(left, right) at ``progress`` in [0, 1] from top edge to bottom edge."""
        left = self.x_left_top + (self.x_left_bottom - self.x_left_top) * progress
        right = self.x_right_top + (self.x_right_bottom - self.x_right_top) * progress
        return left, right


DEFAULT_TIERS: tuple[Tier, ...] = (
    Tier.cone(APEX_X, 35, 95, 170, 250),
    Tier.cone(APEX_X, 75, 150, 130, 290),
    Tier.cone(APEX_X, 130, 220, 90, 330),
    Tier.cone(APEX_X, 190, 295, 60, 360),
    Tier.cone(APEX_X, 260, 380, 30, 390),
    Tier.cone(APEX_X, 340, 470, 10, 410),
)


class Silhouette(ABC):
    """Closed region the decorations must stay inside."""

    kind: ClassVar[str]

    @property
    @abstractmethod
    def y_min(self) -> float: ...

    @property
    @abstractmethod
    def y_max(self) -> float: ...

    @property
    @abstractmethod
    def center_x(self) -> float: ...

    @abstractmethod
    def bounds(self, y: float) -> tuple[float, float]:
        """Horizontal extent at ``y``. Outside the shape: (center_x, center_x)."""

    @abstractmethod
    def parts(self) -> list[Polygon]:
        """Drawable pieces, back to front."""

    def width_at(self, y: float) -> float:
        lo, hi = self.bounds(y)
        return max(0.0, hi - lo)

    def to_polygon(self) -> BaseGeometry:
        """Union of all parts (Polygon, or MultiPolygon for disjoint tiers)."""
        return unary_union(self.parts())

    def svg_path(self, precision: int = 1) -> str:
        """SVG path ``d`` for the outline."""
        geom = self.to_polygon()
        if geom.is_empty:
            return ""
        polys = list(geom.geoms) if hasattr(geom, "geoms") else [geom]
        return " ".join(polygon_path(p, precision) for p in polys if not p.is_empty)


def polygon_path(poly: Polygon, precision: int = 1) -> str:
    coords = list(poly.exterior.coords)[:-1]
    if not coords:
        return ""
    head, *rest = coords
    d = f"M{head[0]:.{precision}f} {head[1]:.{precision}f}"
    for x, y in rest:
        d += f" L{x:.{precision}f} {y:.{precision}f}"
    return d + " Z"


@dataclass(frozen=True)
class TieredSilhouette(Silhouette):
    """Overlapping tiers; at any y the widest covering interval wins."""

    kind: ClassVar[str] = "triangular"
    _edge_samples: ClassVar[int] = 2

    tiers: tuple[Tier, ...] = DEFAULT_TIERS
    apex_x: float = APEX_X

    @property
    def y_min(self) -> float:
        tops = [t.y_top for t in self.tiers if t.height > 0]
        return min(tops) if tops else 0.0

    @property
    def y_max(self) -> float:
        bottoms = [t.y_bottom for t in self.tiers if t.height > 0]
        return max(bottoms) if bottoms else 0.0

    @property
    def center_x(self) -> float:
        return self.apex_x

    def _ease(self, progress: float) -> float:
        return progress

    def bounds(self, y: float) -> tuple[float, float]:
        lo, hi = math.inf, -math.inf
        for tier in self.tiers:
            if not tier.covers(y):
                continue
            left, right = tier.interval(self._ease((y - tier.y_top) / tier.height))
            lo = min(lo, left)
            hi = max(hi, right)
        if lo > hi:
            return (self.apex_x, self.apex_x)
        return (lo, hi)

    def parts(self) -> list[Polygon]:
        polys = []
        n = max(2, self._edge_samples)
        for tier in self.tiers:
            if tier.height <= 0:
                continue
            left_edge = []
            right_edge = []
            for k in range(n):
                progress = k / (n - 1)
                y = tier.y_top + tier.height * progress
                left, right = tier.interval(self._ease(progress))
                left_edge.append((left, y))
                right_edge.append((right, y))
            ring = left_edge + right_edge[::-1]
            poly = Polygon(ring)
            if not poly.is_valid:
                poly = poly.buffer(0)
            if not poly.is_empty:
                polys.append(poly)
        return polys


@dataclass(frozen=True)
class RoundedTieredSilhouette(TieredSilhouette):
    """Tiers whose sides follow a convex ease, so each tier looks like a soft bough."""

    kind: ClassVar[str] = "rounded"
    _edge_samples: ClassVar[int] = 17

    def _ease(self, progress: float) -> float:
        return math.sin(progress * math.pi / 2)


@dataclass(frozen=True)
class BoxSilhouette(Silhouette):
    """Photographic overlay: no computed outline, placement uses a fixed box."""

    kind: ClassVar[str] = "box"

    x_left: float = 70.0
    x_right: float = 350.0
    y_top: float = 40.0
    y_bottom: float = 470.0

    @property
    def y_min(self) -> float:
        return self.y_top

    @property
    def y_max(self) -> float:
        return self.y_bottom

    @property
    def center_x(self) -> float:
        return (self.x_left + self.x_right) / 2

    def bounds(self, y: float) -> tuple[float, float]:
        if self.y_top <= y <= self.y_bottom and self.x_right > self.x_left:
            return (self.x_left, self.x_right)
        return (self.center_x, self.center_x)

    def parts(self) -> list[Polygon]:
        if self.x_right <= self.x_left or self.y_bottom <= self.y_top:
            return []
        return [box(self.x_left, self.y_top, self.x_right, self.y_bottom)]


_STYLES: dict[str, type[Silhouette]] = {
    TieredSilhouette.kind: TieredSilhouette,
    RoundedTieredSilhouette.kind: RoundedTieredSilhouette,
    BoxSilhouette.kind: BoxSilhouette,
}


def build_silhouette(style: str = "triangular") -> Silhouette:
    """Default tree for a style tag."""
    try:
        cls = _STYLES[style]
    except KeyError:
        raise ValueError(f"Unknown silhouette style: {style!r}") from None
    return cls()
