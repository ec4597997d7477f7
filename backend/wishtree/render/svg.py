"""Inline SVG markup for a composed scene."""

from __future__ import annotations

from wishtree.engine.silhouette import CANVAS_H, CANVAS_W, polygon_path
from wishtree.shell.scene import Ornament, Scene, StarTopper

ORNAMENT_RADIUS = 12.0
TRUNK_W = 50.0
TRUNK_H = 70.0

# (id, dark edge, mid, light centre) per tier gradient
_TIER_GRADIENTS = (
    ("g1", "#0d3a0d", "#2d7a2d", "#3a9a3a"),
    ("g2", "#0f4a0f", "#3a8f3a", "#4aaf4a"),
    ("g3", "#0a3a0a", "#2f7f2f", "#3f9f3f"),
    ("g4", "#0c4c0c", "#409040", "#50b050"),
)


def _n(v: float) -> str:
    return f"{v:.1f}"


def _defs() -> list[str]:
    lines = ["  <defs>"]
    for gid, dark, mid, light in _TIER_GRADIENTS:
        lines.append(f'    <linearGradient id="{gid}" x1="0%" y1="0%" x2="100%" y2="100%">')
        for offset, color in ((0, dark), (30, mid), (50, light), (70, mid), (100, dark)):
            lines.append(f'      <stop offset="{offset}%" stop-color="{color}" />')
        lines.append("    </linearGradient>")
    lines += [
        '    <linearGradient id="trunkGradient" x1="0%" y1="0%" x2="0%" y2="100%">',
        '      <stop offset="0%" stop-color="#8d6c5a" />',
        '      <stop offset="100%" stop-color="#6d4c3a" />',
        "    </linearGradient>",
        '    <filter id="lightGlow">',
        '      <feGaussianBlur stdDeviation="2.5" result="coloredBlur" />',
        '      <feMerge><feMergeNode in="coloredBlur" /><feMergeNode in="SourceGraphic" /></feMerge>',
        "    </filter>",
        "  </defs>",
    ]
    return lines


def _star(star: StarTopper) -> list[str]:
    points = " ".join(f"{x:g},{y:g}" for x, y in star.points)
    attrs = 'class="star" data-target="star"'
    if star.message is not None:
        attrs += f' data-message-id="{star.message.id}" role="button" tabindex="0"'
    return [
        f"  <g {attrs}>",
        f'    <polygon class="star-glow" points="{points}" fill="none" stroke="#FFD700" stroke-width="6" />',
        f'    <polygon points="{points}" fill="#FFD700" />',
        f'    <polygon points="{points}" fill="#FFA500" opacity="0.5" />',
        "  </g>",
    ]


def _ornament(ornament: Ornament) -> list[str]:
    item = ornament.item
    r = ORNAMENT_RADIUS
    style = f"animation-duration: {ornament.bob_duration:g}s; animation-delay: {ornament.bob_delay:g}s"
    return [
        f'  <g class="ornament" data-target="{ornament.slot}" data-message-id="{ornament.message.id}"'
        f' role="button" tabindex="0" aria-label="Ornament {ornament.slot + 1}">',
        f'    <ellipse cx="{_n(item.x + 2)}" cy="{_n(item.y + 3)}" rx="{_n(r)}" ry="{_n(r * 0.8)}" fill="rgba(0,0,0,0.3)" />',
        f'    <g class="bob" style="{style}">',
        f'      <circle cx="{_n(item.x)}" cy="{_n(item.y)}" r="{_n(r)}" fill="{item.color}" />',
        f'      <circle cx="{_n(item.x - 4)}" cy="{_n(item.y - 4)}" r="4" fill="rgba(255,255,255,0.5)" />',
        f'      <rect x="{_n(item.x - 2)}" y="{_n(item.y - r - 4)}" width="4" height="6" rx="1" fill="#C0C0C0" />',
        "    </g>",
        "  </g>",
    ]


def render_tree_svg(scene: Scene) -> str:
    """SVG for the tree: tiers, trunk, lights, star, ornaments (back to front)."""
    sil = scene.silhouette
    lines = [
        f'<svg class="tree" viewBox="0 0 {CANVAS_W:g} {CANVAS_H:g}" xmlns="http://www.w3.org/2000/svg"'
        f' role="img" data-silhouette="{sil.kind}">',
        "  <title>Christmas tree</title>",
    ]
    lines += _defs()

    for i, part in enumerate(sil.parts()):
        gid = _TIER_GRADIENTS[i % len(_TIER_GRADIENTS)][0]
        lines.append(f'  <path class="tier" d="{polygon_path(part)}" fill="url(#{gid})" />')

    lines.append(
        f'  <rect class="trunk" x="{_n(sil.center_x - TRUNK_W / 2)}" y="{_n(sil.y_max)}"'
        f' width="{_n(TRUNK_W)}" height="{_n(TRUNK_H)}" rx="2" fill="url(#trunkGradient)" />'
    )

    for light in scene.lights:
        style = f"animation-duration: {light.blink_duration:.2f}s; animation-delay: {light.blink_delay:.2f}s"
        lines.append(
            f'  <circle class="light" cx="{_n(light.x)}" cy="{_n(light.y)}" r="{light.radius:g}"'
            f' fill="{light.color}" filter="url(#lightGlow)" style="{style}" />'
        )

    lines += _star(scene.star)
    for ornament in scene.ornaments:
        lines += _ornament(ornament)

    lines.append("</svg>")
    return "\n".join(lines)
