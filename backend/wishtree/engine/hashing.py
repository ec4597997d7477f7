"""Pure index hash used for every "random" decision in the layout.

The hash is a 32-bit integer mix (the murmur3 finalizer) over seed, channel
and index. It touches no global state, so the same inputs give the same
float on every call, in every process, and in any language that can do
unsigned 32-bit multiplication.
"""

from __future__ import annotations

import enum

_MASK32 = 0xFFFFFFFF
_GOLDEN = 0x9E3779B9
_SCALE = float(1 << 32)

DEFAULT_SEED = 20251225


class Channel(enum.IntEnum):
    """Independent hash streams so one index never reuses a draw."""

    ORNAMENT_X = 1
    ORNAMENT_Y = 2
    LIGHT_Y = 3
    LIGHT_X = 4
    LIGHT_BIAS = 5
    LIGHT_BLINK = 6
    SNOW_LEFT = 7
    SNOW_SPEED = 8
    SNOW_DELAY = 9
    SNOW_SIZE = 10


def fmix32(h: int) -> int:
    """murmur3 32-bit finalizer. Input and output are unsigned 32-bit ints."""
    h &= _MASK32
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK32
    h ^= h >> 16
    return h


def hash32(index: int, seed: int = DEFAULT_SEED, channel: int = 0) -> int:
    stream = fmix32((seed + int(channel) * _GOLDEN) & _MASK32)
    return fmix32(stream ^ (index & _MASK32))


def unit_hash(index: int, seed: int = DEFAULT_SEED, channel: int = 0) -> float:
    """Map ``index`` to a float in [0, 1)."""
    return hash32(index, seed, channel) / _SCALE
