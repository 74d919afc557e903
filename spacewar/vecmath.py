"""Two-dimensional vector maths and random helpers used throughout the game."""

from __future__ import annotations

import math
import random
import struct
from dataclasses import dataclass

_MAGIC = 0x5F3759DF


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


def q_rsqrt(number: float) -> float:
    """Approximate 1/sqrt(number) with the bit-level trick and one Newton step."""
    half = number * 0.5
    (bits,) = struct.unpack("<i", struct.pack("<f", number))
    bits = _MAGIC - (bits >> 1)
    (y,) = struct.unpack("<f", struct.pack("<i", bits))
    return y * (1.5 - half * y * y)


def rad_to_deg(radians: float) -> float:
    return radians * 180.0 / math.pi


def deg_to_rad(degrees: float) -> float:
    return degrees / 180.0 * math.pi


def length(vec: Vec2) -> float:
    return math.sqrt(vec.x * vec.x + vec.y * vec.y)


def squared_length(vec: Vec2) -> float:
    return vec.x * vec.x + vec.y * vec.y


def safe_normalize(vec: Vec2) -> Vec2:
    """Return an (approximately) unit vector, or the zero vector for zero input."""
    sqr_len = squared_length(vec)
    if sqr_len <= 0:
        return Vec2(0.0, 0.0)
    return vec * q_rsqrt(sqr_len)


def normalize(vec: Vec2) -> Vec2:
    """Return vec scaled to (approximately) unit length; zero vectors are returned as is."""
    sqr_len = squared_length(vec)
    if sqr_len > 0:
        return vec * q_rsqrt(sqr_len)
    return vec


def squared_distance(a: Vec2, b: Vec2) -> float:
    return squared_length(b - a)


def distance(a: Vec2, b: Vec2) -> float:
    return length(b - a)


def rotation_to_unit_vector(rotation: float) -> Vec2:
    """Unit vector for a rotation in degrees, where 0 points up the screen."""
    radians = deg_to_rad(rotation)
    return Vec2(math.sin(radians), -math.cos(radians))


def dot_product(a: Vec2, b: Vec2) -> float:
    return a.x * b.x + a.y * b.y


def random_in_range(low, high, rng: random.Random | None = None):
    """Random value scaled over (high - low + 1) from low, truncated for integers."""
    if low > high:
        return random_in_range(high, low, rng)
    if high == low:
        return low
    source = rng if rng is not None else random
    factor = source.random()
    value = (high - low + 1) * factor + low
    if isinstance(low, int) and isinstance(high, int):
        return int(value)
    return float(value)