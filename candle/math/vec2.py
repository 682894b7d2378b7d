"""2D vector value type with per-axis approximate equality."""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass

from .. import config
from .approx_eq import ApproxEq

logger = logging.getLogger(__name__)


def _div_by_zero(value: float) -> float:
    """IEEE-754 result of ``value / +0.0``."""
    if value == 0.0 or math.isnan(value):
        return math.nan
    return math.copysign(math.inf, value)


@dataclass(frozen=True)
class Vec2(ApproxEq):
    """2D vector of doubles. Operations never mutate, they return a new Vec2."""

    x: float
    y: float

    @classmethod
    def new(cls, x: float, y: float) -> "Vec2":
        """Build a vector from ``x`` and ``y`` without any validation.

        >>> Vec2.new(1.0, 2.0)
        Vec2(x=1.0, y=2.0)
        """
        return cls(x, y)

    @classmethod
    def default_epsilon(cls) -> "Vec2":
        return VEC2_EPSILON

    def __add__(self, other: "Vec2 | float") -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        if isinstance(other, numbers.Real):
            return Vec2(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other: "Vec2 | float") -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        if isinstance(other, numbers.Real):
            return Vec2(self.x - other, self.y - other)
        return NotImplemented

    def dot(self, other: "Vec2") -> float:
        """Dot product.

        >>> Vec2(5.0, 12.0).dot(Vec2(-6.0, 8.0))
        66.0
        """
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Euclidean length, ``sqrt(x*x + y*y)``.

        >>> Vec2(3.0, 4.0).length()
        5.0
        """
        return math.sqrt(self.x * self.x + self.y * self.y)

    def magnitude(self) -> float:
        """Alias for :meth:`length`."""
        return self.length()

    def normalized(self) -> "Vec2":
        """Return the unit vector pointing the same way.

        A zero-length vector has no direction; the result then follows float
        division by zero, so ``Vec2(0.0, 0.0).normalized()`` is ``Vec2(nan, nan)``.
        """
        length = self.length()
        if length == 0.0:
            logger.debug("Normalizing zero-length vector %s", self)
            return Vec2(_div_by_zero(self.x), _div_by_zero(self.y))
        return Vec2(self.x / length, self.y / length)

    def approx_eq_eps(self, other: "Vec2", eps: "Vec2") -> bool:
        """Per-axis comparison: both ``|dx| < eps.x`` and ``|dy| < eps.y``."""
        return abs(self.x - other.x) < eps.x and abs(self.y - other.y) < eps.y


VEC2_EPSILON = Vec2(config.DEFAULT_EPSILON, config.DEFAULT_EPSILON)
VEC2_IDENTITY = Vec2(1.0, 1.0)
