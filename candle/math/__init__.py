"""Vector math and approximate equality."""

from .approx_eq import ApproxEq, approx_eq, approx_eq_eps, default_epsilon
from .vec2 import VEC2_EPSILON, VEC2_IDENTITY, Vec2

__all__ = [
    "ApproxEq",
    "Vec2",
    "VEC2_EPSILON",
    "VEC2_IDENTITY",
    "approx_eq",
    "approx_eq_eps",
    "default_epsilon",
]
