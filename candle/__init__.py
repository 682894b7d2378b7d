"""2D vector primitive with approximate floating-point equality."""

import logging

from .math import (
    VEC2_EPSILON,
    VEC2_IDENTITY,
    ApproxEq,
    Vec2,
    approx_eq,
    approx_eq_eps,
    default_epsilon,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ApproxEq",
    "Vec2",
    "VEC2_EPSILON",
    "VEC2_IDENTITY",
    "approx_eq",
    "approx_eq_eps",
    "default_epsilon",
]
