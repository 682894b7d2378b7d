"""Approximate equality for scalars and compound numeric types.

Every comparison goes through ``approx_eq_eps``; ``approx_eq`` only picks the
default tolerance for the value's type and delegates. Comparisons use a strict
``<`` so NaN never compares approximately equal to anything.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from functools import singledispatch
from typing import Any

from .. import config


class ApproxEq(ABC):
    """Mixin for value types that can be compared within a tolerance.

    Subclasses implement ``approx_eq_eps`` and ``default_epsilon``. The
    tolerance has the same type as the value itself, so a compound type can
    carry one tolerance per component.
    """

    @classmethod
    @abstractmethod
    def default_epsilon(cls) -> Any:
        """Tolerance used by ``approx_eq``."""

    @abstractmethod
    def approx_eq_eps(self, other: Any, eps: Any) -> bool:
        """Return True if ``other`` is within ``eps`` of this value."""

    def approx_eq(self, other: Any) -> bool:
        return self.approx_eq_eps(other, self.default_epsilon())


@singledispatch
def approx_eq_eps(value: Any, other: Any, eps: Any) -> bool:
    """Return True if ``value`` and ``other`` differ by less than ``eps``.

    Args:
        value: A real number or an ``ApproxEq`` instance.
        other: Value of the same kind to compare against.
        eps: Tolerance of the same kind as ``value``.

    Raises:
        TypeError: If ``value`` has no approximate equality rule.
    """
    raise TypeError(f"approximate equality is not defined for {type(value).__name__}")


@approx_eq_eps.register(numbers.Real)
def _(value: numbers.Real, other: numbers.Real, eps: numbers.Real) -> bool:
    return abs(value - other) < eps


@approx_eq_eps.register(ApproxEq)
def _(value: ApproxEq, other: ApproxEq, eps: ApproxEq) -> bool:
    return value.approx_eq_eps(other, eps)


@singledispatch
def default_epsilon(value: Any) -> Any:
    """Return the default tolerance for values of ``value``'s type."""
    raise TypeError(f"no default tolerance for {type(value).__name__}")


@default_epsilon.register(numbers.Real)
def _(value: numbers.Real) -> float:
    return config.DEFAULT_EPSILON


@default_epsilon.register(ApproxEq)
def _(value: ApproxEq) -> Any:
    return value.default_epsilon()


def approx_eq(value: Any, other: Any) -> bool:
    """Compare two values using the default tolerance of their type."""
    return approx_eq_eps(value, other, default_epsilon(value))
