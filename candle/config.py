"""Default tolerance values for candle math types."""

from __future__ import annotations

import sys

# Smallest eps with 1.0 + eps != 1.0 for doubles (2**-52).
DEFAULT_EPSILON = sys.float_info.epsilon
