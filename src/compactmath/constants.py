"""Shared constants and paths for compactmath."""

import os
from pathlib import Path

import numpy as np

# Component storage type for every value in the package
FLOAT = np.float32

# Mathematical constants, rounded to single precision
PI = FLOAT(3.14159265358979323846)
HALF_PI = FLOAT(PI / FLOAT(2.0))
TWO_PI = FLOAT(PI * FLOAT(2.0))
E = FLOAT(2.71828182845904523536)
LN2 = FLOAT(0.6931471805599453)
LN10 = FLOAT(2.302585092994046)
DEG_TO_RAD = FLOAT(PI / FLOAT(180.0))
RAD_TO_DEG = FLOAT(FLOAT(180.0) / PI)

# Single-precision limits
FLOAT_MAX = float(np.finfo(FLOAT).max)
FLOAT_MIN = -FLOAT_MAX
INFINITY = float("inf")

# Settings
CONFIG_ENV_VAR = "COMPACTMATH_CONFIG"
DEFAULT_TOLERANCE = 1e-5
DEFAULT_FLOAT_PRECISION = None  # None = shortest round-trip repr


def default_config_path() -> Path | None:
    """Return the settings file named by $COMPACTMATH_CONFIG, if any."""
    value = os.environ.get(CONFIG_ENV_VAR)
    if not value:
        return None
    return Path(value)
