"""Text rendering of float32 components shared by every value type."""

from typing import Iterable

import numpy as np

from compactmath.constants import FLOAT
from compactmath.core.config_loader import get_settings


def format_component(value: float) -> str:
    """Render one component: ``1``, ``0.5``, ``-2.25``, ``inf``.

    Uses the shortest text that round-trips through float32, or the configured
    number of decimals when ``Settings.float_precision`` is set.
    """
    precision = get_settings().float_precision
    return np.format_float_positional(FLOAT(value), precision=precision, trim="-")


def format_signed(value: float) -> str:
    """Render a component with an explicit leading sign (``+2``, ``-0.5``)."""
    text = format_component(value)
    if text.startswith("-"):
        return text
    return "+" + text


def format_tuple(values: Iterable[float]) -> str:
    """``(x, y, z)`` style rendering used by vectors and matrix rows."""
    return "(" + ", ".join(format_component(v) for v in values) + ")"
