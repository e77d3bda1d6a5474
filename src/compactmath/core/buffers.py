"""Bounds-checked import/export of components through flat float buffers.

Every value type lays its components out in a fixed order, so a contiguous
run of ``count`` floats is all that is needed to rebuild it.
"""

from typing import Any, MutableSequence, Sequence

import numpy as np
from numpy.typing import NDArray

from compactmath.constants import FLOAT

ITEM_SIZE = np.dtype(FLOAT).itemsize

_BYTE_FORMATS = ("B", "c")


def _as_floats(buffer: Any) -> NDArray[np.float32]:
    if isinstance(buffer, np.ndarray):
        return np.asarray(buffer, dtype=FLOAT).reshape(-1)
    try:
        view = memoryview(buffer)
    except TypeError:
        return np.asarray(buffer, dtype=FLOAT).reshape(-1)
    if view.format not in _BYTE_FORMATS:
        return np.asarray(buffer, dtype=FLOAT).reshape(-1)
    if view.nbytes % ITEM_SIZE:
        raise ValueError(
            f"Byte buffer of {view.nbytes} bytes is not a whole number of floats"
        )
    return np.frombuffer(view.tobytes(), dtype=FLOAT)


def read_components(buffer: Sequence[float] | Any, count: int, offset: int = 0) -> NDArray[np.float32]:
    """Copy ``count`` floats starting at ``offset`` out of ``buffer``.

    ``buffer`` may be any float sequence or buffer-protocol object (list,
    tuple, ``array.array``, numpy array, memoryview). Untyped byte buffers
    (``bytes``, ``bytearray``, memoryviews of them) are decoded as native
    float32.
    """
    if offset < 0:
        raise ValueError(f"Buffer offset must be non-negative, got {offset}")
    data = _as_floats(buffer)
    end = offset + count
    if data.shape[0] < end:
        raise ValueError(
            f"Buffer too short: need {count} floats at offset {offset}, "
            f"buffer holds {data.shape[0]}"
        )
    return data[offset:end].copy()


def write_components(values: NDArray[np.float32], buffer: MutableSequence[float], offset: int = 0) -> None:
    """Write ``values`` into ``buffer`` starting at ``offset``."""
    flat = values.reshape(-1)
    if offset < 0:
        raise ValueError(f"Buffer offset must be non-negative, got {offset}")
    end = offset + flat.shape[0]
    if len(buffer) < end:
        raise ValueError(
            f"Buffer too short: need {flat.shape[0]} floats at offset {offset}, "
            f"buffer holds {len(buffer)}"
        )
    for i, value in enumerate(flat.tolist()):
        buffer[offset + i] = value


def components_from_bytes(data: bytes, count: int) -> NDArray[np.float32]:
    """Decode exactly ``count`` native float32 values from raw bytes."""
    expected = count * ITEM_SIZE
    if len(data) != expected:
        raise ValueError(f"Expected {expected} bytes, got {len(data)}")
    return np.frombuffer(data, dtype=FLOAT).copy()
