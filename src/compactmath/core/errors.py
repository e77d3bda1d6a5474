"""Exception types raised by compactmath.

Generic misuse uses the builtin classes (IndexError for component access,
ValueError for malformed input, TypeError for mismatched operand types,
ZeroDivisionError for explicit division by zero). Only conditions that are
specific to the algebra get their own class.
"""


class CompactMathError(Exception):
    """Base class for package-specific errors."""


class SingularMatrixError(CompactMathError, ArithmeticError):
    """Raised when inverting a matrix whose determinant is exactly zero."""

    def __init__(self, shape: tuple[int, int]):
        self.shape = shape
        super().__init__(
            f"Matrix{shape[0]}x{shape[1]} is singular and cannot be inverted"
        )
