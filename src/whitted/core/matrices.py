"""4x4 matrices for object, pattern and camera transforms.

Matrix wraps a NumPy array and multiplies either another Matrix (composing
transforms) or a Tuple (transforming a point or vector). Inversion fails
loudly on singular input; shape transforms are expected to be invertible.

Example:
    >>> from whitted.core.matrices import identity_matrix
    >>> from whitted.core.tuples import point
    >>> identity_matrix() * point(1, 2, 3)
    Tuple(x=1.0, y=2.0, z=3.0, w=1.0)
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import numpy.typing as npt

from whitted.core.tolerance import EPSILON
from whitted.core.tuples import Tuple


class Matrix:
    """An immutable 4x4 matrix of floats."""

    __slots__ = ("_data", "_rows")

    def __init__(self, rows: Iterable[Iterable[float]] | npt.NDArray[np.float64]) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.shape != (4, 4):
            raise ValueError(f"Matrix must be 4x4, got shape {data.shape}")
        data.flags.writeable = False
        self._data = data
        # Plain-float rows make Matrix * Tuple cheaper than a NumPy round trip
        self._rows = data.tolist()

    @property
    def data(self) -> npt.NDArray[np.float64]:
        """Read-only view of the underlying array."""
        return self._data

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=EPSILON))

    __hash__ = None

    def __mul__(self, other: Matrix | Tuple) -> Matrix | Tuple:
        if isinstance(other, Matrix):
            return Matrix(self._data @ other._data)
        if isinstance(other, Tuple):
            x, y, z, w = other.x, other.y, other.z, other.w
            r0, r1, r2, r3 = self._rows
            return Tuple(
                r0[0] * x + r0[1] * y + r0[2] * z + r0[3] * w,
                r1[0] * x + r1[1] * y + r1[2] * z + r1[3] * w,
                r2[0] * x + r2[1] * y + r2[2] * z + r2[3] * w,
                r3[0] * x + r3[1] * y + r3[2] * z + r3[3] * w,
            )
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix(self._data.T)

    def determinant(self) -> float:
        return float(np.linalg.det(self._data))

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> Matrix:
        """Compute the inverse matrix.

        Returns:
            The matrix M^-1 such that M * M^-1 is the identity.

        Raises:
            ValueError: If the matrix is singular.
        """
        if not self.is_invertible():
            raise ValueError("Matrix is not invertible (determinant is 0)")
        try:
            return Matrix(np.linalg.inv(self._data))
        except np.linalg.LinAlgError as e:
            raise ValueError(f"Matrix is not invertible: {e}") from e

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"


def identity_matrix() -> Matrix:
    """Return the 4x4 identity matrix."""
    return IDENTITY


IDENTITY = Matrix(np.identity(4))
