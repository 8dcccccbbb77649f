from typing import Optional

import numpy as np

from .symbols import Score


class MatrixIndexError(IndexError):
    """Raised when a matrix cell is addressed outside the grid."""


class AlignmentMatrix:
    """
    Dense grid of alignment scores backed by a flat row-major buffer.

    The width is fixed at construction and the height is derived from the
    buffer length. Row 0 and column 0 stand for "before the sequence starts".

    Two access paths are offered: ``get``/``set`` report out-of-range
    coordinates through their return value, while ``matrix[i, j]`` is meant
    for coordinates already known to be valid and raises ``MatrixIndexError``
    otherwise.

    Examples:
        >>> m = AlignmentMatrix(2, 3)
        >>> m[1, 2] = 5
        >>> m.argmax_all()
        [(1, 2)]
    """

    _DTYPE = np.int64
    __slots__ = ("_buf", "_width")

    def __init__(self, height: int, width: int) -> None:
        if height < 1 or width < 1:
            raise ValueError(f"Matrix dimensions must be positive, got {height}x{width}.")
        self._buf = np.zeros(height * width, dtype=self._DTYPE)
        self._width = width

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return len(self._buf) // self._width

    @property
    def shape(self) -> tuple[int, int]:
        return self.height, self.width

    def __repr__(self) -> str:
        return f"AlignmentMatrix{self.shape}"

    def _offset(self, i: int, j: int) -> Optional[int]:
        if 0 <= i < self.height and 0 <= j < self._width:
            return i * self._width + j
        return None

    def get(self, i: int, j: int) -> Optional[Score]:
        """Returns the score at ``(i, j)``, or ``None`` when out of range."""
        offset = self._offset(i, j)
        if offset is None:
            return None
        return int(self._buf[offset])

    def set(self, i: int, j: int, score: Score) -> bool:
        """Stores ``score`` at ``(i, j)``. Returns ``False`` when out of range."""
        offset = self._offset(i, j)
        if offset is None:
            return False
        self._buf[offset] = score
        return True

    def __getitem__(self, index: tuple[int, int]) -> Score:
        i, j = index
        offset = self._offset(i, j)
        if offset is None:
            raise MatrixIndexError(f"invalid index ({i}, {j}) for matrix of shape {self.shape}")
        return int(self._buf[offset])

    def __setitem__(self, index: tuple[int, int], score: Score) -> None:
        i, j = index
        offset = self._offset(i, j)
        if offset is None:
            raise MatrixIndexError(f"invalid index ({i}, {j}) for matrix of shape {self.shape}")
        self._buf[offset] = score

    def max(self) -> Score:
        """Matrix-wide maximum score."""
        return int(self._buf.max())

    def argmax_all(self) -> list[tuple[int, int]]:
        """
        Finds every cell holding the matrix-wide maximum.

        Returns:
            list[tuple[int, int]]: Coordinates in row-major scan order.
        """
        offsets = np.flatnonzero(self._buf == self._buf.max())
        return [divmod(int(offset), self._width) for offset in offsets]

    def to_numpy(self) -> np.ndarray:
        """Read-only 2D view of the scores."""
        view = self._buf.reshape(self.shape)
        view.flags.writeable = False
        return view
