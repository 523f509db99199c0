from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from wordfinder.errors import EmptyInputError, RaggedInputError, SizeExceededError

MAX_GRID_SIZE = 64


class Grid:
    """Immutable rows x cols character store.

    Built once from row strings and validated: at least one row, at most
    MAX_GRID_SIZE rows and columns, every row the same length. Cells live in a
    read-only numpy array; row and column strings are kept alongside so the
    across/down checks reduce to ``str.startswith``.
    """

    __slots__ = ("rows", "cols", "_cells", "_row_text", "_col_text")

    def __init__(self, rows: Iterable[str]):
        if rows is None:
            raise EmptyInputError()
        if isinstance(rows, str):
            raise TypeError("rows must be an iterable of str, not a single str")
        lines = list(rows)
        if not lines:
            raise EmptyInputError()
        for idx, line in enumerate(lines):
            if not isinstance(line, str):
                raise TypeError(f"grid row {idx} must be str, got {type(line).__name__}")

        n_rows = len(lines)
        n_cols = len(lines[0])
        if n_rows > MAX_GRID_SIZE or n_cols > MAX_GRID_SIZE:
            raise SizeExceededError(n_rows, n_cols, MAX_GRID_SIZE)
        for idx, line in enumerate(lines):
            if len(line) != n_cols:
                raise RaggedInputError(idx, len(line), n_cols)

        cells = np.array([list(line) for line in lines], dtype="<U1").reshape(n_rows, n_cols)
        cells.setflags(write=False)

        object.__setattr__(self, "rows", n_rows)
        object.__setattr__(self, "cols", n_cols)
        object.__setattr__(self, "_cells", cells)
        object.__setattr__(self, "_row_text", tuple(lines))
        object.__setattr__(
            self, "_col_text", tuple("".join(line[c] for line in lines) for c in range(n_cols))
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the character array.

        numpy refuses to make a view writeable while its base is read-only.
        """
        return self._cells.view()

    def row(self, i: int) -> str:
        return self._row_text[i]

    def column(self, j: int) -> str:
        return self._col_text[j]

    def starts(self, ch: str) -> list[tuple[int, int]]:
        """All (row, col) cells equal to ``ch``, in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self._cells == ch)]

    def __getitem__(self, pos: tuple[int, int]) -> str:
        r, c = pos
        return self._row_text[r][c]

    def __len__(self) -> int:
        return self.rows

    def __iter__(self) -> Iterator[str]:
        return iter(self._row_text)

    def __eq__(self, other):
        return isinstance(other, Grid) and self._row_text == other._row_text

    def __hash__(self):
        return hash(self._row_text)

    def __str__(self):
        return "\n".join(self._row_text)

    def __repr__(self):
        return f"Grid({self.rows}x{self.cols})"
