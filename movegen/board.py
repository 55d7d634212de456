"""Square game board backed by a numpy letter grid."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Sequence

import numpy as np

from movegen.alphabet import DEFAULT_ALPHABET, Alphabet
from movegen.constants import BOARD_SIZE, EMPTY

if TYPE_CHECKING:
    from movegen.move import Placement


class Direction(Enum):
    """Orthogonal neighbor offsets as (drow, dcol)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class Board:
    """NxN game board. Each cell is "" (empty), an alphabet symbol
    (tile), or the symbol in lowercase (blank used as that symbol)."""

    def __init__(
        self,
        size: int = BOARD_SIZE,
        alphabet: Alphabet = DEFAULT_ALPHABET,
        cells: np.ndarray | None = None,
    ):
        self.size = size
        self.alphabet = alphabet
        if cells is None:
            cells = np.full((size, size), EMPTY, dtype=f"<U{alphabet.width}")
        elif cells.shape != (size, size):
            raise ValueError(f"Expected a {size}x{size} grid, got {cells.shape}")
        self.cells: np.ndarray = cells

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        empty: str = ".",
        alphabet: Alphabet = DEFAULT_ALPHABET,
    ) -> Board:
        """Build a board from one string per row, one character per cell,
        *empty* marking free cells."""
        size = len(rows)
        board = cls(size, alphabet)
        for r, line in enumerate(rows):
            if len(line) != size:
                raise ValueError(f"Row {r} has {len(line)} cells, expected {size}")
            for c, ch in enumerate(line):
                if ch != empty:
                    board.set(r, c, ch)
        return board

    # cell access

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> str | None:
        """Raw cell content at (row, col), or None."""
        if self.in_bounds(row, col):
            val = self.cells[row, col]
            if val:
                return str(val)
        return None

    def set(self, row: int, col: int, letter: str | None) -> None:
        """Place a symbol (lowercase for a blank) or clear the cell."""
        if not self.in_bounds(row, col):
            return
        if letter is None:
            self.cells[row, col] = EMPTY
            return
        if letter.upper() not in self.alphabet:
            raise ValueError(f"Cannot place {letter!r} on the board")
        self.cells[row, col] = letter

    def is_empty(self, row: int, col: int) -> bool:
        """True if (row, col) is on the board and holds no tile."""
        return self.in_bounds(row, col) and not self.cells[row, col]

    def is_occupied(self, row: int, col: int) -> bool:
        """True if (row, col) is on the board and holds a tile."""
        return self.in_bounds(row, col) and bool(self.cells[row, col])

    is_filled = is_occupied

    def letter_at(self, row: int, col: int) -> str:
        """Letter of the tile at (row, col); only defined for occupied cells."""
        return str(self.cells[row, col]).upper()

    @staticmethod
    def neighbor(pos: tuple[int, int], direction: Direction) -> tuple[int, int]:
        """Adjacent coordinates; not bounds-checked."""
        dr, dc = direction.value
        return pos[0] + dr, pos[1] + dc

    # whole-board queries

    @property
    def center(self) -> tuple[int, int]:
        return self.size // 2, self.size // 2

    def occupied_mask(self) -> np.ndarray:
        return self.cells != EMPTY

    def is_board_empty(self) -> bool:
        """True if no tiles on the board."""
        return not self.occupied_mask().any()

    def count_tiles(self) -> int:
        """Number of tiles on the board."""
        return int(self.occupied_mask().sum())

    def anchors(self) -> set[tuple[int, int]]:
        """Empty cells orthogonally adjacent to a tile, or just the
        center cell on an empty board."""
        filled = self.occupied_mask()
        if not filled.any():
            return {self.center}
        near = np.zeros_like(filled)
        near[1:, :] |= filled[:-1, :]
        near[:-1, :] |= filled[1:, :]
        near[:, 1:] |= filled[:, :-1]
        near[:, :-1] |= filled[:, 1:]
        rows, cols = np.nonzero(near & ~filled)
        return {(int(r), int(c)) for r, c in zip(rows, cols)}

    # derived boards

    def transposed(self) -> Board:
        """Read-only view with rows and columns swapped."""
        view = self.cells.T
        view.flags.writeable = False
        return Board(self.size, self.alphabet, view)

    def copy(self) -> Board:
        """Independent writable copy of the board."""
        return Board(self.size, self.alphabet, self.cells.copy())

    def place(self, placement: Placement) -> list[tuple[str, int, int]]:
        """Lay *placement* on this board.

        Returns the newly laid tiles as (letter, row, col). Raises
        ValueError, leaving the board untouched, if the word runs off the
        board or disagrees with a tile already there.
        """
        laid: list[tuple[str, int, int]] = []
        for ch, (r, c) in zip(placement.tiles(self.alphabet), placement.cells(self.alphabet)):
            if not self.in_bounds(r, c):
                raise ValueError(f"{placement} runs off the board")
            if self.is_empty(r, c):
                laid.append((ch, r, c))
            elif self.letter_at(r, c) != ch:
                raise ValueError(
                    f"{placement} conflicts with {self.letter_at(r, c)} at ({r},{c})"
                )
        for ch, r, c in laid:
            self.set(r, c, ch)
        return laid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.cells, other.cells))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        header = "    " + " ".join(f"{c:>2}" for c in range(self.size))
        sep = "   " + "---" * self.size
        lines = [header, sep]
        for r in range(self.size):
            parts = [f"{r:>2} |"]
            for c in range(self.size):
                val = self.get(r, c)
                parts.append(f"{val.upper() if val else '.':>2} ")
            lines.append("".join(parts))
        return "\n".join(lines)
