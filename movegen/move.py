"""Candidate placements produced by the move generator."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from movegen.alphabet import Alphabet
    from movegen.board import Board


class Orientation(str, Enum):
    """Axis along which a word is laid."""

    HORIZONTAL = "H"
    VERTICAL = "V"

    @property
    def step(self) -> tuple[int, int]:
        """(drow, dcol) from one letter of a word to the next."""
        return (0, 1) if self is Orientation.HORIZONTAL else (1, 0)

    @property
    def arrow(self) -> str:
        return "→" if self is Orientation.HORIZONTAL else "↓"


class Placement(NamedTuple):
    """One legal way to lay a word: the word, the (row, col) of its
    first letter and its orientation. Hashable, so a set of placements
    collapses duplicates."""

    word: str
    position: tuple[int, int]
    orientation: Orientation

    @property
    def row(self) -> int:
        return self.position[0]

    @property
    def col(self) -> int:
        return self.position[1]

    def tiles(self, alphabet: Alphabet | None = None) -> list[str]:
        """The word split into one symbol per square."""
        if alphabet is None:
            return list(self.word)
        return alphabet.tokenize(self.word)

    def cells(self, alphabet: Alphabet | None = None) -> list[tuple[int, int]]:
        """Board coordinates covered by the word, first letter first."""
        dr, dc = self.orientation.step
        r, c = self.position
        return [(r + i * dr, c + i * dc) for i in range(len(self.tiles(alphabet)))]

    def new_tiles(self, board: Board) -> list[tuple[str, int, int]]:
        """Symbols that are not already on *board*, as (symbol, row, col)."""
        tiles = self.tiles(board.alphabet)
        return [
            (ch, r, c)
            for ch, (r, c) in zip(tiles, self.cells(board.alphabet))
            if not board.is_occupied(r, c)
        ]

    def __str__(self) -> str:
        return f"{self.word} at ({self.row},{self.col}) {self.orientation.arrow}"
