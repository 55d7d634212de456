"""Player rack as a fixed-size letter-count array."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Union

from movegen.alphabet import DEFAULT_ALPHABET, Alphabet
from movegen.constants import BLANK

RackLike = Union["Rack", str, Iterable[str], Mapping[str, int]]


class Rack:
    """Multiset of tiles: one count per alphabet letter plus blanks.

    ``take`` and ``put`` mutate the counts in place so that a search can
    decrement before recursing and restore on return without allocating
    a new rack per branch.
    """

    __slots__ = ("alphabet", "counts", "blanks")

    def __init__(
        self,
        counts: Mapping[str, int] | None = None,
        blanks: int = 0,
        alphabet: Alphabet = DEFAULT_ALPHABET,
    ):
        self.alphabet = alphabet
        self.counts: list[int] = [0] * len(alphabet)
        if blanks < 0:
            raise ValueError(f"Negative blank count {blanks}")
        self.blanks = blanks
        for letter, n in (counts or {}).items():
            if n < 0:
                raise ValueError(f"Negative count {n} for {letter!r}")
            if letter == BLANK:
                self.blanks += n
            else:
                self.counts[self._index_of(letter)] += n

    @classmethod
    def from_letters(
        cls, tiles: Iterable[str], alphabet: Alphabet = DEFAULT_ALPHABET,
    ) -> Rack:
        """Rack from tiles such as ``"AET?"`` or ``["A", "E", "?"]``.

        A string is split into symbols by the alphabet, so ``"CHE?"`` is
        three tiles when "CH" is one.
        """
        rack = cls(alphabet=alphabet)
        if isinstance(tiles, str):
            rack.blanks = tiles.count(BLANK)
            tiles = alphabet.tokenize(tiles.replace(BLANK, ""))
        for tile in tiles:
            if tile == BLANK:
                rack.blanks += 1
            else:
                rack.counts[rack._index_of(tile)] += 1
        return rack

    def _index_of(self, letter: str) -> int:
        letter = letter.upper()
        if letter not in self.alphabet:
            raise ValueError(f"{letter!r} is not a tile of {self.alphabet!r}")
        return self.alphabet.index(letter)

    @classmethod
    def coerce(cls, rack: RackLike, alphabet: Alphabet = DEFAULT_ALPHABET) -> Rack:
        """Copy of *rack*, whatever shape the caller handed in."""
        if isinstance(rack, Rack):
            return rack.copy()
        if isinstance(rack, Mapping):
            return cls(rack, alphabet=alphabet)
        return cls.from_letters(rack, alphabet)

    def count(self, letter: str) -> int:
        if letter == BLANK:
            return self.blanks
        letter = letter.upper()
        if letter not in self.alphabet:
            return 0
        return self.counts[self.alphabet.index(letter)]

    def take(self, letter: str) -> str | None:
        """Remove a tile that can stand for *letter*.

        A real tile is used before a blank. Returns the tile removed
        (*letter* or ``"?"``), or None if the rack cannot supply it.
        """
        ix = self.alphabet.index(letter)
        if self.counts[ix] > 0:
            self.counts[ix] -= 1
            return letter
        if self.blanks > 0:
            self.blanks -= 1
            return BLANK
        return None

    def put(self, tile: str) -> None:
        """Return a tile previously handed out by ``take``."""
        if tile == BLANK:
            self.blanks += 1
        else:
            self.counts[self.alphabet.index(tile)] += 1

    def can_supply(self, letters: Iterable[str]) -> bool:
        """True if all *letters* can be drawn at once, blanks filling gaps."""
        if isinstance(letters, str):
            try:
                letters = self.alphabet.tokenize(letters)
            except ValueError:
                return False
        need = [0] * len(self.counts)
        for ch in letters:
            if ch not in self.alphabet:
                return False
            need[self.alphabet.index(ch)] += 1
        shortfall = sum(max(0, n - have) for n, have in zip(need, self.counts))
        return shortfall <= self.blanks

    def copy(self) -> Rack:
        r = Rack(alphabet=self.alphabet)
        r.counts = self.counts[:]
        r.blanks = self.blanks
        return r

    def letters(self) -> list[str]:
        """Tiles as a list, blanks last."""
        tiles: list[str] = []
        for ch, n in zip(self.alphabet, self.counts):
            tiles.extend([ch] * n)
        tiles.extend([BLANK] * self.blanks)
        return tiles

    def to_dict(self) -> dict[str, int]:
        d = {ch: n for ch, n in zip(self.alphabet, self.counts) if n}
        if self.blanks:
            d[BLANK] = self.blanks
        return d

    def __len__(self) -> int:
        return sum(self.counts) + self.blanks

    def __bool__(self) -> bool:
        return len(self) > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rack):
            return NotImplemented
        return (
            self.alphabet == other.alphabet
            and self.counts == other.counts
            and self.blanks == other.blanks
        )

    def __repr__(self) -> str:
        return f"Rack({''.join(self.letters())!r})"
