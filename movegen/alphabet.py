"""Letter sets used by a game."""

from __future__ import annotations

from typing import Iterator, Sequence

from movegen.constants import ALPHABET, BLANK


class Alphabet:
    """Ordered set of tile symbols.

    A symbol is usually one character, but may be longer, as with the
    Spanish "CH", "LL" and "RR" tiles. Words are split into symbols by
    longest match. The position of a symbol in the alphabet is its index
    into a rack's count array.
    """

    __slots__ = ("letters", "width", "_index")

    def __init__(self, letters: str | Sequence[str] = ALPHABET):
        if isinstance(letters, str):
            symbols = tuple(letters.upper())
        else:
            symbols = tuple(s.upper() for s in letters)
        if not symbols:
            raise ValueError("An alphabet needs at least one letter")
        if not all(symbols):
            raise ValueError("Alphabet symbols cannot be empty")
        if len(set(symbols)) != len(symbols):
            raise ValueError(f"Duplicate letters in alphabet {symbols!r}")
        if any(BLANK in s for s in symbols):
            raise ValueError(f"{BLANK!r} is reserved for blank tiles")
        self.letters = symbols
        self.width = max(len(s) for s in symbols)
        self._index: dict[str, int] = {s: ix for ix, s in enumerate(symbols)}

    def index(self, letter: str) -> int:
        """Array index of *letter*; raises KeyError for foreign letters."""
        return self._index[letter]

    def tokenize(self, word: str) -> list[str]:
        """Split *word* into symbols, longest match first.

        The word is uppercased. Raises ValueError at the first position
        no symbol matches.
        """
        word = word.upper()
        tokens: list[str] = []
        i = 0
        while i < len(word):
            for n in range(min(self.width, len(word) - i), 0, -1):
                if word[i:i + n] in self._index:
                    tokens.append(word[i:i + n])
                    i += n
                    break
            else:
                raise ValueError(f"Letter {word[i]!r} in {word!r} is not in the alphabet")
        return tokens

    def normalize(self, word: str) -> str:
        """Uppercase *word* and check that it splits into symbols."""
        return "".join(self.tokenize(word))

    def __contains__(self, letter: object) -> bool:
        return letter in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self.letters == other.letters

    def __hash__(self) -> int:
        return hash(self.letters)

    def __repr__(self) -> str:
        if self.width == 1:
            return f"Alphabet({''.join(self.letters)!r})"
        return f"Alphabet({list(self.letters)!r})"


DEFAULT_ALPHABET = Alphabet(ALPHABET)
