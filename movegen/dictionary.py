"""Word list compiled into a DAWG."""

from __future__ import annotations

import logging
from typing import Iterable

from movegen.alphabet import DEFAULT_ALPHABET, Alphabet
from movegen.constants import BOARD_SIZE, MIN_WORD_LENGTH
from movegen.dawg import Dawg

log = logging.getLogger("movegen")


class Dictionary:
    """Validated word list backed by a word graph.

    Words are stripped, uppercased and checked against the alphabet and
    the length bounds before they reach the graph. Words that fail are
    skipped. Reading word lists from storage is left to the caller; this
    class only takes an iterable of strings.
    """

    def __init__(
        self,
        words: Iterable[str] = (),
        alphabet: Alphabet = DEFAULT_ALPHABET,
        min_length: int = MIN_WORD_LENGTH,
        max_length: int = BOARD_SIZE,
        compact: bool = True,
    ):
        self.alphabet = alphabet
        self.min_length = min_length
        self.max_length = max_length
        self.dawg = Dawg()
        self._load(words, compact)

    def _load(self, words: Iterable[str], compact: bool) -> None:
        rejected = 0
        for word in words:
            if not self.add(word):
                rejected += 1
        states = self.dawg.node_count()
        if compact:
            states -= self.dawg.minimize()
        log.info(
            "Compiled %s words into %s states (%d rejected)",
            f"{len(self.dawg):,}", f"{states:,}", rejected,
        )

    def add(self, word: str) -> bool:
        """Insert one word; False if it was rejected.

        Length bounds count tiles, so "CHICO" is four long in an alphabet
        with a "CH" tile.
        """
        word = word.strip()
        try:
            tiles = self.alphabet.tokenize(word)
        except ValueError as e:
            log.debug("Rejected %r: %s", word, e)
            return False
        if not self.min_length <= len(tiles) <= self.max_length:
            log.debug("Rejected %r: length outside %d..%d", word, self.min_length, self.max_length)
            return False
        return self.dawg.insert(tiles)

    def is_valid(self, word: str) -> bool:
        try:
            return self.dawg.is_word(self.alphabet.tokenize(word))
        except ValueError:
            return False

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.dawg)
