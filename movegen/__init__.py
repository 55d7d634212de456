"""Move generator for Scrabble-style word games."""

from movegen.constants import ALPHABET, BLANK, BOARD_SIZE, CENTER, MIN_WORD_LENGTH
from movegen.alphabet import DEFAULT_ALPHABET, Alphabet
from movegen.dawg import Dawg, DawgNode
from movegen.dictionary import Dictionary
from movegen.board import Board, Direction
from movegen.rack import Rack
from movegen.move import Orientation, Placement
from movegen.engine import MoveGenerator, SearchResult

__all__ = [
    "ALPHABET",
    "BLANK",
    "BOARD_SIZE",
    "CENTER",
    "DEFAULT_ALPHABET",
    "MIN_WORD_LENGTH",
    "Alphabet",
    "Board",
    "Dawg",
    "DawgNode",
    "Dictionary",
    "Direction",
    "MoveGenerator",
    "Orientation",
    "Placement",
    "Rack",
    "SearchResult",
]
