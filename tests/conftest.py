"""
Shared pytest fixtures.

The word list is a small mix of two-letter words and common short
words, enough to give the move generator real branching without
slowing the tests down.
"""

from __future__ import annotations

import pytest

from movegen import Board, Dictionary, MoveGenerator, Orientation, Placement

TWO_LETTER = {
    "AA", "AB", "AD", "AE", "AG", "AH", "AI", "AL", "AM", "AN",
    "AR", "AS", "AT", "AW", "AX", "AY", "BA", "BE", "BI", "BO",
    "BY", "DA", "DE", "DO", "ED", "EF", "EH", "EL", "EM", "EN",
    "ER", "ES", "ET", "EW", "EX", "FA", "FE", "GO", "HA", "HE",
    "HI", "HM", "HO", "ID", "IF", "IN", "IS", "IT", "JO", "KA",
    "KI", "LA", "LI", "LO", "MA", "ME", "MI", "MM", "MO", "MU",
    "MY", "NA", "NE", "NO", "NU", "OD", "OE", "OF", "OH", "OI",
    "OK", "OM", "ON", "OP", "OR", "OS", "OU", "OW", "OX", "OY",
    "PA", "PE", "PI", "PO", "QI", "RE", "SH", "SI", "SO", "TA",
    "TI", "TO", "UH", "UM", "UN", "UP", "US", "UT", "WE", "WO",
    "XI", "XU", "YA", "YE", "YO", "ZA",
}

COMMON = {
    "THE", "AND", "FOR", "ARE", "BUT", "NOT", "YOU", "ALL", "CAN",
    "HER", "WAS", "ONE", "OUR", "OUT", "DAY", "HAD", "HAS", "HIS",
    "CAT", "DOG", "RUN", "SET", "TOP", "RED", "WORD", "PLAY", "GAME",
    "TILE", "BEST", "MOVE", "RATE", "TEAR", "STAR", "RATS", "ARTS",
    "TARS", "SEAT", "EAST", "EATS", "TEAS", "STARE", "TEARS", "RATES",
    "ASTER", "CATS", "TOPS", "SPOT", "STOP", "POTS", "OPTS", "POST",
}


@pytest.fixture
def words() -> set[str]:
    return TWO_LETTER | COMMON


@pytest.fixture
def dictionary(words: set[str]) -> Dictionary:
    return Dictionary(sorted(words))


@pytest.fixture
def engine(dictionary: Dictionary) -> MoveGenerator:
    return MoveGenerator(dictionary)


@pytest.fixture
def busy_board() -> Board:
    """CAT across row 7 with TOP hanging down from its T."""
    board = Board()
    board.place(Placement("CAT", (7, 5), Orientation.HORIZONTAL))
    board.place(Placement("TOP", (7, 7), Orientation.VERTICAL))
    return board
