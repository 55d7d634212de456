"""Assertions and test data shared by the move generator tests."""

from __future__ import annotations

from movegen import Alphabet, Board, Dictionary, Orientation, Placement, Rack
from movegen.rack import RackLike

# Spanish tile set with the CH, LL and RR digraphs as single tiles
SPANISH = Alphabet([
    "A", "B", "C", "CH", "D", "E", "F", "G", "H", "I", "J", "L", "LL", "M",
    "N", "Ñ", "O", "P", "Q", "R", "RR", "S", "T", "U", "V", "X", "Y", "Z",
])


def cross_words(board: Board, placement: Placement) -> list[str]:
    """Words formed across the main word by its newly laid tiles."""
    if placement.orientation is Orientation.HORIZONTAL:
        dr, dc = 1, 0
    else:
        dr, dc = 0, 1
    found: list[str] = []
    for ch, r, c in placement.new_tiles(board):
        before: list[str] = []
        nr, nc = r - dr, c - dc
        while board.is_occupied(nr, nc):
            before.append(board.letter_at(nr, nc))
            nr, nc = nr - dr, nc - dc
        after: list[str] = []
        nr, nc = r + dr, c + dc
        while board.is_occupied(nr, nc):
            after.append(board.letter_at(nr, nc))
            nr, nc = nr + dr, nc + dc
        if before or after:
            found.append("".join(reversed(before)) + ch + "".join(after))
    return found


def check_placement(
    dictionary: Dictionary,
    board: Board,
    placement: Placement,
    rack: RackLike,
    cross_check: bool = True,
) -> None:
    word, (row, col), orientation = placement
    dr, dc = orientation.step
    tiles = placement.tiles(board.alphabet)
    cells = placement.cells(board.alphabet)

    assert word in dictionary, placement
    assert all(board.in_bounds(r, c) for r, c in cells), placement

    # The word is the whole run of tiles on its line
    assert not board.is_occupied(row - dr, col - dc), placement
    end_r, end_c = cells[-1]
    assert not board.is_occupied(end_r + dr, end_c + dc), placement

    for ch, (r, c) in zip(tiles, cells):
        if board.is_occupied(r, c):
            assert board.letter_at(r, c) == ch, placement

    new = placement.new_tiles(board)
    assert new, placement
    assert Rack.coerce(rack, board.alphabet).can_supply(ch for ch, _, _ in new), placement

    anchors = board.anchors()
    assert any((r, c) in anchors for _, r, c in new), placement

    if cross_check:
        for cw in cross_words(board, placement):
            assert cw in dictionary, (placement, cw)
