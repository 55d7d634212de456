"""Anchor-based move generation with word-graph pruning.

The search is written once for left-to-right words. Vertical words are
found by running the same search on a transposed view of the board and
swapping the coordinates of what it finds.

For every anchor (an empty square next to a tile) a word either
continues a run of tiles that ends just left of the anchor, or starts
with a "left part" drawn from the rack and laid on the free squares
before the anchor. Either way the word is then extended rightwards
through the anchor, following word-graph edges for tiles already on the
board and trying rack letters on empty squares.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from movegen.board import Board, Direction
from movegen.constants import DEFAULT_MAX_STEPS, DEFAULT_TIME_LIMIT, MIN_WORD_LENGTH
from movegen.dawg import DawgNode
from movegen.dictionary import Dictionary
from movegen.move import Orientation, Placement
from movegen.rack import Rack, RackLike

log = logging.getLogger("movegen.engine")

_DEFAULT = object()


@dataclass
class SearchResult:
    """Outcome of one search call."""

    placements: set[Placement] = field(default_factory=set)
    steps: int = 0
    elapsed: float = 0.0
    truncated: bool = False  # budget ran out before the search finished


class _BudgetExhausted(Exception):
    pass


class _Budget:
    """Step counter and deadline for a single search."""

    __slots__ = ("max_steps", "deadline", "steps")

    def __init__(self, max_steps: int | None, time_limit: float | None):
        self.max_steps = max_steps
        self.deadline = None if time_limit is None else time.monotonic() + time_limit
        self.steps = 0

    def tick(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise _BudgetExhausted
        if self.deadline is not None and time.monotonic() > self.deadline:
            raise _BudgetExhausted


def _run(board: Board, pos: tuple[int, int], direction: Direction) -> tuple[str, ...]:
    """Symbols of the contiguous tiles next to *pos* in *direction*, in
    reading order."""
    letters: list[str] = []
    r, c = board.neighbor(pos, direction)
    while board.is_occupied(r, c):
        letters.append(board.letter_at(r, c))
        r, c = board.neighbor((r, c), direction)
    if direction in (Direction.LEFT, Direction.UP):
        letters.reverse()
    return tuple(letters)


class MoveGenerator:
    """Finds legal placements using anchor-based generation with
    word-graph pruning (the Appel-Jacobson algorithm).

    With ``cross_check`` on (the default) a letter may only go on a square
    if the word it forms across the main word is in the dictionary. With
    it off, only the main word is checked.

    ``max_steps`` and ``time_limit`` bound the search; when either runs
    out the placements found so far are returned.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        *,
        cross_check: bool = True,
        max_steps: int | None = DEFAULT_MAX_STEPS,
        time_limit: float | None = DEFAULT_TIME_LIMIT,
    ):
        self.dict = dictionary
        self.dawg = dictionary.dawg
        self.alphabet = dictionary.alphabet
        self.cross_check = cross_check
        self.max_steps = max_steps
        self.time_limit = time_limit

    # public API

    def generate_moves(
        self,
        board: Board,
        rack: RackLike,
        *,
        max_steps=_DEFAULT,
        time_limit=_DEFAULT,
    ) -> set[Placement]:
        """Every legal placement of tiles from *rack* on *board*."""
        return self.search(board, rack, max_steps=max_steps, time_limit=time_limit).placements

    def search(
        self,
        board: Board,
        rack: RackLike,
        *,
        max_steps=_DEFAULT,
        time_limit=_DEFAULT,
    ) -> SearchResult:
        """Like ``generate_moves`` but also reports search statistics."""
        working = Rack.coerce(rack, self.alphabet)
        if working.alphabet != self.alphabet:
            raise ValueError(f"Rack uses {working.alphabet}, dictionary uses {self.alphabet}")
        # Searches only read the graph from here on
        self.dawg.freeze()

        budget = _Budget(
            self.max_steps if max_steps is _DEFAULT else max_steps,
            self.time_limit if time_limit is _DEFAULT else time_limit,
        )
        result = SearchResult()
        t0 = time.monotonic()
        try:
            if working and self.dawg.root.edges:
                self._search_axis(board, working, Orientation.HORIZONTAL, budget, result.placements)
                self._search_axis(
                    board.transposed(), working, Orientation.VERTICAL, budget, result.placements,
                )
        except _BudgetExhausted:
            result.truncated = True
            log.warning(
                "Search budget exhausted after %d steps; returning %d placements",
                budget.steps, len(result.placements),
            )
        result.steps = budget.steps
        result.elapsed = time.monotonic() - t0
        log.debug(
            "Rack %s: %d placements in %.3fs (%d steps)",
            "".join(working.letters()), len(result.placements), result.elapsed, result.steps,
        )
        return result

    def is_valid_word(self, word: str) -> bool:
        return self.dict.is_valid(word)

    def is_legal_move(self, board: Board, placement: Placement, rack: RackLike) -> bool:
        """True if *placement* is one of the moves *rack* can make on *board*.

        Runs an unbounded search whatever the generator's budget.
        """
        word, (row, col), orientation = placement
        wanted = Placement(word.upper(), (row, col), Orientation(orientation))
        return wanted in self.generate_moves(board, rack, max_steps=None, time_limit=None)

    def find_anchors(self, board: Board) -> set[tuple[int, int]]:
        return board.anchors()

    # move generation

    def _cross_checks(
        self, view: Board, anchors: set[tuple[int, int]],
    ) -> dict[tuple[int, int], frozenset[str]]:
        """Letters allowed on each square that has tiles above or below it.

        Only anchors can have such neighbors. Squares missing from the
        result are unconstrained.
        """
        checks: dict[tuple[int, int], frozenset[str]] = {}
        for pos in anchors:
            above = _run(view, pos, Direction.UP)
            below = _run(view, pos, Direction.DOWN)
            if not above and not below:
                continue
            allowed: set[str] = set()
            node = self.dawg.state_after(above)
            if node is not None:
                for ch, child in node.edges.items():
                    end: DawgNode | None = child
                    for b in below:
                        end = end.edges.get(b)
                        if end is None:
                            break
                    if end is not None and end.is_final:
                        allowed.add(ch)
            checks[pos] = frozenset(allowed)
        return checks

    def _search_axis(
        self,
        view: Board,
        rack: Rack,
        orientation: Orientation,
        budget: _Budget,
        found: set[Placement],
    ) -> None:
        """Left-to-right search over *view*, adding placements to *found*.

        *rack* is mutated while searching and restored before returning.
        """
        anchors = view.anchors()
        checks = self._cross_checks(view, anchors) if self.cross_check else {}
        transposed = orientation is Orientation.VERTICAL

        def _extend_right(
            partial: tuple[str, ...], node: DawgNode, row: int, col: int, placed: bool,
        ) -> None:
            budget.tick()
            if not view.is_occupied(row, col):
                # End of the run: a word if at least one tile went down
                if placed and node.is_final and len(partial) >= MIN_WORD_LENGTH:
                    start = col - len(partial)
                    pos = (start, row) if transposed else (row, start)
                    found.add(Placement("".join(partial), pos, orientation))
                if not view.in_bounds(row, col):
                    return
                allowed = checks.get((row, col))
                for ch, child in node.edges.items():
                    if allowed is not None and ch not in allowed:
                        continue
                    tile = rack.take(ch)
                    if tile is None:
                        continue
                    _extend_right(partial + (ch,), child, row, col + 1, True)
                    rack.put(tile)
            else:
                # Tiles on the board are free but must follow the graph
                ch = view.letter_at(row, col)
                child = node.edges.get(ch)
                if child is not None:
                    _extend_right(partial + (ch,), child, row, col + 1, placed)

        def _extend_left(
            partial: tuple[str, ...], node: DawgNode, row: int, col: int, limit: int,
        ) -> None:
            _extend_right(partial, node, row, col, False)
            if limit > 0:
                for ch, child in node.edges.items():
                    tile = rack.take(ch)
                    if tile is None:
                        continue
                    _extend_left(partial + (ch,), child, row, col, limit - 1)
                    rack.put(tile)

        for row, col in sorted(anchors):
            left = view.neighbor((row, col), Direction.LEFT)
            if view.is_occupied(*left):
                # Continue the tiles already left of the anchor
                prefix = _run(view, (row, col), Direction.LEFT)
                node = self.dawg.state_after(prefix)
                if node is not None:
                    _extend_right(prefix, node, row, col, False)
            else:
                # Free squares before the anchor, up to the next anchor
                limit = 0
                pos = left
                while view.is_empty(*pos) and pos not in anchors:
                    limit += 1
                    pos = view.neighbor(pos, Direction.LEFT)
                _extend_left((), self.dawg.root, row, col, limit)
