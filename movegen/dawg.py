"""Directed acyclic word graph for word and prefix-state lookups.

Words are inserted into a plain trie. ``Dawg.minimize()`` then merges
structurally equal sub-graphs so that common suffixes share states, and
freezes the graph: from that point on it is a read-only acceptor that
any number of searches may walk at the same time.
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

log = logging.getLogger("movegen")


class DawgNode:
    """Single state in the word graph."""

    __slots__ = ("edges", "is_final")

    def __init__(self):
        self.edges: dict[str, DawgNode] = {}
        self.is_final: bool = False

    def __repr__(self) -> str:
        final = " final" if self.is_final else ""
        return f"<DawgNode {''.join(sorted(self.edges))}{final}>"


class Dawg:
    """Deterministic acyclic acceptor over words."""

    def __init__(self):
        self.root = DawgNode()
        self._count = 0
        self._frozen = False

    # construction

    def insert(self, word: str | Sequence[str]) -> bool:
        """Add *word*, given as a string or as a sequence of tile symbols.

        Returns False if the graph is frozen and the word was dropped.
        """
        if not word:
            raise ValueError("Cannot insert an empty word")
        if self._frozen:
            log.warning("Ignoring insert of %r into a frozen word graph", "".join(word))
            return False
        node = self.root
        for ch in word:
            child = node.edges.get(ch)
            if child is None:
                child = node.edges[ch] = DawgNode()
            node = child
        if not node.is_final:
            node.is_final = True
            self._count += 1
        return True

    def freeze(self) -> None:
        """End the construction phase; later inserts have no effect."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def minimize(self) -> int:
        """Share equivalent sub-graphs and freeze the graph.

        Two states are equivalent when they agree on finality and their
        edges lead, letter by letter, to the same canonical states.
        Returns the number of states removed.
        """
        if self._frozen:
            return 0
        before = self.node_count()
        registry: dict[tuple, DawgNode] = {}

        def _canonical(node: DawgNode) -> DawgNode:
            for ch, child in node.edges.items():
                node.edges[ch] = _canonical(child)
            key = (
                node.is_final,
                tuple(sorted((ch, id(child)) for ch, child in node.edges.items())),
            )
            return registry.setdefault(key, node)

        self.root = _canonical(self.root)
        self._frozen = True
        removed = before - self.node_count()
        log.debug("Minimized word graph: %d -> %d states", before, before - removed)
        return removed

    # queries

    def is_word(self, word: str | Sequence[str]) -> bool:
        node = self.state_after(word)
        return node is not None and node.is_final

    def state_after(self, prefix: str | Sequence[str]) -> DawgNode | None:
        """State reached by *prefix*, or None if the graph has no such path.

        The empty prefix reaches the root.
        """
        node = self.root
        for ch in prefix:
            node = node.edges.get(ch)
            if node is None:
                return None
        return node

    def edges(self, prefix: str | Sequence[str]) -> frozenset[str] | None:
        """Letters that may follow *prefix*, or None for an unknown prefix."""
        node = self.state_after(prefix)
        if node is None:
            return None
        return frozenset(node.edges)

    def words(self) -> Iterator[str]:
        """All accepted words in sorted order."""
        stack: list[tuple[DawgNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_final:
                yield prefix
            # Reverse so that the smallest letter is popped first
            for ch in sorted(node.edges, reverse=True):
                stack.append((node.edges[ch], prefix + ch))

    def node_count(self) -> int:
        """Number of distinct states reachable from the root."""
        seen: set[int] = set()
        stack = [self.root]
        while stack:
            node = stack.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            stack.extend(node.edges.values())
        return len(seen)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_word(word)

    def __len__(self) -> int:
        return self._count
