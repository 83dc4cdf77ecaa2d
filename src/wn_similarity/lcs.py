"""Lowest common subsumer search over the hypernym DAG.

A synset may have several hypernym parents, so it may reach the root(s)
of its hierarchy along several paths. The LCS is chosen among the
ancestors where those paths first meet, by information content rather
than by depth: corpus IC decreases towards the root, so the most
informative shared ancestor is the most specific one, and the choice
does not depend on how bushy each branch of the hierarchy is.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from wn_similarity.constants import DEFAULT_SINGLE_ROOT
from wn_similarity.lexicon.base import VirtualRoot
from wn_similarity.lexicon.view import LexicalView

logger = logging.getLogger(__name__)


def hypernym_paths(synset: Any, parents: Callable[[Any], list[Any]]) -> list[list[Any]]:
    """Enumerate every maximal root-ward path from ``synset``.

    Args:
        synset: Start node
        parents: Function returning the direct hypernyms of a node

    Returns:
        List of paths, each starting with ``synset`` and ending at a node
        without parents. A node without parents yields ``[[synset]]``.
    """
    paths: list[list[Any]] = []
    stack: list[list[Any]] = [[synset]]
    while stack:
        path = stack.pop()
        on_path = set(path)
        next_nodes = []
        for parent in parents(path[-1]):
            if parent in on_path:
                logger.debug(f"Hypernym cycle at {parent!r}, not followed")
                continue
            next_nodes.append(parent)

        if not next_nodes:
            paths.append(path)
            continue
        # Reversed so the first parent's paths come out first
        for parent in reversed(next_nodes):
            stack.append(path + [parent])
    return paths


def _first_shared(path: list[Any], other: set[Any]) -> Any | None:
    for node in path:
        if node in other:
            return node
    return None


class PathSearch:
    """LCS search for one measure.

    Args:
        view: Lexical view providing hypernym parents
        single_root: Join disconnected hierarchies with a virtual root per POS
    """

    def __init__(self, view: LexicalView, single_root: bool = DEFAULT_SINGLE_ROOT):
        self.view = view
        self.single_root = single_root
        self._roots: dict[str, VirtualRoot] = {}

    def virtual_root(self, pos: str) -> VirtualRoot:
        """The virtual root of a POS, created once per search instance."""
        root = self._roots.get(pos)
        if root is None:
            root = VirtualRoot(pos)
            self._roots[pos] = root
            logger.debug(f"Created virtual root for POS {pos}")
        return root

    def paths(self, synset: Any) -> list[list[Any]]:
        """All root-ward hypernym paths of ``synset``."""
        return hypernym_paths(synset, self.view.parents)

    def common_subsumers(self, s1: Any, s2: Any) -> list[Any]:
        """Candidate LCS nodes of two synsets.

        For every pair of paths (one per synset) the first node of each path
        that also lies on the other path is a candidate. Both directions are
        scanned since either may meet the other path first.

        Returns:
            Duplicate-free candidates in discovery order
        """
        paths1 = [(path, set(path)) for path in self.paths(s1)]
        paths2 = [(path, set(path)) for path in self.paths(s2)]

        candidates: dict[Any, None] = {}
        for path1, nodes1 in paths1:
            for path2, nodes2 in paths2:
                shared = _first_shared(path1, nodes2)
                if shared is not None:
                    candidates[shared] = None
                shared = _first_shared(path2, nodes1)
                if shared is not None:
                    candidates[shared] = None
        return list(candidates)

    def lcs_by_ic(self, s1: Any, s2: Any, ic: Callable[[Any], float]) -> Any | None:
        """Find the common ancestor of ``s1`` and ``s2`` with the highest IC.

        Ties keep the candidate found first.

        Args:
            s1: First synset
            s2: Second synset
            ic: Information content function

        Returns:
            The LCS; the virtual root of ``s1``'s POS if there is no shared
            ancestor and single_root is enabled; otherwise None
        """
        lcs = None
        best = 0.0
        for candidate in self.common_subsumers(s1, s2):
            score = ic(candidate)
            if lcs is None or score > best:
                lcs = candidate
                best = score

        if lcs is None and self.single_root:
            return self.virtual_root(self.view.pos_of(s1))
        return lcs
