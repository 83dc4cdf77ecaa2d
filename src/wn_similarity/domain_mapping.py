"""Domain mappings: terms mapped straight to sets of synsets.

Typically used to pin domain terms to a restricted set of senses, or to map
named-entity tags to suitable synsets. File format, one term per line:

    # comment
    namperson person#n#1
    ship vessel#n#2 ship#n#1

Each target is an encoded word resolved against the lexicon when the file
is loaded; earlier lines are visible to later ones.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from wn_similarity.constants import COMMENT_PREFIX
from wn_similarity.errors import WordLookupError
from wn_similarity.lexicon.view import LexicalView
from wn_similarity.resources import open_location

logger = logging.getLogger(__name__)


class DomainMappingTable:
    """Term -> ordered, non-empty list of synsets."""

    def __init__(self) -> None:
        self._mappings: dict[str, list[Any]] = {}

    @classmethod
    def parse(cls, lines: Iterable[str], view: LexicalView) -> "DomainMappingTable":
        """Build a table from mapping-file lines.

        Lines without any target, or with a target that fails to resolve,
        are reported and skipped. Terms whose targets resolve to no synsets
        are dropped.
        """
        table = cls()
        for line_no, line in enumerate(lines, start=1):
            if line.startswith(COMMENT_PREFIX):
                continue
            fields = line.split()
            if not fields:
                continue
            if len(fields) < 2:
                logger.warning(f"Mapping line {line_no} has no targets: {line.strip()!r}")
                continue

            term, targets = fields[0], fields[1:]
            try:
                mapped = table._resolve(targets, view)
            except WordLookupError as e:
                logger.warning(f"Skipping mapping line {line_no} ({term}): {e}")
                continue

            if mapped:
                table._mappings[term] = mapped
            else:
                logger.debug(f"Mapping for {term} resolved to no synsets, dropped")

        logger.info(f"Loaded {len(table)} domain mappings")
        return table

    def _resolve(self, targets: list[str], view: LexicalView) -> list[Any]:
        mapped: dict[Any, None] = {}
        for target in targets:
            for synset in view.synsets_for(target, domain_mapping=self):
                mapped[synset] = None
        return list(mapped)

    def get(self, term: str) -> list[Any]:
        """Synsets mapped to ``term`` (empty list if unmapped)."""
        return list(self._mappings.get(term, []))

    def terms(self) -> list[str]:
        return list(self._mappings)

    def __contains__(self, term: str) -> bool:
        return term in self._mappings

    def __len__(self) -> int:
        return len(self._mappings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._mappings)


def load_domain_mapping(location: str | Path, view: LexicalView) -> DomainMappingTable:
    """Load a domain mapping file from a path, ``file:`` URI or URL.

    Raises:
        ConfigError: If the file cannot be opened or decoded
    """
    with open_location(location) as stream:
        return DomainMappingTable.parse(stream, view)
