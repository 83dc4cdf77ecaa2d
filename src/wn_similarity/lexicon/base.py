"""Abstract interface to the lexical database behind the measures.

The measures only need a handful of primitives from the taxonomy: the
identity key and POS of a synset, its direct hypernym parents, and the
ordered senses of an index word. Any backend providing those can be
plugged in (NLTK WordNet, an in-memory taxonomy, ...).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class VirtualRoot:
    """Synthesized ancestor joining every hierarchy of one POS.

    Attributes:
        pos: POS key of the hierarchy this root sits on top of
    """

    pos: str

    @property
    def key(self) -> str:
        """Offset-style key of the root (offset 0)."""
        return f"0{self.pos}"

    def __repr__(self) -> str:
        return f"VirtualRoot('{self.pos}')"


class LexicalDatabase(ABC):
    """Abstract base class for lexical database backends.

    Synsets are opaque objects owned by the backend; they must be hashable
    and compare equal when they denote the same concept.
    """

    @property
    @abstractmethod
    def version(self) -> str:
        """Version of the taxonomy, checked against frequency-table headers."""
        pass

    @abstractmethod
    def lookup_all(self, lemma: str) -> list[Any]:
        """Return every sense of every index word matching ``lemma``, across all POS."""
        pass

    @abstractmethod
    def senses(self, lemma: str, pos: str) -> list[Any]:
        """Return the ordered senses of the index word ``lemma`` under ``pos``.

        Returns:
            List of synsets (sense 1 first), empty if there is no such index word
        """
        pass

    @abstractmethod
    def index_lemma(self, lemma: str, pos: str) -> str | None:
        """Return the canonical lemma of the index word, or None if absent."""
        pass

    @abstractmethod
    def hypernyms(self, synset: Any) -> list[Any]:
        """Return the direct hypernym parents of ``synset``."""
        pass

    @abstractmethod
    def pos_of(self, synset: Any) -> str:
        """Return the POS key ('n', 'v', 'a', 'r') of ``synset``."""
        pass

    @abstractmethod
    def key_of(self, synset: Any) -> str:
        """Return the identity key of ``synset``, unique within its POS."""
        pass
