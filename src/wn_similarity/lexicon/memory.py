"""In-memory taxonomy for small hand-built hierarchies."""

from __future__ import annotations

from dataclasses import dataclass

from wn_similarity.constants import POS_TAGS
from wn_similarity.lexicon.base import LexicalDatabase


@dataclass(frozen=True)
class InMemorySynset:
    """A synset of an :class:`InMemoryLexicon`.

    Attributes:
        key: Identity key, unique within the POS (e.g. "1740n")
        pos: POS key
    """

    key: str
    pos: str

    def __repr__(self) -> str:
        return f"InMemorySynset('{self.key}')"


class InMemoryLexicon(LexicalDatabase):
    """Lexical database holding its taxonomy in dictionaries.

    Parents must be added before their children. Lemmas listed for a synset
    become senses of that lemma in insertion order.

    Example:
        >>> lex = InMemoryLexicon(version="3.0")
        >>> entity = lex.add_synset("1740n", "n", lemmas=["entity"])
        >>> cat = lex.add_synset("2121620n", "n", parents=[entity], lemmas=["cat"])
        >>> lex.senses("cat", "n")
        [InMemorySynset('2121620n')]
    """

    def __init__(self, version: str = "3.0"):
        self._version = version
        self._parents: dict[InMemorySynset, list[InMemorySynset]] = {}
        self._index: dict[tuple[str, str], list[InMemorySynset]] = {}

    @property
    def version(self) -> str:
        return self._version

    def add_synset(
        self,
        key: str,
        pos: str,
        parents: list[InMemorySynset] | tuple = (),
        lemmas: list[str] | tuple = (),
    ) -> InMemorySynset:
        """Create a synset and register it under its lemmas.

        Raises:
            ValueError: If the POS is unknown, the key is taken, or a parent
                is missing or belongs to another POS
        """
        if pos not in POS_TAGS:
            raise ValueError(f"Unknown POS: {pos}")
        synset = InMemorySynset(key, pos)
        if synset in self._parents:
            raise ValueError(f"Synset already exists: {key}")
        for parent in parents:
            if parent not in self._parents:
                raise ValueError(f"Unknown parent synset: {parent.key}")
            if parent.pos != pos:
                raise ValueError(f"Parent {parent.key} is not a {pos} synset")

        self._parents[synset] = list(parents)
        for lemma in lemmas:
            self._index.setdefault((lemma.lower(), pos), []).append(synset)
        return synset

    def lookup_all(self, lemma: str) -> list[InMemorySynset]:
        found = []
        for pos in POS_TAGS:
            found.extend(self.senses(lemma, pos))
        return found

    def senses(self, lemma: str, pos: str) -> list[InMemorySynset]:
        return list(self._index.get((lemma.lower(), pos), []))

    def index_lemma(self, lemma: str, pos: str) -> str | None:
        if (lemma.lower(), pos) in self._index:
            return lemma.lower()
        return None

    def hypernyms(self, synset: InMemorySynset) -> list[InMemorySynset]:
        return list(self._parents.get(synset, []))

    def pos_of(self, synset: InMemorySynset) -> str:
        return synset.pos

    def key_of(self, synset: InMemorySynset) -> str:
        return synset.key
