"""Resolution of encoded words to synsets.

Words may be given as ``lemma``, ``lemma#pos`` or ``lemma#pos#sense``
(sense index 1-based), e.g. ``cat#n#1`` for the first noun sense of cat.
Terms listed in a domain mapping table bypass the lexical lookup.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from wn_similarity.constants import POS_TAGS, WORD_FIELD_SEPARATOR
from wn_similarity.errors import InvalidPOSTagError, InvalidWordError
from wn_similarity.lexicon.base import LexicalDatabase, VirtualRoot

if TYPE_CHECKING:
    from wn_similarity.domain_mapping import DomainMappingTable

logger = logging.getLogger(__name__)


def _unique(synsets: list[Any]) -> list[Any]:
    """Drop duplicates while keeping the first occurrence order."""
    return list(dict.fromkeys(synsets))


class LexicalView:
    """Facade over a lexical database used by the similarity measures.

    Attributes:
        database: Backing lexical database
        domain_mapping: Optional table of terms mapped to explicit synsets
    """

    def __init__(
        self,
        database: LexicalDatabase,
        domain_mapping: DomainMappingTable | None = None,
    ):
        self.database = database
        self.domain_mapping = domain_mapping

    @property
    def version(self) -> str:
        return self.database.version

    def synsets_for(
        self,
        word: str,
        domain_mapping: DomainMappingTable | None = None,
    ) -> list[Any]:
        """Find the synsets denoted by an encoded word.

        Args:
            word: ``lemma``, ``lemma#pos`` or ``lemma#pos#sense``
            domain_mapping: Table to consult instead of ``self.domain_mapping``

        Returns:
            Duplicate-free list of synsets, in lexicon order. Empty if the
            word (or the requested sense) is unknown.

        Raises:
            InvalidPOSTagError: If the POS key is not one of n, v, a, r
            InvalidWordError: If the sense index is not an integer
        """
        mapping = domain_mapping if domain_mapping is not None else self.domain_mapping
        # Trailing empty fields are ignored, so "cat#" is the bare word "cat"
        fields = word.rstrip(WORD_FIELD_SEPARATOR).split(WORD_FIELD_SEPARATOR)
        lemma = fields[0]

        if mapping is not None and lemma in mapping:
            return list(mapping.get(lemma))

        if len(fields) == 1:
            return _unique(self.database.lookup_all(lemma))

        pos = fields[1]
        if pos not in POS_TAGS:
            raise InvalidPOSTagError(pos)

        senses = self.database.senses(lemma, pos)
        if len(fields) == 2:
            return _unique(senses)

        try:
            index = int(fields[2])
        except ValueError as exc:
            raise InvalidWordError(f"Invalid sense index in {word!r}: {fields[2]}") from exc

        if index < 1 or index > len(senses):
            logger.debug(f"{word}: sense {index} out of range (1..{len(senses)})")
            return []
        return [senses[index - 1]]

    def parents(self, synset: Any) -> list[Any]:
        """Direct hypernym parents; a virtual root has none."""
        if isinstance(synset, VirtualRoot):
            return []
        return self.database.hypernyms(synset)

    def pos_of(self, synset: Any) -> str:
        if isinstance(synset, VirtualRoot):
            return synset.pos
        return self.database.pos_of(synset)

    def key_of(self, synset: Any) -> str:
        if isinstance(synset, VirtualRoot):
            return synset.key
        return self.database.key_of(synset)

    def sense_number(self, lemma: str, synset: Any) -> int:
        """1-based position of ``synset`` among the senses of ``lemma``, or -1."""
        senses = self.database.senses(lemma, self.pos_of(synset))
        for i, sense in enumerate(senses, start=1):
            if sense == synset:
                return i
        return -1

    def describe(self, word: str, synset: Any) -> str:
        """Human-readable ``lemma#pos#sense`` description of a chosen synset.

        Falls back to the word as given when the lemma has no index entry
        under the synset's POS (e.g. domain-mapped terms).
        """
        if isinstance(synset, VirtualRoot):
            return word
        lemma = word.split(WORD_FIELD_SEPARATOR)[0]
        pos = self.pos_of(synset)
        index_lemma = self.database.index_lemma(lemma, pos)
        if index_lemma is None:
            return word
        return f"{index_lemma}#{pos}#{self.sense_number(lemma, synset)}"
