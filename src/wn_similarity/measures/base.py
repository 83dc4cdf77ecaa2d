"""Similarity measure over synsets and encoded words."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from wn_similarity.cache import SimilarityCache
from wn_similarity.information_content import InformationContent
from wn_similarity.lcs import PathSearch
from wn_similarity.lexicon.view import LexicalView
from wn_similarity.measures.scoring import SCORERS, MeasureKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimilarityInfo:
    """Best-scoring synset pair for two words.

    Attributes:
        word1: First word as given (possibly encoded, e.g. "cat#n")
        synset1: Chosen synset for the first word
        description1: "lemma#pos#sense" of synset1, or word1 if not an index word
        word2: Second word as given
        synset2: Chosen synset for the second word
        description2: Description of synset2
        similarity: Similarity score of the pair
    """

    word1: str
    synset1: Any
    description1: str
    word2: str
    synset2: Any
    description2: str
    similarity: float

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "word1": self.word1,
            "sense1": self.description1,
            "word2": self.word2,
            "sense2": self.description2,
            "similarity": self.similarity,
        }

    def __str__(self) -> str:
        return f"{self.description1}  {self.description2}  {self.similarity}"


class SimilarityMeasure:
    """Information-content similarity measure.

    Built by :func:`wn_similarity.factory.build_measure`, then reused across
    many queries. Scores are cached per ordered synset pair.

    Attributes:
        kind: Scoring formula
        view: Lexical view for word resolution, keys and hypernyms
        cache: Score cache
        information_content: IC model
        path_search: LCS search (holds the single-root flag)
    """

    def __init__(
        self,
        kind: MeasureKind,
        view: LexicalView,
        information_content: InformationContent,
        cache: SimilarityCache | None = None,
        path_search: PathSearch | None = None,
    ):
        self.kind = MeasureKind(kind)
        self.view = view
        self.information_content = information_content
        self.cache = cache if cache is not None else SimilarityCache()
        self.path_search = path_search if path_search is not None else PathSearch(view)

    @property
    def name(self) -> str:
        return self.kind.value

    def synsets_for(self, word: str) -> list[Any]:
        """Synsets of an encoded word (domain mappings first)."""
        return self.view.synsets_for(word)

    def lcs(self, s1: Any, s2: Any) -> Any | None:
        """Lowest common subsumer of two synsets by information content."""
        return self.path_search.lcs_by_ic(s1, s2, self.information_content.ic)

    def synset_similarity(self, s1: Any, s2: Any) -> float:
        """Similarity between two synsets.

        Returns 0 for synsets of different POS (not cached), and for pairs
        where either IC is 0 or no LCS exists.
        """
        if self.view.pos_of(s1) != self.view.pos_of(s2):
            return 0.0

        key1 = self.view.key_of(s1)
        key2 = self.view.key_of(s2)
        cached = self.cache.lookup(key1, key2)
        if cached is not None:
            return cached

        ic = self.information_content.ic
        ic1 = ic(s1)
        ic2 = ic(s2)
        if ic1 == 0 or ic2 == 0:
            return self.cache.store(key1, key2, 0.0)

        lcs = self.lcs(s1, s2)
        if lcs is None:
            return self.cache.store(key1, key2, 0.0)

        root_frequency = self.information_content.root_frequency(self.view.pos_of(s1))
        score = SCORERS[self.kind](ic1, ic2, ic(lcs), root_frequency)
        logger.debug(f"{self.name}({key1}, {key2}) = {score} via {lcs!r}")
        return self.cache.store(key1, key2, score)

    def word_similarity(self, word1: str, word2: str) -> SimilarityInfo | None:
        """Best similarity over all sense pairs of two encoded words.

        Args:
            word1: ``lemma``, ``lemma#pos`` or ``lemma#pos#sense``
            word2: Same encoding as word1

        Returns:
            SimilarityInfo for the highest-scoring pair (first one on ties),
            None if either word has no synsets

        Raises:
            InvalidPOSTagError: If a word carries an unknown POS key
            InvalidWordError: If a word carries a non-numeric sense index
        """
        synsets1 = self.synsets_for(word1)
        synsets2 = self.synsets_for(word2)

        best: tuple[Any, Any, float] | None = None
        for s1 in synsets1:
            for s2 in synsets2:
                score = self.synset_similarity(s1, s2)
                if best is None or score > best[2]:
                    best = (s1, s2, score)

        if best is None:
            logger.debug(f"No synset pairs for {word1!r} / {word2!r}")
            return None

        s1, s2, score = best
        return SimilarityInfo(
            word1=word1,
            synset1=s1,
            description1=self.view.describe(word1, s1),
            word2=word2,
            synset2=s2,
            description2=self.view.describe(word2, s2),
            similarity=score,
        )

    def cache_stats(self) -> dict:
        return self.cache.stats()

    def __repr__(self) -> str:
        return (
            f"SimilarityMeasure(kind={self.name}, cache={self.cache.capacity}, "
            f"single_root={self.path_search.single_root})"
        )
