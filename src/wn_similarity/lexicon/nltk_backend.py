"""NLTK WordNet implementation of the lexical database interface."""

from __future__ import annotations

from nltk.corpus import wordnet as wn
from nltk.corpus.reader.wordnet import Synset

from wn_similarity.constants import ADJ, POS_TAGS
from wn_similarity.lexicon.base import LexicalDatabase

# Adjective satellites live in the adjective hierarchy
ADJ_SAT = "s"


def normalize_lemma(lemma: str) -> str:
    """Lowercase and replace spaces with underscores, as WordNet stores lemmas."""
    return lemma.lower().strip().replace(" ", "_")


class NltkWordNet(LexicalDatabase):
    """Lexical database backed by ``nltk.corpus.wordnet``.

    Synset keys follow the information-content file convention: the
    database offset without zero padding followed by the POS key
    (e.g. ``"2084071n"`` for dog.n.01).

    Args:
        reader: WordNet corpus reader. Defaults to ``nltk.corpus.wordnet``.
    """

    def __init__(self, reader=None):
        self._reader = reader if reader is not None else wn

    @property
    def version(self) -> str:
        return str(self._reader.get_version())

    def lookup_all(self, lemma: str) -> list[Synset]:
        found = []
        for pos in POS_TAGS:
            found.extend(self.senses(lemma, pos))
        return found

    def senses(self, lemma: str, pos: str) -> list[Synset]:
        # wn.synsets() runs morphy; keep only senses of the exact index word
        return [entry.synset() for entry in self._reader.lemmas(normalize_lemma(lemma), pos=pos)]

    def index_lemma(self, lemma: str, pos: str) -> str | None:
        entries = self._reader.lemmas(normalize_lemma(lemma), pos=pos)
        if not entries:
            return None
        return normalize_lemma(entries[0].name())

    def hypernyms(self, synset: Synset) -> list[Synset]:
        return synset.hypernyms() + synset.instance_hypernyms()

    def pos_of(self, synset: Synset) -> str:
        pos = synset.pos()
        return ADJ if pos == ADJ_SAT else pos

    def key_of(self, synset: Synset) -> str:
        return f"{synset.offset()}{self.pos_of(synset)}"
