"""Lexical database adapters.

Main components:
- LexicalDatabase: Abstract backend interface (identity, POS, hypernyms, senses)
- NltkWordNet: Backend over nltk.corpus.wordnet
- InMemoryLexicon: Backend over a hand-built taxonomy
- LexicalView: Encoded-word resolution with domain-mapping precedence
- VirtualRoot: Synthesized per-POS root node
"""

from wn_similarity.lexicon.base import LexicalDatabase, VirtualRoot
from wn_similarity.lexicon.memory import InMemoryLexicon, InMemorySynset
from wn_similarity.lexicon.nltk_backend import NltkWordNet
from wn_similarity.lexicon.view import LexicalView

__all__ = [
    "LexicalDatabase",
    "VirtualRoot",
    "InMemoryLexicon",
    "InMemorySynset",
    "NltkWordNet",
    "LexicalView",
]
