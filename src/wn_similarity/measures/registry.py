"""Registry of similarity measures by name.

Measures are looked up by the ``simType`` configuration value. Names are
matched exactly first, then case-insensitively. The fully qualified class
names used by older configuration files are registered as aliases.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from wn_similarity.cache import SimilarityCache
from wn_similarity.errors import UnknownMeasureError
from wn_similarity.information_content import InformationContent
from wn_similarity.lcs import PathSearch
from wn_similarity.lexicon.view import LexicalView
from wn_similarity.measures.base import SimilarityMeasure
from wn_similarity.measures.scoring import MeasureKind

logger = logging.getLogger(__name__)

MeasureConstructor = Callable[
    [LexicalView, InformationContent, SimilarityCache, PathSearch], SimilarityMeasure
]

_REGISTRY: dict[str, MeasureConstructor] = {}


def register_measure(name: str, constructor: MeasureConstructor, *aliases: str) -> None:
    """Register a measure constructor under a name and optional aliases."""
    for key in (name, *aliases):
        if key in _REGISTRY and _REGISTRY[key] is not constructor:
            logger.warning(f"Replacing registered similarity measure {key!r}")
        _REGISTRY[key] = constructor


def get_measure_constructor(name: str) -> MeasureConstructor:
    """Look up a measure constructor.

    Raises:
        UnknownMeasureError: If no measure is registered under ``name``
    """
    constructor = _REGISTRY.get(name)
    if constructor is not None:
        return constructor

    lowered = name.lower()
    for key, candidate in _REGISTRY.items():
        if key.lower() == lowered:
            return candidate
    raise UnknownMeasureError(name, available_measures())


def available_measures() -> list[str]:
    """All registered names and aliases, sorted."""
    return sorted(_REGISTRY)


def jiang_conrath(view, information_content, cache, path_search) -> SimilarityMeasure:
    return SimilarityMeasure(MeasureKind.JCN, view, information_content, cache, path_search)


def lin(view, information_content, cache, path_search) -> SimilarityMeasure:
    return SimilarityMeasure(MeasureKind.LIN, view, information_content, cache, path_search)


def resnik(view, information_content, cache, path_search) -> SimilarityMeasure:
    return SimilarityMeasure(MeasureKind.RES, view, information_content, cache, path_search)


register_measure(MeasureKind.JCN.value, jiang_conrath, "JCn", "shef.nlp.wordnet.similarity.JCn")
register_measure(MeasureKind.LIN.value, lin, "Lin", "shef.nlp.wordnet.similarity.Lin")
register_measure(MeasureKind.RES.value, resnik, "Resnik")
