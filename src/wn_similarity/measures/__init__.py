"""Similarity measures.

Main components:
- SimilarityMeasure: Cached IC-based measure over synsets and encoded words
- SimilarityInfo: Best-scoring sense pair for two words
- MeasureKind: Jiang-Conrath, Lin or Resnik scoring
- Registry: name -> constructor lookup used by the factory
"""

from wn_similarity.measures.base import SimilarityInfo, SimilarityMeasure
from wn_similarity.measures.registry import (
    available_measures,
    get_measure_constructor,
    register_measure,
)
from wn_similarity.measures.scoring import (
    SCORERS,
    MeasureKind,
    jcn_score,
    lin_score,
    res_score,
)

__all__ = [
    "SimilarityInfo",
    "SimilarityMeasure",
    "MeasureKind",
    "SCORERS",
    "jcn_score",
    "lin_score",
    "res_score",
    "available_measures",
    "get_measure_constructor",
    "register_measure",
]
