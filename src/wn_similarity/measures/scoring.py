"""Scoring formulas of the information-content measures.

Each scorer receives IC(s1), IC(s2), IC(lcs) and the root frequency of
the POS, and is only called when both synset ICs are non-zero and an LCS
exists.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum

from wn_similarity.constants import ROOT_FREQUENCY_EPSILON


class MeasureKind(str, Enum):
    """Scoring formula of a similarity measure."""

    JCN = "jcn"
    LIN = "lin"
    RES = "res"


def jcn_score(ic1: float, ic2: float, ic_lcs: float, root_frequency: float) -> float:
    """Jiang-Conrath: 1 / (IC(s1) + IC(s2) - 2 * IC(lcs)).

    Jiang J. and Conrath D. 1997. Semantic similarity based on corpus
    statistics and lexical taxonomy. ROCLING X, Taiwan.

    A zero distance (maximally related synsets) scores
    1 / -ln((root - 0.01) / root), a large finite value, or 0 when the root
    frequency is too small for that. Negative distances, from inconsistent
    frequency data, are returned as negative scores.
    """
    distance = ic1 + ic2 - (2 * ic_lcs)
    if distance == 0:
        if root_frequency > ROOT_FREQUENCY_EPSILON:
            return 1 / -math.log((root_frequency - ROOT_FREQUENCY_EPSILON) / root_frequency)
        return 0.0
    return 1 / distance


def lin_score(ic1: float, ic2: float, ic_lcs: float, root_frequency: float) -> float:
    """Lin: 2 * IC(lcs) / (IC(s1) + IC(s2)).

    Lin D. 1998. An information-theoretic definition of similarity.
    ICML 15, Madison, WI.
    """
    return (2 * ic_lcs) / (ic1 + ic2)


def res_score(ic1: float, ic2: float, ic_lcs: float, root_frequency: float) -> float:
    """Resnik: IC(lcs)."""
    return ic_lcs


SCORERS: dict[MeasureKind, Callable[[float, float, float, float], float]] = {
    MeasureKind.JCN: jcn_score,
    MeasureKind.LIN: lin_score,
    MeasureKind.RES: res_score,
}
