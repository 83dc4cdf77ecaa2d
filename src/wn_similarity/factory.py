"""Construction of configured similarity measures.

Example:
    >>> measure = build_measure({
    ...     "simType": "jcn",
    ...     "infocontent": "file:data/ic-bnc-resnik-add1.dat",
    ... })
    >>> info = measure.word_similarity("dog#n", "cat#n")
    >>> info.description1, info.description2
    ('dog#n#1', 'cat#n#1')
"""

from __future__ import annotations

import logging
from pathlib import Path

from wn_similarity.cache import SimilarityCache
from wn_similarity.config import MeasureOptions, load_params
from wn_similarity.constants import PARAM_INFOCONTENT
from wn_similarity.domain_mapping import load_domain_mapping
from wn_similarity.errors import MissingParameterError
from wn_similarity.information_content import InformationContent, load_frequency_table
from wn_similarity.lcs import PathSearch
from wn_similarity.lexicon.base import LexicalDatabase
from wn_similarity.lexicon.nltk_backend import NltkWordNet
from wn_similarity.lexicon.view import LexicalView
from wn_similarity.measures.base import SimilarityMeasure
from wn_similarity.measures.registry import get_measure_constructor

logger = logging.getLogger(__name__)


def build_from_options(
    options: MeasureOptions,
    lexicon: LexicalDatabase | None = None,
) -> SimilarityMeasure:
    """Build a measure from parsed options.

    Components are set up from general to specific: cache, domain
    mappings, LCS search, information content.

    Raises:
        ConfigError: On any configuration failure; no measure is returned
    """
    constructor = get_measure_constructor(options.sim_type)

    view = LexicalView(lexicon if lexicon is not None else NltkWordNet())

    cache = SimilarityCache(options.cache_size)

    if options.mapping is not None:
        view.domain_mapping = load_domain_mapping(options.mapping, view)

    path_search = PathSearch(view, single_root=options.single_root)

    if options.infocontent is None:
        raise MissingParameterError(PARAM_INFOCONTENT, f"required by {options.sim_type}")
    table = load_frequency_table(options.infocontent, expected_version=view.version)
    information_content = InformationContent(table, view)

    measure = constructor(view, information_content, cache, path_search)
    logger.info(f"Built {measure!r}")
    return measure


def build_measure(
    params: dict[str, str],
    lexicon: LexicalDatabase | None = None,
) -> SimilarityMeasure:
    """Build a measure from string parameters.

    Args:
        params: Parameters including ``simType``; not modified
        lexicon: Lexical database, defaults to NLTK WordNet

    Raises:
        MissingParameterError: If simType or infocontent is absent
        UnknownMeasureError: If simType names no registered measure
        ICFormatError: If the frequency table is malformed
        VersionMismatchError: If the frequency table targets another WordNet version
        ConfigError: If a configured file cannot be opened
    """
    return build_from_options(MeasureOptions.from_params(params), lexicon)


def build_measure_from_file(
    location: str | Path,
    lexicon: LexicalDatabase | None = None,
) -> SimilarityMeasure:
    """Build a measure from a ``key:value`` configuration file."""
    return build_measure(load_params(location), lexicon)
