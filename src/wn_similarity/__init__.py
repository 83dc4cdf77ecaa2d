"""WordNet similarity measures based on information content.

Main components:
- build_measure / build_measure_from_file: Configure a measure from parameters
- SimilarityMeasure: Jiang-Conrath, Lin and Resnik scoring with a bounded cache
- SimilarityInfo: Best-scoring sense pair for two words
- LexicalView / NltkWordNet / InMemoryLexicon: Access to the taxonomy
- FrequencyTable / InformationContent: IC from corpus frequencies
- PathSearch: Lowest common subsumer search over the hypernym DAG
"""

from wn_similarity.cache import SimilarityCache
from wn_similarity.config import MeasureOptions, load_params, parse_params
from wn_similarity.domain_mapping import DomainMappingTable, load_domain_mapping
from wn_similarity.errors import (
    ConfigError,
    ICFormatError,
    InvalidParameterError,
    InvalidPOSTagError,
    InvalidWordError,
    MissingParameterError,
    SimilarityError,
    UnknownMeasureError,
    VersionMismatchError,
    WordLookupError,
)
from wn_similarity.factory import build_from_options, build_measure, build_measure_from_file
from wn_similarity.information_content import (
    FrequencyTable,
    InformationContent,
    load_frequency_table,
)
from wn_similarity.lcs import PathSearch, hypernym_paths
from wn_similarity.lexicon import (
    InMemoryLexicon,
    LexicalDatabase,
    LexicalView,
    NltkWordNet,
    VirtualRoot,
)
from wn_similarity.measures import (
    MeasureKind,
    SimilarityInfo,
    SimilarityMeasure,
    available_measures,
    register_measure,
)

__version__ = "0.1.0"

__all__ = [
    # Factory & config
    "build_measure",
    "build_measure_from_file",
    "build_from_options",
    "MeasureOptions",
    "load_params",
    "parse_params",
    # Measures
    "MeasureKind",
    "SimilarityInfo",
    "SimilarityMeasure",
    "available_measures",
    "register_measure",
    # Components
    "SimilarityCache",
    "DomainMappingTable",
    "load_domain_mapping",
    "FrequencyTable",
    "InformationContent",
    "load_frequency_table",
    "PathSearch",
    "hypernym_paths",
    # Lexicon
    "LexicalDatabase",
    "LexicalView",
    "InMemoryLexicon",
    "NltkWordNet",
    "VirtualRoot",
    # Errors
    "SimilarityError",
    "ConfigError",
    "MissingParameterError",
    "InvalidParameterError",
    "ICFormatError",
    "VersionMismatchError",
    "UnknownMeasureError",
    "WordLookupError",
    "InvalidPOSTagError",
    "InvalidWordError",
]
