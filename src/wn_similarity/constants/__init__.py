"""Constants package: defaults, configuration keys and file-format tokens."""

from .defaults import (
    CACHE_KEY_SEPARATOR,
    DEFAULT_CACHE_SIZE,
    DEFAULT_SINGLE_ROOT,
    ENCODING_UTF8,
    ROOT_FREQUENCY_EPSILON,
)
from .files import (
    COMMENT_PREFIX,
    IC_HEADER_PREFIX,
    IC_HEADER_SEPARATOR,
    IC_ROOT_FLAG,
    WORD_FIELD_SEPARATOR,
)
from .params import (
    ENV_CONFIG,
    ENV_LOG_LEVEL,
    PARAM_CACHE,
    PARAM_INFOCONTENT,
    PARAM_MAPPING,
    PARAM_ROOT,
    PARAM_SIM_TYPE,
)
from .pos import ADJ, ADV, IC_POS_TAGS, NOUN, POS_TAGS, VERB

__all__ = [
    # Defaults
    "CACHE_KEY_SEPARATOR",
    "DEFAULT_CACHE_SIZE",
    "DEFAULT_SINGLE_ROOT",
    "ENCODING_UTF8",
    "ROOT_FREQUENCY_EPSILON",
    # File formats
    "COMMENT_PREFIX",
    "IC_HEADER_PREFIX",
    "IC_HEADER_SEPARATOR",
    "IC_ROOT_FLAG",
    "WORD_FIELD_SEPARATOR",
    # Parameters
    "ENV_CONFIG",
    "ENV_LOG_LEVEL",
    "PARAM_CACHE",
    "PARAM_INFOCONTENT",
    "PARAM_MAPPING",
    "PARAM_ROOT",
    "PARAM_SIM_TYPE",
    # POS
    "ADJ",
    "ADV",
    "IC_POS_TAGS",
    "NOUN",
    "POS_TAGS",
    "VERB",
]
