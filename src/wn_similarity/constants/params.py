"""Configuration parameter keys and environment variables."""

# Measure parameters, in the order they are consumed
PARAM_SIM_TYPE = "simType"
PARAM_CACHE = "cache"
PARAM_MAPPING = "mapping"
PARAM_ROOT = "root"
PARAM_INFOCONTENT = "infocontent"

# Environment variables read by the CLI
ENV_CONFIG = "WN_SIMILARITY_CONFIG"
ENV_LOG_LEVEL = "WN_SIMILARITY_LOG_LEVEL"
