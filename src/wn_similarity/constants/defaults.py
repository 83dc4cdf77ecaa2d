"""Default values for measures and caching."""

# File encoding
ENCODING_UTF8 = "utf-8"

# Maximum number of cached similarity scores; negative means unbounded
DEFAULT_CACHE_SIZE = 5000

# Join disconnected hierarchies with a virtual root per POS
DEFAULT_SINGLE_ROOT = True

# Joins the two synset keys of a cache entry ("1740n-2084071n")
CACHE_KEY_SEPARATOR = "-"

# Jiang-Conrath substitutes 1 / -ln((root - eps) / root) for a zero distance
ROOT_FREQUENCY_EPSILON = 0.01
