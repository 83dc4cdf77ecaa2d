"""Exception taxonomy for similarity measures.

Configuration problems are fatal and surface when a measure is built.
Lookup problems surface per call and leave the measure usable.
"""

from __future__ import annotations


class SimilarityError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(SimilarityError, ValueError):
    """Raised when a measure cannot be configured."""


class MissingParameterError(ConfigError):
    """Raised when a required configuration parameter is absent."""

    def __init__(self, key: str, reason: str = "") -> None:
        self.key = key
        message = f"Missing required parameter: {key}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidParameterError(ConfigError):
    """Raised when a configuration parameter has an unusable value."""


class ICFormatError(ConfigError):
    """Raised when a frequency table is malformed."""


class VersionMismatchError(ConfigError):
    """Raised when a frequency table was built for another taxonomy version."""

    def __init__(self, table_version: str, lexicon_version: str) -> None:
        self.table_version = table_version
        self.lexicon_version = lexicon_version
        super().__init__(
            f"InfoContent file version {table_version!r} doesn't match "
            f"WordNet version {lexicon_version!r}"
        )


class UnknownMeasureError(ConfigError):
    """Raised when no measure is registered under the requested name."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        message = f"Unknown similarity measure: {name}"
        if available:
            message = f"{message}. Available: {available}"
        super().__init__(message)


class WordLookupError(SimilarityError, LookupError):
    """Raised when an encoded word cannot be resolved."""


class InvalidPOSTagError(WordLookupError):
    """Raised when an encoded word carries an unknown POS key."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Invalid POS Tag: {tag}")


class InvalidWordError(WordLookupError):
    """Raised when an encoded word is malformed (e.g. a non-numeric sense index)."""
