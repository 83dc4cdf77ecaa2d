"""Measure configuration.

Parameters are string key/value pairs, usually read from a config file
with one ``key:value`` pair per line:

    simType:jcn
    infocontent:file:data/ic-bnc-resnik-add1.dat
    mapping:file:data/domain_independent.txt
    cache:5000
    root:true

Keys are consumed in a fixed order (simType, cache, mapping, root,
infocontent); anything left over is kept but otherwise ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from wn_similarity.constants import (
    DEFAULT_CACHE_SIZE,
    DEFAULT_SINGLE_ROOT,
    PARAM_CACHE,
    PARAM_INFOCONTENT,
    PARAM_MAPPING,
    PARAM_ROOT,
    PARAM_SIM_TYPE,
)
from wn_similarity.errors import InvalidParameterError, MissingParameterError
from wn_similarity.resources import open_location

logger = logging.getLogger(__name__)


def parse_bool(value: str) -> bool:
    """Only "true" (any case) is true, as in Java's Boolean.parseBoolean."""
    return value.strip().lower() == "true"


def parse_params(lines: Iterable[str]) -> dict[str, str]:
    """Parse ``key:value`` lines into a dict.

    The line is split at the first colon, so values may contain colons
    (e.g. ``file:`` URIs). Blank lines are skipped; lines without a colon
    are reported and skipped.
    """
    params: dict[str, str] = {}
    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        key, sep, value = line.partition(":")
        if not sep:
            logger.warning(f"Config line {line_no} is malformed: {line!r}")
            continue
        params[key.strip()] = value.strip()
    return params


def load_params(location: str | Path) -> dict[str, str]:
    """Read configuration parameters from a path, ``file:`` URI or URL.

    Raises:
        ConfigError: If the file cannot be opened or decoded
    """
    with open_location(location) as stream:
        return parse_params(stream)


@dataclass
class MeasureOptions:
    """All options of a measure, gathered in one pass over the parameters.

    Attributes:
        sim_type: Registered measure name
        cache_size: Cache capacity, negative for unbounded
        mapping: Location of the domain mapping file
        single_root: Join hierarchies with a virtual root per POS
        infocontent: Location of the frequency table
        extra: Parameters no layer recognized
    """

    sim_type: str
    cache_size: int = DEFAULT_CACHE_SIZE
    mapping: str | None = None
    single_root: bool = DEFAULT_SINGLE_ROOT
    infocontent: str | None = None
    extra: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_params(cls, params: dict[str, str]) -> "MeasureOptions":
        """Consume known keys from a copy of ``params``.

        Raises:
            MissingParameterError: If simType is absent
            InvalidParameterError: If cache is not an integer
        """
        remaining = dict(params)

        sim_type = remaining.pop(PARAM_SIM_TYPE, None)
        if not sim_type:
            raise MissingParameterError(PARAM_SIM_TYPE, "must specify the similarity measure to use")

        options = cls(sim_type=sim_type)

        cache_size = remaining.pop(PARAM_CACHE, None)
        if cache_size is not None:
            try:
                options.cache_size = int(cache_size)
            except ValueError as exc:
                raise InvalidParameterError(
                    f"Parameter {PARAM_CACHE} must be an integer, got {cache_size!r}"
                ) from exc

        options.mapping = remaining.pop(PARAM_MAPPING, None)

        root = remaining.pop(PARAM_ROOT, None)
        if root is not None:
            options.single_root = parse_bool(root)

        options.infocontent = remaining.pop(PARAM_INFOCONTENT, None)

        if remaining:
            logger.debug(f"Ignoring unrecognized parameters: {sorted(remaining)}")
        options.extra = remaining
        return options
