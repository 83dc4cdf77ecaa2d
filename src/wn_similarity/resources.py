"""Opening configured files given as paths, ``file:`` URIs or URLs."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname, urlopen

from wn_similarity.constants import ENCODING_UTF8
from wn_similarity.errors import ConfigError

logger = logging.getLogger(__name__)


def location_to_path(location: str | Path) -> Path | None:
    """Return the local path for a plain path or ``file:`` URI, None for other URLs."""
    if isinstance(location, Path):
        return location

    parsed = urlparse(location)
    if parsed.scheme == "file":
        # "file:relative/name" has no netloc and a relative path
        if parsed.netloc or parsed.path.startswith("/"):
            return Path(url2pathname(parsed.path))
        return Path(location[len("file:"):])
    # Single letters are Windows drive letters, not URL schemes
    if len(parsed.scheme) <= 1:
        return Path(location)
    return None


@contextmanager
def open_location(location: str | Path, encoding: str = ENCODING_UTF8) -> Iterator[io.TextIOBase]:
    """Open a configured resource for reading text.

    Args:
        location: Filesystem path, ``file:`` URI or any URL urllib can open
        encoding: Text encoding

    Yields:
        Text stream over the resource

    Raises:
        ConfigError: If the resource cannot be opened or decoded
    """
    path = location_to_path(location)
    try:
        if path is not None:
            stream = open(path, encoding=encoding)
        else:
            stream = io.TextIOWrapper(urlopen(str(location)), encoding=encoding)
    except OSError as exc:
        raise ConfigError(f"Cannot open {location}: {exc}") from exc

    logger.debug(f"Opened {location}")
    with stream:
        try:
            yield stream
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Failed to decode {location} with encoding {encoding}") from exc
