"""Information content derived from a corpus frequency table.

The frequency table is a text file:

    wnver::3.0
    1740n 1.5 ROOT
    2084071n 877.0
    ...

The header names the WordNet version the counts were collected against.
Each data line holds a synset key (offset + POS key), its frequency and
optionally ``ROOT``, which adds the frequency to the root total of the POS.
Reading stops at the first blank line.

IC(s) = -ln(freq(s) / freq(root of POS(s))), defined for nouns and verbs only.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from wn_similarity.constants import (
    IC_HEADER_PREFIX,
    IC_HEADER_SEPARATOR,
    IC_POS_TAGS,
    IC_ROOT_FLAG,
    NOUN,
    VERB,
)
from wn_similarity.errors import ICFormatError, VersionMismatchError
from wn_similarity.lexicon.base import VirtualRoot
from wn_similarity.lexicon.view import LexicalView
from wn_similarity.resources import open_location

logger = logging.getLogger(__name__)


def parse_header(line: str | None) -> str:
    """Extract the taxonomy version from a ``wnver::<version>`` header.

    Raises:
        ICFormatError: If the line is missing or not a version header
    """
    if line is None or not line.startswith(IC_HEADER_PREFIX):
        raise ICFormatError("Malformed InfoContent file: missing 'wnver::' header")
    return line.strip().rsplit(IC_HEADER_SEPARATOR, 1)[1]


@dataclass
class FrequencyTable:
    """Synset frequencies plus the aggregated root frequency of each POS.

    Attributes:
        version: Taxonomy version from the file header
        frequencies: Synset key -> frequency
        root_frequencies: POS key -> summed frequency of its ROOT lines
    """

    version: str
    frequencies: dict[str, float] = field(default_factory=dict)
    root_frequencies: dict[str, float] = field(
        default_factory=lambda: {NOUN: 0.0, VERB: 0.0}
    )

    @classmethod
    def parse(
        cls,
        lines: Iterable[str],
        expected_version: str | None = None,
    ) -> "FrequencyTable":
        """Build a table from the lines of a frequency file.

        Args:
            lines: Lines of the file, header first
            expected_version: Taxonomy version the header must match (skip check if None)

        Raises:
            ICFormatError: On a missing header or an unparsable data line
            VersionMismatchError: If the header names another version
        """
        it = iter(lines)
        version = parse_header(next(it, None))
        if expected_version is not None and version != expected_version:
            raise VersionMismatchError(version, expected_version)

        table = cls(version=version)
        for line_no, line in enumerate(it, start=2):
            line = line.rstrip("\r\n")
            if not line.strip():
                break

            columns = line.split()
            if len(columns) < 2:
                raise ICFormatError(f"Malformed InfoContent line {line_no}: {line!r}")
            key = columns[0]
            try:
                frequency = float(columns[1])
            except ValueError as exc:
                raise ICFormatError(
                    f"Invalid frequency on InfoContent line {line_no}: {columns[1]!r}"
                ) from exc

            table.frequencies[key] = frequency
            pos = key[-1]
            table.root_frequencies.setdefault(pos, 0.0)
            if len(columns) == 3 and columns[2] == IC_ROOT_FLAG:
                table.root_frequencies[pos] += frequency

        logger.info(
            f"Loaded {len(table.frequencies)} synset frequencies "
            f"(wnver {version}, roots: {table.root_frequencies})"
        )
        return table

    def frequency(self, key: str) -> float:
        """Frequency of a synset key, 0 if absent."""
        return self.frequencies.get(key, 0.0)

    def root_frequency(self, pos: str) -> float:
        """Aggregated root frequency of a POS, 0 if unset."""
        return self.root_frequencies.get(pos, 0.0)


def load_frequency_table(
    location: str | Path,
    expected_version: str | None = None,
) -> FrequencyTable:
    """Load a frequency table from a path, ``file:`` URI or URL.

    Raises:
        ConfigError: If the file cannot be opened or decoded
        ICFormatError: If the file is malformed
        VersionMismatchError: If the header names another version
    """
    with open_location(location) as stream:
        return FrequencyTable.parse(stream, expected_version=expected_version)


class InformationContent:
    """Information content of synsets under a frequency table.

    Args:
        table: Loaded frequency table
        view: Lexical view providing synset keys and POS
    """

    def __init__(self, table: FrequencyTable, view: LexicalView):
        self.table = table
        self.view = view

    def frequency(self, synset: Any) -> float:
        """Frequency of a synset, 0 if absent."""
        if isinstance(synset, VirtualRoot):
            return 0.0
        return self.table.frequency(self.view.key_of(synset))

    def root_frequency(self, pos: str) -> float:
        return self.table.root_frequency(pos)

    def ic(self, synset: Any) -> float:
        """Information content of a synset.

        Returns:
            -ln(p) with p = freq(synset) / freq(root), or 0 when the POS is not
            noun/verb, the synset has no (or zero) frequency, or p is not positive
        """
        pos = self.view.pos_of(synset)
        if pos not in IC_POS_TAGS:
            return 0.0

        synset_freq = self.frequency(synset)
        if synset_freq == 0:
            return 0.0

        root_freq = self.root_frequency(pos)
        if root_freq == 0:
            return 0.0

        probability = synset_freq / root_freq
        if probability > 0:
            return -math.log(probability)
        return 0.0
