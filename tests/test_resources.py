"""Tests for resolving configured locations."""

from pathlib import Path

import pytest

from wn_similarity.errors import ConfigError
from wn_similarity.resources import location_to_path, open_location


class TestLocationToPath:
    """Tests for location_to_path."""

    def test_plain_path(self):
        """Should treat a plain string as a path."""
        assert location_to_path("data/ic.dat") == Path("data/ic.dat")

    def test_path_object(self):
        """Should pass Path objects through."""
        assert location_to_path(Path("ic.dat")) == Path("ic.dat")

    def test_absolute_file_uri(self, tmp_path: Path):
        """Should convert an absolute file: URI to a path."""
        path = tmp_path / "ic.dat"
        assert location_to_path(path.as_uri()) == path

    def test_relative_file_uri(self):
        """Should keep a relative file: URI relative."""
        assert location_to_path("file:data/ic.dat") == Path("data/ic.dat")

    def test_http_url(self):
        """Should return None for non-file URLs."""
        assert location_to_path("https://example.org/ic.dat") is None


class TestOpenLocation:
    """Tests for open_location."""

    def test_reads_lines(self, tmp_path: Path):
        """Should yield the file's lines."""
        path = tmp_path / "f.txt"
        path.write_text("one\ntwo\n", encoding="utf-8")
        with open_location(str(path)) as stream:
            assert [line.rstrip("\n") for line in stream] == ["one", "two"]

    def test_missing_file(self, tmp_path: Path):
        """Should raise ConfigError for a missing file."""
        with pytest.raises(ConfigError, match="Cannot open"):
            with open_location(tmp_path / "missing.txt"):
                pass
