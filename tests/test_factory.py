"""Tests for building measures from parameters."""

import math
from pathlib import Path

import pytest

from wn_similarity.errors import (
    ConfigError,
    ICFormatError,
    MissingParameterError,
    UnknownMeasureError,
    VersionMismatchError,
)
from wn_similarity.factory import build_measure, build_measure_from_file
from wn_similarity.lexicon import InMemoryLexicon
from wn_similarity.measures import MeasureKind, SimilarityMeasure
from wn_similarity.measures.registry import (
    available_measures,
    get_measure_constructor,
    register_measure,
)


class TestRegistry:
    """Tests for the measure registry."""

    def test_builtin_names(self):
        """Should register the built-in names and aliases."""
        names = available_measures()
        for name in ("jcn", "lin", "res", "JCn", "Lin", "Resnik"):
            assert name in names

    def test_legacy_class_names(self):
        """Should map legacy class names to the same constructors."""
        assert get_measure_constructor("shef.nlp.wordnet.similarity.JCn") is get_measure_constructor("jcn")
        assert get_measure_constructor("shef.nlp.wordnet.similarity.Lin") is get_measure_constructor("lin")

    def test_case_insensitive(self):
        """Should match names case-insensitively."""
        assert get_measure_constructor("LIN") is get_measure_constructor("lin")

    def test_unknown(self):
        """Should list the available names for an unknown measure."""
        with pytest.raises(UnknownMeasureError) as exc_info:
            get_measure_constructor("path")
        assert exc_info.value.name == "path"
        assert "jcn" in str(exc_info.value)

    def test_register_custom(self, lexicon: InMemoryLexicon, ic_file: Path):
        """Should build measures registered at runtime."""
        built = []

        def custom(view, information_content, cache, path_search):
            measure = SimilarityMeasure(MeasureKind.LIN, view, information_content, cache, path_search)
            built.append(measure)
            return measure

        register_measure("test-custom-lin", custom)
        measure = build_measure({"simType": "test-custom-lin", "infocontent": str(ic_file)}, lexicon)
        assert built == [measure]


class TestBuildMeasure:
    """Tests for build_measure."""

    def test_builds_configured_measure(self, lexicon: InMemoryLexicon, ic_file: Path):
        """Should apply kind, cache size and root flag."""
        params = {"simType": "jcn", "infocontent": str(ic_file), "cache": "10", "root": "false"}
        measure = build_measure(params, lexicon)

        assert measure.kind == MeasureKind.JCN
        assert measure.cache.capacity == 10
        assert measure.path_search.single_root is False
        assert measure.view.domain_mapping is None

    def test_end_to_end_lin(self, lexicon: InMemoryLexicon, ic_file: Path):
        """Should score cat and dog with Lin from a file: URI table."""
        measure = build_measure({"simType": "Lin", "infocontent": ic_file.as_uri()}, lexicon)
        info = measure.word_similarity("cat#n", "dog#n")
        expected = (2 * -math.log(50 / 1000)) / (2 * -math.log(5 / 1000))
        assert info.similarity == pytest.approx(expected)
        assert str(info).startswith("cat#n#1  dog#n#1  ")

    def test_domain_mapping(self, lexicon: InMemoryLexicon, ic_file: Path, tmp_path: Path):
        """Should load and install the configured domain mapping."""
        mapping = tmp_path / "mapping.txt"
        mapping.write_text("# entities\nnamperson cat#n#1\n", encoding="utf-8")
        params = {"simType": "lin", "infocontent": str(ic_file), "mapping": str(mapping)}

        measure = build_measure(params, lexicon)
        assert "namperson" in measure.view.domain_mapping
        info = measure.word_similarity("namperson", "namperson")
        assert info.similarity == pytest.approx(1.0)

    def test_unknown_keys_ignored(self, lexicon: InMemoryLexicon, ic_file: Path):
        """Should ignore unrecognized keys."""
        measure = build_measure({"simType": "res", "infocontent": str(ic_file), "foo": "bar"}, lexicon)
        assert measure.kind == MeasureKind.RES

    def test_missing_sim_type(self, lexicon: InMemoryLexicon, ic_file: Path):
        """Should require simType."""
        with pytest.raises(MissingParameterError):
            build_measure({"infocontent": str(ic_file)}, lexicon)

    def test_unknown_measure(self, lexicon: InMemoryLexicon, ic_file: Path):
        """Should reject an unregistered measure name."""
        with pytest.raises(UnknownMeasureError):
            build_measure({"simType": "shef.nlp.wordnet.similarity.Path", "infocontent": str(ic_file)}, lexicon)

    def test_missing_infocontent(self, lexicon: InMemoryLexicon):
        """Should require an infocontent location."""
        with pytest.raises(MissingParameterError) as exc_info:
            build_measure({"simType": "jcn"}, lexicon)
        assert exc_info.value.key == "infocontent"

    def test_version_mismatch(self, ic_file: Path):
        """Should reject a table built for another WordNet version."""
        lexicon = InMemoryLexicon(version="2.1")
        with pytest.raises(VersionMismatchError):
            build_measure({"simType": "jcn", "infocontent": str(ic_file)}, lexicon)

    def test_malformed_ic_file(self, lexicon: InMemoryLexicon, tmp_path: Path):
        """Should reject a table without a header."""
        path = tmp_path / "bad.dat"
        path.write_text("1740n 1000 ROOT\n", encoding="utf-8")
        with pytest.raises(ICFormatError):
            build_measure({"simType": "jcn", "infocontent": str(path)}, lexicon)

    def test_missing_mapping_file(self, lexicon: InMemoryLexicon, ic_file: Path, tmp_path: Path):
        """Should raise ConfigError for a missing mapping file."""
        params = {"simType": "jcn", "infocontent": str(ic_file), "mapping": str(tmp_path / "nope.txt")}
        with pytest.raises(ConfigError):
            build_measure(params, lexicon)

    def test_params_not_modified(self, lexicon: InMemoryLexicon, ic_file: Path):
        """Should not modify the caller's dict."""
        params = {"simType": "jcn", "infocontent": str(ic_file)}
        build_measure(params, lexicon)
        assert params == {"simType": "jcn", "infocontent": str(ic_file)}


def test_build_measure_from_file(lexicon: InMemoryLexicon, ic_file: Path, tmp_path: Path):
    """Should build a measure from a key:value config file."""
    config = tmp_path / "lin.conf"
    config.write_text(
        f"simType:lin\ninfocontent:{ic_file.as_uri()}\ncache:-1\nthis line is malformed\n",
        encoding="utf-8",
    )
    measure = build_measure_from_file(config, lexicon)
    assert measure.kind == MeasureKind.LIN
    assert measure.cache.capacity == -1
