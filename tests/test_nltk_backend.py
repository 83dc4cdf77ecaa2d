"""Tests for the NLTK WordNet backend (requires the wordnet corpus)."""

import pytest
from nltk.corpus import wordnet as wn

from wn_similarity.lexicon import LexicalView, NltkWordNet
from wn_similarity.lexicon.nltk_backend import normalize_lemma

# Check if the WordNet corpus is available
try:
    wn.get_version()
    WORDNET_AVAILABLE = True
except LookupError:
    WORDNET_AVAILABLE = False


def test_normalize_lemma():
    """Should lowercase, strip and join words with underscores."""
    assert normalize_lemma(" Hot Dog ") == "hot_dog"


@pytest.mark.skipif(not WORDNET_AVAILABLE, reason="NLTK wordnet corpus not installed")
class TestNltkWordNet:
    """Tests against the installed WordNet."""

    @pytest.fixture
    def database(self):
        return NltkWordNet()

    def test_version(self, database):
        """Should report the corpus version."""
        assert database.version == str(wn.get_version())

    def test_key_uses_unpadded_offset(self, database):
        """Should build keys from the unpadded offset and POS."""
        dog = wn.synset("dog.n.01")
        assert database.key_of(dog) == f"{dog.offset()}n"

    def test_satellite_mapped_to_adjective(self, database):
        """Should report adjective satellites as adjectives."""
        satellites = [s for s in wn.synsets("big", pos="a") if s.pos() == "s"]
        assert satellites
        assert database.pos_of(satellites[0]) == "a"
        assert database.key_of(satellites[0]).endswith("a")

    def test_senses_in_sense_order(self, database):
        """Should list senses in WordNet sense order."""
        assert database.senses("dog", "n") == wn.synsets("dog", pos="n")

    def test_index_lemma(self, database):
        """Should return the lemma of a known index word, None otherwise."""
        assert database.index_lemma("Dog", "n") == "dog"
        assert database.index_lemma("xyznonexistent", "n") is None

    def test_inflected_form_is_not_an_index_word(self, database):
        """Should not resolve inflected forms through morphy."""
        assert database.index_lemma("dogs", "n") is None
        assert database.senses("dogs", "n") == []

    def test_index_lemma_is_canonical(self, database):
        """Should report the index word's lemma, not the input spelling."""
        assert database.index_lemma("Hot Dog", "n") == "hot_dog"

    def test_hypernyms_include_instances(self, database):
        """Should treat instance hypernyms as parents."""
        einstein = wn.synset("einstein.n.01")
        assert set(einstein.instance_hypernyms()) <= set(database.hypernyms(einstein))

    def test_view_first_sense(self, database):
        """Should resolve and describe the first noun sense of dog."""
        view = LexicalView(database)
        assert view.synsets_for("dog#n#1") == [wn.synset("dog.n.01")]
        assert view.describe("dog#n", wn.synset("dog.n.01")) == "dog#n#1"

    def test_view_keeps_inflected_word_as_given(self, database):
        """Should describe a non-index word as given."""
        view = LexicalView(database)
        assert view.synsets_for("dogs#n") == []
        assert view.describe("dogs#n", wn.synset("dog.n.01")) == "dogs#n"
