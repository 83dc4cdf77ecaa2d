"""Shared fixtures: a small noun/verb/adjective taxonomy with frequencies.

Noun hierarchy (two roots, multiple inheritance for cat and dog):

    entity(1740n) -- animal(100n) -+- carnivore(200n) -+- feline(300n) -- cat
                                   |                   +- canine(400n) -- dog
                                   +- pet(500n) ---------- cat, dog
    abstraction(5000n) -- idea(5100n)

Verb hierarchy: move(10v) -- run(11v), move(10v) -- cat(12v); think(20v) alone.
"""

from pathlib import Path

import pytest

from wn_similarity.information_content import FrequencyTable, InformationContent
from wn_similarity.lexicon import InMemoryLexicon, LexicalView

IC_FILE = """wnver::3.0
1740n 1000 ROOT
100n 200
200n 50
300n 20
400n 20
500n 80
2121620n 5
2084071n 5
5000n 100
5100n 10
10v 100 ROOT
11v 10
12v 2
20v 5
30a 10
"""


@pytest.fixture
def taxonomy() -> tuple[InMemoryLexicon, dict]:
    """Build the taxonomy described in the module docstring."""
    lex = InMemoryLexicon(version="3.0")
    nodes = {}
    nodes["entity"] = lex.add_synset("1740n", "n", lemmas=["entity"])
    nodes["animal"] = lex.add_synset("100n", "n", parents=[nodes["entity"]], lemmas=["animal"])
    nodes["carnivore"] = lex.add_synset("200n", "n", parents=[nodes["animal"]], lemmas=["carnivore"])
    nodes["feline"] = lex.add_synset("300n", "n", parents=[nodes["carnivore"]], lemmas=["feline"])
    nodes["canine"] = lex.add_synset("400n", "n", parents=[nodes["carnivore"]], lemmas=["canine"])
    nodes["pet"] = lex.add_synset("500n", "n", parents=[nodes["animal"]], lemmas=["pet"])
    nodes["cat"] = lex.add_synset(
        "2121620n", "n", parents=[nodes["feline"], nodes["pet"]], lemmas=["cat", "true_cat"]
    )
    nodes["dog"] = lex.add_synset(
        "2084071n", "n", parents=[nodes["canine"], nodes["pet"]], lemmas=["dog"]
    )
    nodes["abstraction"] = lex.add_synset("5000n", "n", lemmas=["abstraction"])
    nodes["idea"] = lex.add_synset("5100n", "n", parents=[nodes["abstraction"]], lemmas=["idea"])

    nodes["move"] = lex.add_synset("10v", "v", lemmas=["move"])
    nodes["run"] = lex.add_synset("11v", "v", parents=[nodes["move"]], lemmas=["run"])
    nodes["cat_v"] = lex.add_synset("12v", "v", parents=[nodes["move"]], lemmas=["cat", "vomit"])
    nodes["think"] = lex.add_synset("20v", "v", lemmas=["think"])

    nodes["big"] = lex.add_synset("30a", "a", lemmas=["big", "large"])
    nodes["large"] = lex.add_synset("31a", "a", lemmas=["large"])
    return lex, nodes


@pytest.fixture
def lexicon(taxonomy) -> InMemoryLexicon:
    return taxonomy[0]


@pytest.fixture
def synsets(taxonomy) -> dict:
    """Synsets of the taxonomy by short name."""
    return taxonomy[1]


@pytest.fixture
def view(lexicon: InMemoryLexicon) -> LexicalView:
    return LexicalView(lexicon)


@pytest.fixture
def ic_file(tmp_path: Path) -> Path:
    """Frequency table for the taxonomy, written to disk."""
    path = tmp_path / "ic-test.dat"
    path.write_text(IC_FILE, encoding="utf-8")
    return path


@pytest.fixture
def frequency_table() -> FrequencyTable:
    return FrequencyTable.parse(IC_FILE.splitlines(), expected_version="3.0")


@pytest.fixture
def information_content(frequency_table: FrequencyTable, view: LexicalView) -> InformationContent:
    return InformationContent(frequency_table, view)
