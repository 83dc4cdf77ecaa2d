"""Part-of-speech keys used in encoded words and synset keys."""

NOUN = "n"
VERB = "v"
ADJ = "a"
ADV = "r"

# Keys accepted in "lemma#pos" tokens
POS_TAGS: tuple[str, ...] = (NOUN, VERB, ADJ, ADV)

# Information content is only defined for these hierarchies
IC_POS_TAGS: frozenset[str] = frozenset({NOUN, VERB})
