"""Tokens of the frequency-table, domain-mapping and word-encoding formats."""

# Frequency table: first line is "wnver::<version>"
IC_HEADER_PREFIX = "wnver::"
IC_HEADER_SEPARATOR = "::"

# Third column marking a line whose frequency counts towards the POS root
IC_ROOT_FLAG = "ROOT"

# Domain mapping and config files
COMMENT_PREFIX = "#"

# Encoded words: lemma#pos#sense
WORD_FIELD_SEPARATOR = "#"
