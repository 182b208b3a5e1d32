"""Tests for the identifier tokenizer."""

from __future__ import annotations

from mscan.analysis.tokens import extract_identifiers
from mscan.config import KEYWORDS


class TestExtractIdentifiers:
    def test_keywords_never_returned(self):
        src = """\
function result = run(value)
if value > 1
  result = value;
else
  result = 0;
end
for k = 1:3
  break
end
"""
        idents = extract_identifiers(src)
        assert not set(idents) & KEYWORDS
        assert "result" in idents
        assert "value" in idents
        assert "run" in idents

    def test_first_seen_order_unique(self):
        assert extract_identifiers("alpha beta alpha gamma beta") == ["alpha", "beta", "gamma"]

    def test_numbers_and_single_chars_dropped(self):
        idents = extract_identifiers("k = 42 + x1 * 7")
        assert idents == ["x1"]

    def test_underscore_names(self):
        assert extract_identifiers("my_var = _tmp;") == ["my_var", "_tmp"]

    def test_custom_keyword_table(self):
        idents = extract_identifiers("methods foo properties", frozenset({"methods", "properties"}))
        assert idents == ["foo"]

    def test_keyword_table_replaces_default(self):
        # the default keywords only apply when no table is passed
        assert extract_identifiers("end while", frozenset()) == ["end", "while"]

    def test_idempotent(self):
        src = "a1 = b2 + c3;\nd4 = a1;"
        assert extract_identifiers(src) == extract_identifiers(src)
