"""Tests for quote-aware tokenization (core/tokenizer.py)."""

from __future__ import annotations

import pytest

from cmdtree.core.tokenizer import tokenize


class TestTokenize:
    def test_quoted_span_is_one_token(self) -> None:
        assert tokenize('a "b c" d') == ["a", "b c", "d"]

    def test_single_word(self) -> None:
        assert tokenize("single") == ["single"]

    def test_runs_of_whitespace_collapse(self) -> None:
        assert tokenize("set   key \t value") == ["set", "key", "value"]

    def test_quoted_whitespace_kept_verbatim(self) -> None:
        assert tokenize('say "  two  spaces "') == ["say", "  two  spaces "]

    def test_empty_quotes_yield_empty_token(self) -> None:
        assert tokenize('set key ""') == ["set", "key", ""]

    def test_quote_inside_word_stays_literal(self) -> None:
        assert tokenize('x"y z"') == ['x"y', 'z"']

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ('echo "unterminated text', ["echo", '"unterminated', "text"]),
            ('"', ['"']),
            ('a "b" "c', ["a", "b", '"c']),
        ],
    )
    def test_unmatched_quote_is_best_effort(self, line: str, expected: list[str]) -> None:
        assert tokenize(line) == expected

    def test_no_match_returns_whole_line(self) -> None:
        assert tokenize("   ") == ["   "]

    def test_escaped_quotes_are_not_supported(self) -> None:
        assert tokenize(r'say "a \"b\" c"') == ["say", "a \\", 'b\\"', 'c"']
