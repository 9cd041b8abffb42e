import sys
from types import SimpleNamespace

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from skillgate.modules.application import TokenCounter
from skillgate.modules.application.internal import heuristic_token_count


class _WordEncoding:
    def encode(self, text, disallowed_special=()):
        return text.split()


def _fake_tiktoken(get_encoding):
    return SimpleNamespace(get_encoding=get_encoding)


class TestHeuristic:
    @pytest.mark.parametrize(
        "text,expected", [("", 0), ("a", 1), ("abcd", 1), ("abcde", 2), ("x" * 400, 100)]
    )
    def test_ceil_chars_over_four(self, text, expected):
        assert heuristic_token_count(text) == expected

    def test_counter_defaults_to_heuristic(self):
        counter = TokenCounter()
        result = counter.count("x" * 10)
        assert result.count == 3
        assert result.source == "heuristic"
        assert result.confidence == "medium"

    @settings(max_examples=100)
    @given(st.text(max_size=300), st.text(max_size=300))
    def test_non_decreasing_in_length(self, prefix, suffix):
        counter = TokenCounter()
        assert counter.estimate(prefix) <= counter.estimate(prefix + suffix)

    @settings(max_examples=50)
    @given(st.text(max_size=300))
    def test_deterministic(self, text):
        counter = TokenCounter()
        assert counter.estimate(text) == counter.estimate(text) >= 0


class TestTiktoken:
    def test_uses_encoding_when_available(self, monkeypatch):
        monkeypatch.setitem(
            sys.modules, "tiktoken", _fake_tiktoken(lambda name: _WordEncoding())
        )
        counter = TokenCounter("tiktoken", "cl100k_base")

        result = counter.count("one two three")

        assert result.count == 3
        assert result.source == "tiktoken"
        assert result.confidence == "high"

    def test_falls_back_when_encoding_unavailable(self, monkeypatch, capsys):
        def broken(name):
            raise ValueError(f"Unknown encoding {name}")

        monkeypatch.setitem(sys.modules, "tiktoken", _fake_tiktoken(broken))
        counter = TokenCounter("tiktoken", "no-such-encoding")

        assert counter.estimate("x" * 8) == 2
        assert counter.source == "heuristic"
        assert "no-such-encoding" in capsys.readouterr().err

    def test_source_is_pinned_after_first_use(self, monkeypatch):
        monkeypatch.setitem(
            sys.modules, "tiktoken", _fake_tiktoken(lambda name: _WordEncoding())
        )
        counter = TokenCounter("tiktoken")
        first = counter.estimate("alpha beta")

        def broken(name):
            raise RuntimeError("gone")

        monkeypatch.setitem(sys.modules, "tiktoken", _fake_tiktoken(broken))

        assert counter.source == "tiktoken"
        assert counter.estimate("alpha beta") == first
