"""Tests for transformer options."""

import pytest

from jsonschema_llm_options.options import (
    MAX_DETAIL_ENV,
    SYMBOLS_ENV,
    TransformOptions,
    truncate,
)


class TestTransformOptions:
    def test_defaults(self):
        options = TransformOptions()
        assert options.symbols == frozenset()
        assert options.max_detail_len == 200

    def test_symbols_frozen(self):
        options = TransformOptions(symbols=["a", "b"])
        assert options.symbols == frozenset({"a", "b"})

    def test_symbols_string_rejected(self):
        with pytest.raises(ValueError):
            TransformOptions(symbols="abc")

    def test_blank_symbol_rejected(self):
        with pytest.raises(ValueError):
            TransformOptions(symbols=[" "])

    def test_non_positive_max_detail_rejected(self):
        with pytest.raises(ValueError):
            TransformOptions(max_detail_len=0)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv(SYMBOLS_ENV, "pending, done,,")
        monkeypatch.setenv(MAX_DETAIL_ENV, "50")
        options = TransformOptions.from_env()
        assert options.symbols == frozenset({"pending", "done"})
        assert options.max_detail_len == 50

    def test_from_env_unset(self, monkeypatch):
        monkeypatch.delenv(SYMBOLS_ENV, raising=False)
        monkeypatch.delenv(MAX_DETAIL_ENV, raising=False)
        assert TransformOptions.from_env() == TransformOptions()

    def test_from_env_bad_max(self, monkeypatch):
        monkeypatch.setenv(MAX_DETAIL_ENV, "lots")
        with pytest.raises(ValueError, match=MAX_DETAIL_ENV):
            TransformOptions.from_env()


class TestTruncate:
    def test_short(self):
        assert truncate("abc", 5) == "abc"

    def test_long(self):
        assert truncate("abcdef", 3) == "abc..."

    def test_none(self):
        assert truncate(None) == "<null>"
