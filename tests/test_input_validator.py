"""Tests for InputValidator filtering and debounce."""

import logging

import pytest

from kodic.core.input_validator import InputValidator
from kodic.exceptions import WordValidationError


class TestInputValidator:
    """Test class for InputValidator."""

    def setup_method(self):
        self.validator = InputValidator()

    def test_accepts_and_lowercases(self):
        assert self.validator.validate(" Hello ") == "hello"
        assert self.validator.last_term == "hello"

    @pytest.mark.parametrize(
        "raw",
        ["two words", "don't", "hello!", "abc123", "42", "", "   ", "안녕", "café"],
    )
    def test_rejects_non_words(self, raw):
        assert self.validator.validate(raw) is None
        assert self.validator.last_term is None

    def test_debounce_same_value(self):
        assert self.validator.validate("hello") == "hello"
        assert self.validator.validate("hello") is None

    def test_debounce_ignores_surrounding_whitespace(self):
        assert self.validator.validate("hello") == "hello"
        assert self.validator.validate("  hello\n") is None

    def test_debounce_ignores_case(self):
        assert self.validator.validate("Hello") == "hello"
        assert self.validator.validate("Hello") is None
        assert self.validator.validate("HELLO") is None

    def test_new_word_is_accepted_after_debounce(self):
        assert self.validator.validate("hello") == "hello"
        assert self.validator.validate("world") == "world"
        assert self.validator.validate("hello") == "hello"

    def test_rejected_input_does_not_replace_last_term(self):
        assert self.validator.validate("hello") == "hello"
        assert self.validator.validate("not a word") is None
        assert self.validator.validate("hello") is None

    def test_fresh_instances_do_not_share_state(self):
        assert self.validator.validate("hello") == "hello"
        assert InputValidator().validate("hello") == "hello"

    def test_warns_once_for_repeated_rejection(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="kodic"):
            self.validator.validate("two words")
            self.validator.validate("two words")
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "two words" in warnings[0].getMessage()

    def test_debounce_is_not_logged(self, caplog):
        self.validator.validate("hello")
        with caplog.at_level(logging.DEBUG, logger="kodic"):
            self.validator.validate("hello")
        assert not caplog.records

    def test_clean_word_raises_with_reason(self):
        with pytest.raises(WordValidationError) as exc:
            InputValidator.clean_word("hello world")
        assert exc.value.word == "hello world"
        assert InputValidator.clean_word(" Tree ") == "tree"
