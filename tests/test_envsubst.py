"""Tests for environment variable substitution."""

import os

import pytest

from autobackup.config.envsubst import expand_env, substitute_env


class TestExpandEnv:
    """Tests for expand_env function."""

    def test_no_references_is_identity(self):
        """Test that text without references is returned unchanged."""
        text = 'key=value\n  {"a": [1, 2]}\t\r\n'
        assert expand_env(text, {"key": "nope"}) == text

    def test_dollar_name(self):
        """Test that $NAME is replaced."""
        assert expand_env("key=$TEST_VAR", {"TEST_VAR": "test_value"}) == (
            "key=test_value"
        )

    def test_braced_name(self):
        """Test that ${NAME} is replaced."""
        assert expand_env("key=${TEST_VAR}", {"TEST_VAR": "test_value"}) == (
            "key=test_value"
        )

    def test_braced_name_adjacent_text(self):
        """Test that ${NAME} can be followed directly by text."""
        assert expand_env("${A}suffix", {"A": "x"}) == "xsuffix"

    def test_unbraced_name_is_greedy(self):
        """Test that $Asuffix refers to the variable 'Asuffix'."""
        assert expand_env("$Asuffix", {"A": "x"}) == ""

    def test_every_occurrence_replaced(self):
        """Test that every occurrence of a reference is replaced."""
        assert expand_env("$X-$X-${X}", {"X": "v"}) == "v-v-v"

    def test_bare_name_unchanged(self):
        """Test that a name without the sigil is left alone."""
        assert expand_env("X=$X and X", {"X": "v"}) == "X=v and X"

    def test_unset_variable_is_empty(self):
        """Test that an unset variable expands to an empty string."""
        assert expand_env("key=$NOT_SET;", {}) == "key=;"

    def test_multiline_multiple_variables(self):
        """Test substitution of several variables across lines."""
        text = "\nkey1=$TEST_VAR1\nkey2=TEST_VAR2\nkey3=${TEST_VAR3}"
        env = {"TEST_VAR1": "one", "TEST_VAR2": "two", "TEST_VAR3": "three"}
        assert expand_env(text, env) == "\nkey1=one\nkey2=TEST_VAR2\nkey3=three"

    @pytest.mark.parametrize(
        "text",
        ["cost: 5$", "$", "$1", "${}", "${bad-name}", "${UNCLOSED", "$-x"],
    )
    def test_non_references_left_verbatim(self, text):
        """Test that a dollar sign not starting a reference is kept."""
        assert expand_env(text, {"1": "one", "UNCLOSED": "u"}) == text

    def test_value_not_expanded_again(self):
        """Test that substituted values are not expanded a second time."""
        assert expand_env("$A", {"A": "$B", "B": "b"}) == "$B"

    def test_defaults_to_process_environment(self, monkeypatch):
        """Test that os.environ is used when no mapping is given."""
        monkeypatch.setenv("AUTOBACKUP_TEST_VAR", "from_env")
        assert expand_env("$AUTOBACKUP_TEST_VAR") == "from_env"

    def test_reads_environment_at_call_time(self, monkeypatch):
        """Test that environment changes are seen on the next call."""
        monkeypatch.setenv("AUTOBACKUP_TEST_VAR", "first")
        assert expand_env("$AUTOBACKUP_TEST_VAR") == "first"
        monkeypatch.setenv("AUTOBACKUP_TEST_VAR", "second")
        assert expand_env("$AUTOBACKUP_TEST_VAR") == "second"


class TestSubstituteEnv:
    """Tests for substitute_env function."""

    def test_no_references_is_identity(self):
        """Test that text without references is returned unchanged."""
        data = b"\x00\xff\xfe raw bytes\n"
        assert substitute_env(data, {}) == data

    def test_replaces_references(self):
        """Test that references in bytes are replaced."""
        assert substitute_env(b"key=$TEST_VAR", {"TEST_VAR": "test_value"}) == (
            b"key=test_value"
        )

    def test_non_utf8_bytes_preserved_around_reference(self):
        """Test that invalid UTF-8 around a reference is preserved."""
        data = b"\xff$A\xfe"
        assert substitute_env(data, {"A": "x"}) == b"\xffx\xfe"

    def test_unicode_value_encoded_as_utf8(self):
        """Test that non-ASCII values are written as UTF-8."""
        assert substitute_env(b"$A", {"A": "café"}) == "café".encode()

    def test_does_not_mutate_environment(self, monkeypatch):
        """Test that unset references do not create variables."""
        monkeypatch.delenv("AUTOBACKUP_UNSET_VAR", raising=False)
        substitute_env(b"$AUTOBACKUP_UNSET_VAR")
        assert "AUTOBACKUP_UNSET_VAR" not in os.environ
