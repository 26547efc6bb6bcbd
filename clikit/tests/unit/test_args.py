"""Unit tests for the argv parser."""

import pytest

from clikit.core.args import parse_args


class TestParseArgs:
    """Test parse_args token handling."""

    @pytest.mark.parametrize("token, expected", [
        ("-h", {"h": True}),
        ("--help", {"help": True}),
        ("--output=false", {"output": False}),
        ("--count=3", {"count": 3}),
        ("--name=John", {"name": "John"}),
        ("--full-name=John Doe", {"fullName": "John Doe"}),
        ("C:\\Program Files (x86)", {"args": ["C:\\Program Files (x86)"]}),
        ("C:\\Users\\Public", {"args": ["C:\\Users\\Public"]}),
    ])
    def test_documented_syntax(self, token, expected):
        """Each documented form maps to the documented result."""
        assert parse_args([token]) == expected

    def test_positionals_accumulate_in_order(self):
        result = parse_args(["first", "--verbose", "second", "third"])
        assert result == {"args": ["first", "second", "third"], "verbose": True}

    def test_unmatched_tokens_are_ignored(self):
        """Short flag clusters and short assignments resolve to nothing."""
        assert parse_args(["-abc", "-n=5", "--empty="]) == {}

    def test_every_dash_word_is_camel_cased(self):
        assert parse_args(["--dry-run-mode"]) == {"dryRunMode": True}
        assert parse_args(["--max-retry-count=4"]) == {"maxRetryCount": 4}

    def test_number_wins_over_string(self):
        result = parse_args(["--port=8080", "--host=localhost"])
        assert result == {"port": 8080, "host": "localhost"}
        assert isinstance(result["port"], int)

    def test_value_is_text_after_last_equals(self):
        assert parse_args(["--query=a=b"]) == {"query": "b"}

    def test_false_only_matches_whole_word(self):
        assert parse_args(["--mode=falsey"]) == {"mode": "falsey"}

    def test_later_flags_overwrite_earlier(self):
        assert parse_args(["--name=John", "--name=Jane"]) == {"name": "Jane"}

    def test_defaults_to_sys_argv(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["clikit", "--debug", "file.txt"])
        assert parse_args() == {"debug": True, "args": ["file.txt"]}

    def test_empty_input(self):
        assert parse_args([]) == {}
