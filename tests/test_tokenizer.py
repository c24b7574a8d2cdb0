"""Tests for the tokenizer module."""

from tinysh.tokenizer import Command, parse_command, tokenize


class TestBasicTokenization:
    def test_simple_command(self):
        assert tokenize("echo hello") == ["echo", "hello"]

    def test_multiple_args(self):
        assert tokenize("ls -la /tmp") == ["ls", "-la", "/tmp"]

    def test_empty_string(self):
        assert tokenize("") == []

    def test_whitespace_only(self):
        assert tokenize("   \t ") == []

    def test_single_word(self):
        assert tokenize("ls") == ["ls"]

    def test_runs_of_spaces_collapse(self):
        assert tokenize("echo   a    b") == ["echo", "a", "b"]

    def test_tabs_separate_tokens(self):
        assert tokenize("echo\ta") == ["echo", "a"]


class TestNoQuoting:
    def test_double_quotes_are_literal(self):
        assert tokenize('echo "hello world"') == ["echo", '"hello', 'world"']

    def test_single_quotes_are_literal(self):
        assert tokenize("echo 'x'") == ["echo", "'x'"]

    def test_backslash_is_literal(self):
        assert tokenize("echo a\\ b") == ["echo", "a\\", "b"]

    def test_operators_are_plain_words(self):
        assert tokenize("ls | grep x > out") == ["ls", "|", "grep", "x", ">", "out"]


class TestParseCommand:
    def test_name_and_args(self):
        assert parse_command("echo a b") == Command(name="echo", args=["a", "b"])

    def test_no_args(self):
        cmd = parse_command("pwd")
        assert cmd.name == "pwd"
        assert cmd.args == []

    def test_surrounding_whitespace(self):
        assert parse_command("  cd  /tmp  ") == Command("cd", ["/tmp"])

    def test_blank_line(self):
        assert parse_command("") is None
        assert parse_command("    ") is None
