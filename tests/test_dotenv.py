"""Tests for env file parsing and loading."""

import pytest

from env_usage_checker.core.scanner.dotenv import (
    ConfigNotFound,
    EnvFileError,
    load_env_file,
    parse_dotenv_content,
)


@pytest.mark.unit
class TestParseDotenvContent:
    """Tests for parse_dotenv_content()."""

    def test_parses_simple_assignments(self):
        entries = parse_dotenv_content("FOO=1\nBAR=two\n")
        assert [(e.name, e.value) for e in entries] == [("FOO", "1"), ("BAR", "two")]

    def test_ignores_comments_and_blank_lines(self):
        content = "# header\n\nFOO=1\n   \n# FOO2=ignored\nBAR=2\n"
        entries = parse_dotenv_content(content)
        assert [e.name for e in entries] == ["FOO", "BAR"]

    def test_quoted_values(self):
        content = 'A="hello world"\nB=\'single # not a comment\'\nC=""\n'
        values = {e.name: e.value for e in parse_dotenv_content(content)}
        assert values == {"A": "hello world", "B": "single # not a comment", "C": ""}

    def test_double_quoted_newline_escape(self):
        entries = parse_dotenv_content('CERT="line1\\nline2"')
        assert entries[0].value == "line1\nline2"

    def test_escaped_quote_inside_double_quotes(self):
        entries = parse_dotenv_content('MSG="say \\"hi\\""')
        assert entries[0].value == 'say "hi"'

    def test_inline_comment_is_stripped(self):
        entries = parse_dotenv_content("PORT=3000   # dev server port")
        assert entries[0].value == "3000"
        assert entries[0].comment == "dev server port"

    def test_preceding_comment_attaches_to_entry(self):
        entries = parse_dotenv_content("# The API base URL\nAPI_URL=http://localhost")
        assert entries[0].comment == "The API base URL"

    def test_export_prefix_and_spaces_around_equals(self):
        entries = parse_dotenv_content("export TOKEN = abc\n")
        assert (entries[0].name, entries[0].value) == ("TOKEN", "abc")

    def test_empty_value(self):
        entries = parse_dotenv_content("EMPTY=\n")
        assert entries[0].name == "EMPTY"
        assert entries[0].value == ""

    def test_non_assignment_lines_are_ignored(self):
        entries = parse_dotenv_content("just some text\nFOO=1\n")
        assert [e.name for e in entries] == ["FOO"]

    def test_line_numbers(self):
        entries = parse_dotenv_content("\n# c\nFOO=1\n\nBAR=2")
        assert [e.line_number for e in entries] == [3, 5]

    def test_windows_line_endings(self):
        entries = parse_dotenv_content("FOO=1\r\nBAR=2\r\n")
        assert {e.name: e.value for e in entries} == {"FOO": "1", "BAR": "2"}


@pytest.mark.unit
class TestLoadEnvFile:
    """Tests for load_env_file()."""

    def test_returns_mapping(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("FOO=1\nBAR=2\n")
        assert load_env_file(env_file) == {"FOO": "1", "BAR": "2"}

    def test_duplicate_key_last_wins(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("FOO=1\nFOO=2\n")
        assert load_env_file(env_file) == {"FOO": "2"}

    def test_missing_file_raises_config_not_found(self, tmp_path):
        env_file = tmp_path / ".env"
        with pytest.raises(ConfigNotFound) as exc_info:
            load_env_file(env_file)
        assert exc_info.value.path == env_file
        assert ".env file not found" in str(exc_info.value)

    def test_directory_is_not_an_env_file(self, tmp_path):
        (tmp_path / ".env").mkdir()
        with pytest.raises(ConfigNotFound):
            load_env_file(tmp_path / ".env")

    def test_config_not_found_is_env_file_error(self):
        assert issubclass(ConfigNotFound, EnvFileError)

    def test_undecodable_file_raises_env_file_error(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_bytes(b"FOO=\xff\xfe\n")
        with pytest.raises(EnvFileError):
            load_env_file(env_file)


@pytest.mark.unit
class TestMultilineAndAlternateSyntax:
    """Tests for quoted values spanning lines, backticks and `KEY: value`."""

    def test_multiline_double_quoted_pem_value(self):
        content = (
            'PRIVATE_KEY="-----BEGIN KEY-----\n'
            'MIIBOgIBAAJBAKj34GkxFhD90vcNLYLInFEX6Ppy1tPf9Cnzj4p4WGeKLs1Pt8Qu\n'
            'Zm9vYmFy==\n'
            '-----END KEY-----"\n'
            'API=1\n'
        )
        entries = parse_dotenv_content(content)

        assert [e.name for e in entries] == ["PRIVATE_KEY", "API"]
        assert entries[0].value.startswith("-----BEGIN KEY-----\n")
        assert entries[0].value.endswith("\nZm9vYmFy==\n-----END KEY-----")
        assert (entries[1].value, entries[1].line_number) == ("1", 5)

    def test_multiline_single_quoted_value_keeps_inner_lines(self):
        content = "NOTE='first\n  INNER=not_a_key\nlast' # trailing\nNEXT=2\n"
        entries = parse_dotenv_content(content)

        assert [e.name for e in entries] == ["NOTE", "NEXT"]
        assert entries[0].value == "first\n  INNER=not_a_key\nlast"
        assert entries[0].comment == "trailing"

    def test_unterminated_quote_falls_back_to_line_value(self):
        entries = parse_dotenv_content('BROKEN="no closing quote\nOTHER=1\n')
        assert [e.name for e in entries] == ["BROKEN", "OTHER"]
        assert entries[0].value == '"no closing quote'

    def test_backtick_quoted_value(self):
        entries = parse_dotenv_content("A=`tick # x`\n")
        assert entries[0].value == "tick # x"
        assert entries[0].comment is None

    def test_colon_separator(self):
        entries = parse_dotenv_content("B: val\nURL: http://localhost:3000\n")
        assert [(e.name, e.value) for e in entries] == [
            ("B", "val"),
            ("URL", "http://localhost:3000"),
        ]

    def test_colon_without_space_is_not_an_assignment(self):
        assert parse_dotenv_content("B:val\n") == []

    def test_multiline_value_does_not_declare_inner_keys(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text('CERT="line1\nFAKE=1\nline3"\nREAL=2\n')
        assert load_env_file(env_file) == {"CERT": "line1\nFAKE=1\nline3", "REAL": "2"}
