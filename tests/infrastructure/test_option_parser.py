"""Tests for the git configuration option parser."""

from __future__ import annotations

from git_keychain.domain.value_objects import GitConfigOption
from git_keychain.infrastructure.adapters.git import parse_config_option


class TestParseConfigOption:
    """Tests for parse_config_option."""

    def test_helper_name(self) -> None:
        """A bare value is a helper name."""
        assert parse_config_option("osxkeychain") == GitConfigOption("osxkeychain", is_shell_command=False)

    def test_shell_command(self) -> None:
        """A leading '!' marks a shell command."""
        assert parse_config_option("!mycmd") == GitConfigOption("mycmd", is_shell_command=True)

    def test_whitespace_after_shell_marker_is_skipped(self) -> None:
        """Whitespace between tokens is insignificant."""
        assert parse_config_option("  !  mycmd") == GitConfigOption("mycmd", is_shell_command=True)

    def test_unquoted_value_keeps_inner_whitespace(self) -> None:
        """The rest of the line is taken verbatim."""
        option = parse_config_option("cache --timeout=3600")
        assert option == GitConfigOption("cache --timeout=3600", is_shell_command=False)

    def test_double_quoted_value(self) -> None:
        """Double quotes are stripped and their content kept verbatim."""
        assert parse_config_option('"store --file ~/.creds"').value == "store --file ~/.creds"

    def test_single_quoted_value(self) -> None:
        """Single quotes are stripped and their content kept verbatim."""
        assert parse_config_option("'  spaced  '").value == "  spaced  "

    def test_quoted_shell_command(self) -> None:
        """The shell marker may precede a quoted command."""
        option = parse_config_option("!'/opt/helper get'")
        assert option == GitConfigOption("/opt/helper get", is_shell_command=True)

    def test_quoted_exclamation_is_not_a_shell_marker(self) -> None:
        """A '!' inside the quotes is part of the value."""
        assert parse_config_option('"!cmd"') == GitConfigOption("!cmd", is_shell_command=False)
        assert parse_config_option("'!cmd'") == GitConfigOption("!cmd", is_shell_command=False)

    def test_escaped_quote_is_preserved(self) -> None:
        """Escaped characters inside quotes are kept as written."""
        assert parse_config_option(r'"say \"hi\""').value == r"say \"hi\""

    def test_other_quote_character_does_not_close(self) -> None:
        """Only the opening quote character closes the string."""
        assert parse_config_option("\"it's\"").value == "it's"

    def test_trailing_text_after_quote_is_ignored(self) -> None:
        """Partial matches are accepted."""
        assert parse_config_option('"store" trailing').value == "store"

    def test_unterminated_quote_is_taken_verbatim(self) -> None:
        """An unterminated quote falls back to the unquoted form."""
        assert parse_config_option('"store').value == '"store'

    def test_empty_value(self) -> None:
        """An empty value parses to an empty helper name."""
        assert parse_config_option("") == GitConfigOption("", is_shell_command=False)
