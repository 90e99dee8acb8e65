"""Unit tests for field-agnostic shape detection.

Each test focuses on one behavior of detect_field_patterns.
"""

from rxprobe.detection.field import detect_field_patterns


class TestEmptyValues:
    """Test that empty input short-circuits every other check."""

    def test_empty_string_is_empty_value(self) -> None:
        """An empty string yields only empty_value."""
        assert detect_field_patterns("") == {"empty_value"}

    def test_whitespace_only_is_empty_value(self) -> None:
        """Whitespace-only input yields only empty_value, no space tags."""
        assert detect_field_patterns("   ") == {"empty_value"}

    def test_none_is_empty_value(self) -> None:
        """A missing value is treated as empty."""
        assert detect_field_patterns(None) == {"empty_value"}


class TestSpacePlacement:
    """Test leading, trailing and interior space detection."""

    def test_plain_word_has_no_tags(self) -> None:
        """An ordinary alphanumeric value yields nothing."""
        assert detect_field_patterns("aspirin") == set()

    def test_leading_space(self) -> None:
        """A space before the value is a leading space."""
        assert detect_field_patterns(" aspirin") == {"leading_space"}

    def test_trailing_space(self) -> None:
        """A space after the value is a trailing space."""
        assert detect_field_patterns("aspirin ") == {"trailing_space"}

    def test_middle_space(self) -> None:
        """A space inside the trimmed value is a middle space."""
        assert detect_field_patterns("asp irin") == {"middle_space"}

    def test_hyphen_is_allowed(self) -> None:
        """Hyphens do not count as non-alphanumeric."""
        assert detect_field_patterns("2000-01-01") == set()


class TestCharacterClasses:
    """Test character class anomalies."""

    def test_symbol_is_non_alphanumeric(self) -> None:
        """An @ sign is outside the allowed character class."""
        assert detect_field_patterns("a@b") == {"non_alphanumeric"}

    def test_accented_letter_is_non_ascii(self) -> None:
        """Accented letters are both non-ASCII and non-alphanumeric."""
        assert detect_field_patterns("café") == {"non_alphanumeric", "non_ascii"}

    def test_tab_is_non_printable(self) -> None:
        """Control characters are non-printable."""
        assert detect_field_patterns("a\tb") == {"non_alphanumeric", "non_printable"}

    def test_delete_character_is_non_printable(self) -> None:
        """Character code 127 is non-printable."""
        assert "non_printable" in detect_field_patterns("a\x7fb")


class TestInjectionPatterns:
    """Test HTML, script and SQL injection shapes."""

    def test_opening_tag_is_html(self) -> None:
        """An opening tag shape is HTML."""
        assert "contains_html" in detect_field_patterns("<b>bold")

    def test_space_after_bracket_is_not_html(self) -> None:
        """A bracket followed by a space is not a tag."""
        assert "contains_html" not in detect_field_patterns("< b>")

    def test_script_tag_is_xss_case_insensitive(self) -> None:
        """Script tags are detected regardless of case."""
        assert "contains_xss" in detect_field_patterns("<SCRIPT>alert(1)</script>")

    def test_semicolon_keyword_is_sql_injection(self) -> None:
        """A semicolon followed by an SQL keyword is SQL injection."""
        assert "contains_sql_injection" in detect_field_patterns("1; drop table users")

    def test_leading_semicolon_is_sql_injection(self) -> None:
        """A value starting with a semicolon is SQL injection."""
        assert "contains_sql_injection" in detect_field_patterns(";abc")

    def test_semicolon_without_keyword_is_not_sql_injection(self) -> None:
        """A semicolon inside ordinary text is not SQL injection."""
        assert "contains_sql_injection" not in detect_field_patterns("a;b")

    def test_combined_attack_string(self) -> None:
        """Every shape tag fires for a mixed attack string."""
        detections = detect_field_patterns(" ;<script> @ SELECT ")
        assert detections >= {
            "leading_space",
            "trailing_space",
            "middle_space",
            "non_alphanumeric",
            "contains_html",
            "contains_xss",
            "contains_sql_injection",
        }
