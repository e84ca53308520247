"""Unit tests for slug generation."""

import pytest

from fla.domain.error import DomainError, ErrorCode, ValidationError, error_code
from fla.domain.value import Slug, generate_slug
from fla.domain.value.limits import MAX_SLUG_LENGTH
from fla.domain.value.slug import SLUG_FORMAT_RE


class TestGenerateSlug:
    """Tests for generate_slug."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Hello World", "hello-world"),
            ("Café & Culture", "cafe-culture"),
            ("Compréhension écrite", "comprehension-ecrite"),
            ("Łódź", "lodz"),
            ("Straße", "strasse"),
            ("Ørsted Æble", "orsted-aeble"),
            ("São João", "sao-joao"),
            ("C++ Programming", "c-programming"),
            ("Price: $99.99", "price-99-99"),
            ("20°C à Paris", "20-c-a-paris"),
            ("  --Leading and trailing--  ", "leading-and-trailing"),
            ("Multiple   spaces\tand\nnewlines", "multiple-spaces-and-newlines"),
            ("A1", "a1"),
        ],
    )
    def test_generates_expected_slug(self, text, expected):
        """Known inputs map to their documented slugs."""
        assert generate_slug(text) == expected

    def test_strips_combining_marks_missing_from_table(self):
        """Diacritics outside the substitution table are removed by decomposition."""
        assert generate_slug("Ǹgǒ") == "ngo"

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_input_is_invalid(self, text):
        """Whitespace-only input cannot produce a slug."""
        with pytest.raises(ValidationError) as exc_info:
            generate_slug(text)

        assert exc_info.value.code is ErrorCode.INVALID

    @pytest.mark.parametrize("text", ["!!!", "€€€", "---", "日本語"])
    def test_input_without_alphanumerics_is_invalid(self, text):
        """Input reduced to nothing is rejected."""
        with pytest.raises(ValidationError):
            generate_slug(text)

    def test_long_input_is_truncated(self):
        """Slugs longer than the maximum are cut at the limit."""
        slug = generate_slug("Test-" + "a" * 110)

        assert slug == "test-" + "a" * 105
        assert len(slug) == MAX_SLUG_LENGTH

    def test_truncation_does_not_leave_trailing_hyphen(self):
        """A cut right after a word boundary drops the dangling hyphen."""
        text = "a" * (MAX_SLUG_LENGTH - 1) + " bcd"

        slug = generate_slug(text)

        assert slug == "a" * (MAX_SLUG_LENGTH - 1)

    @pytest.mark.parametrize(
        "text",
        ["Café & Culture", "Le passé composé", "  Über--Größe ", "Price: $99.99"],
    )
    def test_is_idempotent(self, text):
        """Slugifying a slug returns it unchanged."""
        slug = generate_slug(text)

        assert generate_slug(slug) == slug

    @pytest.mark.parametrize(
        "text",
        ["Hello, World!", "À la française", "x -- y", "Ça va? Oui!", "2024 / 2025"],
    )
    def test_output_matches_slug_format(self, text):
        """Output only has lowercase alphanumerics joined by single hyphens."""
        slug = generate_slug(text)

        assert SLUG_FORMAT_RE.match(slug)
        assert "--" not in slug
        assert not slug.startswith("-")
        assert not slug.endswith("-")


class TestSlug:
    """Tests for the Slug value object."""

    def test_from_text(self):
        assert Slug.from_text("Compréhension écrite").root == "comprehension-ecrite"

    def test_from_text_wraps_generation_error(self):
        """The wrapper keeps the invalid code of the generation failure."""
        with pytest.raises(DomainError) as exc_info:
            Slug.from_text("   ")

        assert exc_info.value.operation == "Slug.from_text"
        assert error_code(exc_info.value) is ErrorCode.INVALID

    @pytest.mark.parametrize("value", ["Hello", "hello world", "-hello", "a--b", "é"])
    def test_rejects_malformed_slug(self, value):
        with pytest.raises(ValidationError):
            Slug(value)

    def test_rejects_too_long_slug(self):
        with pytest.raises(ValidationError):
            Slug("a" * (MAX_SLUG_LENGTH + 1))

    def test_accepts_valid_slug(self):
        assert str(Slug("a1-comprehension")) == "a1-comprehension"
