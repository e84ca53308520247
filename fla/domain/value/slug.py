"""Slug generation.

Turns arbitrary display text (titles, category names) into URL-safe
identifiers: lowercase ASCII letters and digits separated by single hyphens.
Accented Latin characters are transliterated, remaining diacritics are
stripped through Unicode decomposition.
"""

import re
import unicodedata

from fla.domain.error import ValidationError
from fla.domain.value.limits import MAX_SLUG_LENGTH

SLUG_INVALID_CHARS = "Slug contains invalid characters."
SLUG_GENERATION_FAILED = "Slug could not be generated."

SLUG_FORMAT_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
_NON_ALPHANUMERIC_RE = re.compile(r"[^a-z0-9]+")
_ALPHANUMERIC_RE = re.compile(r"[a-z0-9]")

# Basic transliteration for common non-ASCII characters
TRANSLITERATIONS: dict[str, str] = {
    # French
    "À": "A", "à": "a",
    "Â": "A", "â": "a",
    "Ä": "A", "ä": "a",
    "Æ": "AE", "æ": "ae",
    "Ç": "C", "ç": "c",
    "È": "E", "è": "e",
    "É": "E", "é": "e",
    "Ê": "E", "ê": "e",
    "Ë": "E", "ë": "e",
    "Î": "I", "î": "i",
    "Ï": "I", "ï": "i",
    "Ô": "O", "ô": "o",
    "Œ": "OE", "œ": "oe",
    "Ù": "U", "ù": "u",
    "Û": "U", "û": "u",
    "Ü": "U", "ü": "u",
    "Ÿ": "Y", "ÿ": "y",
    # Spanish
    "Á": "A", "á": "a",
    "Í": "I", "í": "i",
    "Ñ": "N", "ñ": "n",
    "Ó": "O", "ó": "o",
    "Ú": "U", "ú": "u",
    "¿": "", "¡": "",
    # Portuguese
    "Ã": "A", "ã": "a",
    "Õ": "O", "õ": "o",
    # Old English
    "Ð": "D", "ð": "d",
    "Þ": "TH", "þ": "th",
    # Polish
    "Ł": "L", "ł": "l",
    "Ą": "A", "ą": "a",
    "Ć": "C", "ć": "c",
    "Ę": "E", "ę": "e",
    "Ń": "N", "ń": "n",
    "Ś": "S", "ś": "s",
    "Ź": "Z", "ź": "z",
    "Ż": "Z", "ż": "z",
    # German
    "Ö": "O", "ö": "o",
    "ß": "ss",
    # Scandinavian
    "Å": "A", "å": "a",
    "Ø": "O", "ø": "o",
    # Symbols become separators
    "&": "-",
    "@": "-",
    "°": "-",
    # Currency symbols are dropped
    "€": "",
    "£": "",
    "$": "",
}

_TRANSLATION_TABLE = str.maketrans(TRANSLITERATIONS)


def transliterate(text: str) -> str:
    """Replace known special characters with their ASCII equivalents."""
    return text.translate(_TRANSLATION_TABLE)


def strip_diacritics(text: str) -> str:
    """Remove combining marks left after decomposition."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def generate_slug(text: str) -> str:
    """Generate a URL-safe slug from display text.

    Steps: trim, transliterate, lowercase, strip diacritics, collapse every
    run of non-alphanumeric characters into a hyphen, trim hyphens, then
    truncate to ``MAX_SLUG_LENGTH``.

    Args:
        text: Arbitrary input text

    Returns:
        Slug string matching ``SLUG_FORMAT_RE``

    Raises:
        ValidationError: If the input is blank or yields no alphanumerics
    """
    operation = "generate_slug"

    text = text.strip()
    if not text:
        raise ValidationError(SLUG_GENERATION_FAILED, operation=operation)

    slug = strip_diacritics(transliterate(text).lower())
    slug = _NON_ALPHANUMERIC_RE.sub("-", slug).strip("-")

    if not slug or not _ALPHANUMERIC_RE.search(slug):
        raise ValidationError(SLUG_GENERATION_FAILED, operation=operation)

    if len(slug) > MAX_SLUG_LENGTH:
        slug = slug[:MAX_SLUG_LENGTH].rstrip("-")

    return slug
