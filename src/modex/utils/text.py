"""Text helpers: normalization, validation, masking and generation.

Every function takes a string (plus optional parameters) and returns a new
value. None of them raise for malformed input: invalid input gives back
`False`, the unchanged text, or an empty string.

Numeric policy:
    `is_numeric` is locale-naive. A text is numeric when the whole of it is a
    decimal number: optional sign, digits with an optional fraction (or a bare
    fraction such as ``.5``), optional exponent. Thousands separators, locale
    decimal commas, ``inf``/``nan`` and surrounding whitespace are rejected.

Examples:
    ```py
    >>> truncated("Hello, this is a long text", 10)
    'Hello, thi...'
    >>> masking_email("test@example.com")
    'te**@example.com'
    >>> masking_phone("010-1234-5678")
    '010-****-5678'
    ```
"""

from __future__ import annotations

import gettext
import random
import re
import string
from collections.abc import Iterable
from urllib.parse import urlsplit

ALPHANUMERIC = string.ascii_letters + string.digits
MASK_CHARACTER = "*"
PHONE_MIN_DIGITS = 7
PHONE_MASKED_MIDDLE = MASK_CHARACTER * 4

NUMERIC_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
URL_CHARACTERS_PATTERN = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+")
KOREAN_PATTERN = re.compile(r"[가-힣]")
ENGLISH_PATTERN = re.compile(r"[A-Za-z]")
NUMBER_PATTERN = re.compile(r"[0-9]")


# ============================================================================
#                           Normalization
# ============================================================================


def trimmed(text: str) -> str:
    """Strip leading and trailing whitespace and line breaks."""
    return text.strip()


def without_spaces(text: str) -> str:
    """Remove the ASCII space character only (tabs and newlines stay)."""
    return text.replace(" ", "")


def removing_characters(text: str, characters: Iterable[str]) -> str:
    """Remove every character contained in `characters`.

    Example:
        ```py
        >>> removing_characters("Hello, World!", string.punctuation)
        'Hello World'
        ```
    """
    drop = set(characters)
    return "".join(ch for ch in text if ch not in drop)


def camel_cased(text: str) -> str:
    """Convert space separated words to camelCase.

    Runs of spaces do not produce empty words, so ``"  hello   world"``
    becomes ``"helloWorld"``.
    """
    words = [word for word in text.lower().split(" ") if word]
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])


def snake_cased(text: str) -> str:
    """Lowercase the text and replace every space with an underscore."""
    return text.lower().replace(" ", "_")


def reversed_string(text: str) -> str:
    return text[::-1]


def capitalizing_first_letter(text: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    return text[:1].upper() + text[1:]


def localized(text: str, domain: str = "modex") -> str:
    """Look `text` up in the gettext catalog for `domain`.

    Returns the text itself when no catalog or translation is installed.
    """
    return gettext.dgettext(domain, text)


# ============================================================================
#                           Validation
# ============================================================================


def is_numeric(text: str) -> bool:
    """Return True if the whole text is a decimal number."""
    return NUMERIC_PATTERN.fullmatch(text) is not None


def is_valid_email(text: str) -> bool:
    return EMAIL_PATTERN.fullmatch(text) is not None


def is_valid_url(text: str) -> bool:
    """Return True if `text` parses as a URL reference.

    Only characters allowed by RFC 3986 (plus percent escapes) are accepted,
    so free text such as ``"not a url"`` fails on its spaces.
    """
    if URL_CHARACTERS_PATTERN.fullmatch(text) is None:
        return False
    try:
        urlsplit(text)
    except ValueError:
        return False
    return True


def contains_korean(text: str) -> bool:
    """Return True if the text contains at least one Hangul syllable."""
    return KOREAN_PATTERN.search(text) is not None


def contains_english(text: str) -> bool:
    return ENGLISH_PATTERN.search(text) is not None


def contains_number(text: str) -> bool:
    return NUMBER_PATTERN.search(text) is not None


# ============================================================================
#                           Conversion
# ============================================================================


def phone_number(text: str) -> str:
    """Drop ``+``, ``-`` and all whitespace from a phone number.

    Example:
        ```py
        >>> phone_number("+1 234-567-890")
        '1234567890'
        ```
    """
    return "".join(text.replace("+", "").replace("-", "").split())


def only_numbers(text: str) -> str:
    """Keep digit characters only."""
    return "".join(ch for ch in text if ch.isdigit())


def only_letters(text: str) -> str:
    """Keep alphabetic characters only."""
    return "".join(ch for ch in text if ch.isalpha())


def truncated(text: str, length: int = 10, trailing: str = "...") -> str:
    """Cut the text to `length` characters and append `trailing`.

    The trailing marker is appended whenever the text is longer than
    `length`, even if the result ends up longer than the original. Texts that
    fit are returned unchanged.
    """
    return text[:length] + trailing if len(text) > length else text


# ============================================================================
#                           Masking
# ============================================================================


def masking_last(text: str, count: int) -> str:
    """Replace the last `count` characters with ``*``.

    No-op when `count` is not positive or covers the whole text.
    """
    if count <= 0 or count >= len(text):
        return text
    return text[: len(text) - count] + MASK_CHARACTER * count


def masking_range(
    text: str, start: int, end: int, mask_character: str = MASK_CHARACTER
) -> str:
    """Replace the characters in ``[start, end)`` with `mask_character`.

    Example:
        ```py
        >>> masking_range("hello world", 2, 7, "#")
        'he#####orld'
        ```

    No-op when the range does not lie within the text.
    """
    if start < 0 or end > len(text) or start > end:
        return text
    return text[:start] + mask_character * (end - start) + text[end:]


def masking_email(text: str) -> str:
    """Mask the second half of an e-mail's local part.

    At least one leading character stays visible and the domain is kept as is.
    Text without exactly one ``@`` (or with an empty side) is returned unchanged.
    """
    if text.count("@") != 1:
        return text
    local, domain = text.split("@")
    if not local or not domain:
        return text
    visible = max(1, len(local) // 2)
    return local[:visible] + MASK_CHARACTER * (len(local) - visible) + "@" + domain


def masking_phone(text: str) -> str:
    """Format a phone number as ``{first 3}-****-{last 4}``.

    Non-digits are discarded first; with fewer than 7 digits the original input
    is returned unchanged. Middle digits are never shown.
    """
    digits = only_numbers(text)
    if len(digits) < PHONE_MIN_DIGITS:
        return text
    return f"{digits[:3]}-{PHONE_MASKED_MIDDLE}-{digits[-4:]}"


# ============================================================================
#                           Misc
# ============================================================================


def word_count(text: str) -> int:
    """Count whitespace/newline separated words."""
    return len(text.split())


def random_string(length: int = 8, rng: random.Random | None = None) -> str:
    """Return `length` characters sampled uniformly from ``[A-Za-z0-9]``.

    Not suitable for secrets; use :mod:`secrets` for tokens.

    Args:
        length: Number of characters to generate. Non-positive gives ``""``.
        rng: Random source; defaults to the module-level generator.
    """
    if length <= 0:
        return ""
    chooser = rng if rng is not None else random
    return "".join(chooser.choices(ALPHANUMERIC, k=length))
