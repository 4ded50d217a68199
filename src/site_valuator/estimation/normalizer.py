"""
Domain Normalizer.

Turns raw user input into the canonical string used as lookup key and as the
source of derived length and extension. No validation is performed: any
string is accepted, including one that normalizes to "".
"""

from __future__ import annotations

DEFAULT_EXTENSION = "com"

# Removed in this order, first occurrence only
STRIPPED_PREFIXES = ("https://", "http://", "www.")


def normalize_domain(raw: str) -> str:
    """
    Normalize a domain or URL.

    Removes one occurrence each of "https://", "http://" and "www.", in that
    order, then trims surrounding whitespace. Case is preserved.

    Example:
        >>> normalize_domain("https://www.example.com ")
        'example.com'
    """
    domain = raw
    for prefix in STRIPPED_PREFIXES:
        domain = domain.replace(prefix, "", 1)
    return domain.strip()


def extract_extension(domain: str) -> str:
    """
    Return the text after the last "." of a normalized domain.

    Falls back to "com" when that text is empty. A domain without a dot
    returns the whole string.
    """
    return domain.rsplit(".", 1)[-1] or DEFAULT_EXTENSION
