"""
Known-domain lookup tables.

Literal metrics for a handful of well-known sites. Keys are exact normalized
domains. The tables overlap but are not identical: wikipedia.org only has an
authority score, twitter.com has none.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

KNOWN_DOMAIN_AGES: Mapping[str, int] = MappingProxyType(
    {
        "google.com": 25,
        "facebook.com": 20,
        "amazon.com": 28,
        "youtube.com": 18,
        "twitter.com": 17,
    }
)

KNOWN_MONTHLY_TRAFFIC: Mapping[str, int] = MappingProxyType(
    {
        "google.com": 90_000_000_000,
        "youtube.com": 30_000_000_000,
        "facebook.com": 20_000_000_000,
        "amazon.com": 5_000_000_000,
        "twitter.com": 2_000_000_000,
    }
)

KNOWN_DOMAIN_AUTHORITY: Mapping[str, int] = MappingProxyType(
    {
        "google.com": 100,
        "facebook.com": 96,
        "youtube.com": 100,
        "amazon.com": 96,
        "wikipedia.org": 93,
    }
)


def is_fully_known(domain: str) -> bool:
    """True if every metric of the domain comes from a lookup table."""
    return (
        domain in KNOWN_DOMAIN_AGES
        and domain in KNOWN_MONTHLY_TRAFFIC
        and domain in KNOWN_DOMAIN_AUTHORITY
    )
