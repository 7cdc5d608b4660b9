"""Custom header blob parsing.

Some deployments put extra request headers (gateway tokens, tenant ids) into a
single secret string such as ``X-Org=acme,X-Gateway-Key=abc``. This helper
turns that string into a header mapping.

Parsing is lenient: a pair without ``=`` is dropped rather than failing
adapter construction. Each pair is split on its first ``=`` only, so values
may themselves contain ``=``. Keys and values are stripped of surrounding
whitespace; a later duplicate key replaces an earlier one.
"""
from __future__ import annotations

from typing import Dict


def parse_custom_headers(blob: str) -> Dict[str, str]:
    """Parse ``k1=v1,k2=v2`` into ``{"k1": "v1", "k2": "v2"}``.

    Parameters:
        blob: Comma-separated ``key=value`` pairs.

    Returns:
        Mapping of the well-formed pairs; malformed pairs are omitted.
    """
    headers: Dict[str, str] = {}
    for pair in blob.split(","):
        key, sep, value = pair.partition("=")
        if not sep:
            continue
        headers[key.strip()] = value.strip()
    return headers


__all__ = ["parse_custom_headers"]
