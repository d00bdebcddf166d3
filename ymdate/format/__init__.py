"""Canonical date string formatting and parsing.

This module provides the YYYY-MM-DD codec:
    - decompose: string to YMD triple
    - compose: YMD-like value to string
    - matches_canonical: pattern check only

Examples:
    >>> from ymdate.format import compose, decompose
    >>> compose(decompose("2024-01-15"))
    '2024-01-15'
"""

from __future__ import annotations

from ymdate.format.canonical import YMD, compose, decompose, matches_canonical

__all__ = [
    "YMD",
    "compose",
    "decompose",
    "matches_canonical",
]
