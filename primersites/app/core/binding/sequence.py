# File: primersites/app/core/binding/sequence.py
# Version: v0.1.0
"""
Sequence normalization and strand generation.

- Primer: upper-cased, all whitespace removed.
- Template: upper-cased only (no other cleanup).
- Complement maps A<->T and G<->C; any other symbol maps to itself, so
  ambiguous bases (N, R, ...) are compared literally downstream.
"""

from __future__ import annotations

import re

_WS = re.compile(r"\s+")
_COMPLEMENT = str.maketrans("ACGT", "TGCA")


def normalize_primer(seq: str) -> str:
    """Upper-case the primer and strip every whitespace character."""
    return _WS.sub("", (seq or "").upper())


def normalize_template(seq: str) -> str:
    return (seq or "").upper()


def complement(seq: str) -> str:
    return seq.translate(_COMPLEMENT)


def reverse_complement(seq: str) -> str:
    """Reverse-complement (A<->T, C<->G; other symbols unchanged)."""
    return seq.translate(_COMPLEMENT)[::-1]

