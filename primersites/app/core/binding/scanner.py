# File: primersites/app/core/binding/scanner.py
# Version: v0.2.0
"""
Slide the seed-and-extend matcher over every template window of one strand.

- Linear templates: only windows that fit entirely inside the template.
- Circular templates: one window per offset 0..N-1; windows may straddle the
  origin. A primer longer than the circular template has no windows.
- Reverse strand: the primer's reverse complement is matched on the plus
  strand with a 5' anchor; reverse-complement index r pairs with primer
  index L-1-r.

Cost is O(N * L) per strand.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from .matcher import FIVE_PRIME, THREE_PRIME, match_window
from .models import RawCandidate
from .sequence import reverse_complement

log = logging.getLogger(__name__)


def iter_windows(template: str, length: int, circular: bool) -> Iterator[Tuple[int, str]]:
    """Yield (offset, window) for every primer-length window of `template`."""
    n = len(template)
    if length <= 0 or length > n:
        return
    if circular:
        extended = template + template[: length - 1]
        offsets = range(n)
    else:
        extended = template
        offsets = range(n - length + 1)
    for i in offsets:
        yield i, extended[i : i + length]


def scan_strand(
    primer: str,
    template: str,
    forward: bool,
    max_mismatches: int,
    circular: bool,
    min_binding_region: int,
    detect_overhang: bool,
) -> List[RawCandidate]:
    """
    Return every accepted window on one strand, in offset order.

    `primer` and `template` must already be normalized.
    """
    L = len(primer)
    n = len(template)
    pattern = primer if forward else reverse_complement(primer)
    anchor = THREE_PRIME if forward else FIVE_PRIME

    out: List[RawCandidate] = []
    for i, window in iter_windows(template, L, circular):
        m = match_window(pattern, window, max_mismatches, min_binding_region, detect_overhang, anchor)
        if m is None:
            continue

        b = m.binding_length
        overhang = L - b
        if forward:
            first = i + overhang
            rel = tuple(j - overhang for j in m.mismatch_offsets)
            matched = window[overhang:]
        else:
            first = i
            rel = tuple(sorted(L - 1 - r - overhang for r in m.mismatch_offsets))
            matched = window[:b]

        out.append(
            RawCandidate(
                start=first % n,
                end=(first + b - 1) % n,
                forward=forward,
                num_mismatches=len(rel),
                mismatch_positions=rel,
                overhang_length=overhang,
                binding_length=b,
                matched_sequence=matched,
            )
        )

    log.debug("scan_strand(%s): %d candidate(s) over %d bp (circular=%s)", "+" if forward else "-", len(out), n, circular)
    return out
