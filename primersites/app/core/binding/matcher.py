# File: primersites/app/core/binding/matcher.py
# Version: v0.3.1
"""
Seed-and-extend matching of a primer against one template window.

Approach:
- The window has the primer's length and is aligned base-for-base (ungapped).
- The anchor base (primer 3' end) must match; the exact-match run from the
  anchor inwards is the *seed* and must reach `min_binding_region`.
- With overhang detection the match is then extended towards the 5' end,
  spending the mismatch budget. Mismatches left at the 5' edge of the
  extension are given back, so the region always ends on a paired base;
  whatever is left over is the 5' overhang.
- Without overhang detection the whole window is compared once (Hamming
  distance) and there is no overhang.

Anchors:
- THREE_PRIME: pattern is the primer itself; its 3' end is the last index.
- FIVE_PRIME: pattern is the reverse complement of the primer; index 0 pairs
  with the primer's 3' end and extension walks towards the last index.

Returned mismatch offsets are *pattern* indices; mapping them back to
original-primer coordinates is the scanner's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

THREE_PRIME = "3p"
FIVE_PRIME = "5p"


@dataclass(frozen=True)
class WindowMatch:
    binding_length: int
    mismatch_offsets: Tuple[int, ...]   # ascending pattern indices
    seed_length: int


def _walk_order(n: int, anchor: str) -> range:
    if anchor == THREE_PRIME:
        return range(n - 1, -1, -1)
    if anchor == FIVE_PRIME:
        return range(n)
    raise ValueError(f"Unknown anchor {anchor!r}")


def seed_length(pattern: str, window: str, anchor: str = THREE_PRIME) -> int:
    """Length of the exact-match run starting at the anchored end."""
    run = 0
    for i in _walk_order(len(pattern), anchor):
        if pattern[i] != window[i]:
            break
        run += 1
    return run


def match_window(
    pattern: str,
    window: str,
    max_mismatches: int,
    min_binding_region: int,
    detect_overhang: bool = True,
    anchor: str = THREE_PRIME,
) -> Optional[WindowMatch]:
    """
    Validate the anchored seed of `pattern` on `window` and size the binding region.

    Returns:
        WindowMatch, or None when the window is rejected (anchor base differs,
        seed shorter than `min_binding_region`, budget exceeded or negative).
    """
    n = len(pattern)
    if n == 0 or len(window) != n or max_mismatches < 0:
        return None

    order = _walk_order(n, anchor)
    seed = seed_length(pattern, window, anchor)
    # Anchor base must pair; checked separately so min_binding_region <= 0 keeps it
    if seed == 0 or seed < min_binding_region:
        return None

    if not detect_overhang:
        mism = [i for i in range(n) if pattern[i] != window[i]]
        if len(mism) > max_mismatches:
            return None
        return WindowMatch(binding_length=n, mismatch_offsets=tuple(mism), seed_length=seed)

    extended: List[int] = []
    covered = seed
    while covered < n:
        i = order[covered]
        if pattern[i] != window[i]:
            if len(extended) == max_mismatches:
                break
            extended.append(i)
        covered += 1

    # Binding region ends on a paired base; trailing mismatches belong to the overhang
    while extended and extended[-1] == order[covered - 1]:
        extended.pop()
        covered -= 1

    return WindowMatch(
        binding_length=covered,
        mismatch_offsets=tuple(sorted(extended)),
        seed_length=seed,
    )
