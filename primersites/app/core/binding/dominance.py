# File: primersites/app/core/binding/dominance.py
# Version: v0.2.0
"""
Collapse redundant candidates that describe the same physical binding site.

Two candidates on the same strand are duplicates if they:
1. share the coordinate paired with the primer 3' end, or
2. overlap by more than half of the shorter binding interval.

Ranking (better first):
1. fewer mismatches
2. shorter overhang (more of the primer anneals)
3. longer binding region
4. earlier in (start, overhang_length) order

The ranking is a strict total order per strand, so visiting candidates best
first and keeping those that duplicate no earlier survivor gives a unique
survivor set whatever order the candidates arrive in. Every loser is dropped
exactly once and never reconsidered.

Complexity is O(k^2) in the number of candidates; fine for the tens to low
hundreds seen in practice.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Set, Tuple

from .constants import OVERLAP_FRACTION
from .models import RawCandidate

log = logging.getLogger(__name__)


def position_key(c: RawCandidate) -> Tuple[int, int]:
    return (c.start, c.overhang_length)


def rank_key(c: RawCandidate, sort_position: int) -> Tuple[int, int, int, int]:
    return (c.num_mismatches, c.overhang_length, -c.binding_length, sort_position)


def overlap_length(a: RawCandidate, b: RawCandidate, seq_len: int, circular: bool) -> int:
    """Bases shared by the binding intervals of `a` and `b` (origin-aware if circular)."""
    a0, a1 = a.start, a.start + a.binding_length
    shifts = (-seq_len, 0, seq_len) if circular else (0,)
    total = 0
    for shift in shifts:
        b0 = b.start + shift
        b1 = b0 + b.binding_length
        total += max(0, min(a1, b1) - max(a0, b0))
    return min(total, a.binding_length, b.binding_length)


def is_duplicate(a: RawCandidate, b: RawCandidate, seq_len: int, circular: bool) -> bool:
    if a.forward != b.forward:
        return False
    if a.three_prime_end == b.three_prime_end:
        return True
    shorter = min(a.binding_length, b.binding_length)
    return overlap_length(a, b, seq_len, circular) > shorter * OVERLAP_FRACTION


def filter_dominated(candidates: Sequence[RawCandidate], seq_len: int, circular: bool = False) -> List[RawCandidate]:
    """
    Return the surviving candidates, preserving their input order.

    Args:
        candidates: raw candidates from both strands
        seq_len: template length (needed for circular overlaps)
        circular: whether intervals may wrap around the origin
    """
    if len(candidates) <= 1:
        return list(candidates)

    by_position = sorted(range(len(candidates)), key=lambda k: position_key(candidates[k]))
    sort_pos: Dict[int, int] = {k: p for p, k in enumerate(by_position)}
    ranked = sorted(range(len(candidates)), key=lambda k: rank_key(candidates[k], sort_pos[k]))

    survivors: List[int] = []
    dominated: Set[int] = set()
    for k in ranked:
        c = candidates[k]
        if any(is_duplicate(candidates[s], c, seq_len, circular) for s in survivors):
            dominated.add(k)
        else:
            survivors.append(k)

    log.debug("filter_dominated: kept %d, dropped %d", len(survivors), len(dominated))
    kept = set(survivors)
    return [c for k, c in enumerate(candidates) if k in kept]
