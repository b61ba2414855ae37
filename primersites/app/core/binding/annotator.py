# File: primersites/app/core/binding/annotator.py
# Version: v0.1.0
"""
Turn surviving raw candidates into BindingSite values with derived properties.

All properties (GC %, 3' stability, Tm) are computed over the binding
sequence only; the overhang never contributes. The Tm calculator is passed in
per call and may raise: that one field then degrades to None.
"""

from __future__ import annotations

import logging
from typing import Optional

from .models import BindingSite, RawCandidate
from .thermodynamics import TmCalculator, end_stability, gc_percent

log = logging.getLogger(__name__)


def _tm_or_none(seq: str, calculate_tm: Optional[TmCalculator]) -> Optional[float]:
    if calculate_tm is None or not seq:
        return None
    try:
        tm = calculate_tm(seq)
    except Exception as exc:
        log.debug("Tm calculation failed for %s: %s", seq, exc)
        return None
    return None if tm is None else float(tm)


def _stability_or_none(seq: str) -> Optional[float]:
    try:
        return end_stability(seq)
    except ValueError as exc:
        log.debug("3' stability unavailable for %s: %s", seq, exc)
        return None


def annotate(candidate: RawCandidate, primer: str, calculate_tm: Optional[TmCalculator] = None) -> BindingSite:
    """Build the BindingSite for `candidate` of the normalized `primer`."""
    o = candidate.overhang_length
    binding = primer[o:]
    full_mismatches = tuple(range(o)) + tuple(o + p for p in candidate.mismatch_positions)
    return BindingSite(
        start=candidate.start,
        end=candidate.end,
        forward=candidate.forward,
        num_mismatches=candidate.num_mismatches,
        mismatch_positions=candidate.mismatch_positions,
        matched_sequence=candidate.matched_sequence,
        primer_sequence=primer,
        binding_sequence=binding,
        overhang_sequence=primer[:o],
        overhang_length=o,
        full_primer_mismatch_positions=full_mismatches,
        tm=_tm_or_none(binding, calculate_tm),
        gc_percent=gc_percent(binding),
        stability_3prime=_stability_or_none(binding),
    )
