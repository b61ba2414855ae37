# File: primersites/app/core/binding/search.py
# Version: v0.3.0
"""
Primer binding-site search (entry point).

Pipeline
--------
normalize -> scan + strand (matcher per window) -> dominance filter
-> annotate (GC, 3' stability, optional Tm) -> sort + ids

The search is a pure function of its arguments (plus the injected Tm
calculator): repeated calls with equal inputs return equal lists in equal
order. It never raises for "nothing found" or unsatisfiable settings such as
`min_binding_region > len(primer)` or a negative mismatch budget; those
simply return [].
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from .annotator import annotate
from .constants import DEFAULT_MAX_MISMATCHES, DEFAULT_MIN_BINDING_REGION, SITE_ID_PREFIX
from .dominance import filter_dominated
from .models import BindingSite
from .parameters import BindingSearchParameters
from .scanner import scan_strand
from .sequence import normalize_primer, normalize_template
from .thermodynamics import TmCalculator, get_tm_calculator

log = logging.getLogger(__name__)


def assemble(sites: Iterable[BindingSite]) -> List[BindingSite]:
    """Stable-sort by (start, overhang_length) and assign `binding-site-{i}` ids."""
    ordered = sorted(sites, key=lambda s: (s.start, s.overhang_length))
    return [replace(s, id=f"{SITE_ID_PREFIX}-{i}") for i, s in enumerate(ordered)]


def find_primer_binding_sites(
    primer_sequence: str,
    full_sequence: str,
    max_mismatches: int = DEFAULT_MAX_MISMATCHES,
    search_reverse_strand: bool = True,
    is_circular: bool = False,
    calculate_tm: Optional[TmCalculator] = None,
    min_binding_region: int = DEFAULT_MIN_BINDING_REGION,
    detect_overhang: bool = True,
) -> List[BindingSite]:
    """
    Find every site where `primer_sequence` (5'->3') may anneal on `full_sequence`.

    Args:
        primer_sequence: primer, any case; whitespace is ignored
        full_sequence: template (plus strand), any case
        max_mismatches: mismatch budget inside the binding region
        search_reverse_strand: also look for antisense sites
        is_circular: windows may wrap around the template origin
        calculate_tm: optional str -> float; failures leave `tm` as None
        min_binding_region: exact-match seed required at the primer 3' end
        detect_overhang: split off a non-binding 5' overhang; when False the
            whole primer is compared by Hamming distance

    Returns:
        BindingSite list sorted by start, then overhang length.
    """
    primer = normalize_primer(primer_sequence)
    template = normalize_template(full_sequence)
    if not primer or not template:
        return []

    raw = scan_strand(primer, template, True, max_mismatches, is_circular, min_binding_region, detect_overhang)
    if search_reverse_strand:
        raw += scan_strand(primer, template, False, max_mismatches, is_circular, min_binding_region, detect_overhang)

    kept = filter_dominated(raw, len(template), is_circular)
    sites = assemble(annotate(c, primer, calculate_tm) for c in kept)
    log.debug("find_primer_binding_sites: primer=%d bp template=%d bp raw=%d sites=%d", len(primer), len(template), len(raw), len(sites))
    return sites


def search(primer_sequence: str, full_sequence: str, params: BindingSearchParameters) -> List[BindingSite]:
    """Run the search with a validated parameter model (API / CLI entry)."""
    return find_primer_binding_sites(
        primer_sequence,
        full_sequence,
        max_mismatches=params.maxMismatches,
        search_reverse_strand=params.searchReverseStrand,
        is_circular=params.isCircular,
        calculate_tm=get_tm_calculator(params.tmMethod),
        min_binding_region=params.minBindingRegion,
        detect_overhang=params.detectOverhang,
    )
