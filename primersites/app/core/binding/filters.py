# File: primersites/app/core/binding/filters.py
# Version: v0.1.0
"""
Quality filter for search results.

- Length bounds apply to the full primer (overhang included).
- Tm and GC bounds apply only when the site carries a value.
"""

from __future__ import annotations

from typing import Iterable, List

from .models import BindingSite
from .parameters import BindingSiteFilters


def passes_filters(site: BindingSite, f: BindingSiteFilters) -> bool:
    length = len(site.primer_sequence)
    if not (f.minLength <= length <= f.maxLength):
        return False
    if site.tm is not None and not (f.minTm <= site.tm <= f.maxTm):
        return False
    if site.gc_percent is not None and not (f.minGc <= site.gc_percent <= f.maxGc):
        return False
    return True


def filter_binding_sites(sites: Iterable[BindingSite], filters: BindingSiteFilters) -> List[BindingSite]:
    """Keep sites within the quality bounds; ids and order are left untouched."""
    return [s for s in sites if passes_filters(s, filters)]
