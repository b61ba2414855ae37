# File: primersites/app/core/binding/constants.py
# Version: v0.1.0
"""
Constants and defaults for the binding-site search.

Quality filter defaults mirror the values used by the sequence editor's
"find primer binding sites" dialog.
"""

from __future__ import annotations

DEFAULT_MAX_MISMATCHES = 0
DEFAULT_MIN_BINDING_REGION = 12

# Outer surfaces (API / CLI) refuse shorter primers; the core does not.
MIN_PRIMER_LENGTH = 5

# 3' end stability window (bases), as in Primer3's PRIMER_MAX_END_STABILITY
END_STABILITY_WINDOW = 5

# Dominance: overlap strictly above this fraction of the shorter interval
OVERLAP_FRACTION = 0.5

DEFAULT_FILTER_MIN_LENGTH = 18
DEFAULT_FILTER_MAX_LENGTH = 30
DEFAULT_FILTER_MIN_TM = 50.0
DEFAULT_FILTER_MAX_TM = 70.0
DEFAULT_FILTER_MIN_GC = 35.0
DEFAULT_FILTER_MAX_GC = 65.0

SITE_ID_PREFIX = "binding-site"
ANNOTATION_TYPE = "primer_bind"
DEFAULT_ANNOTATION_NAME = "Primer"
