# File: primersites/app/core/binding/annotations.py
# Version: v0.1.0
"""
Materialize selected binding sites as primer annotations for a host document.

Each annotation records the binding interval, orientation and the *full*
primer bases (overhang included). With several sites the names are
`{base}_1`, `{base}_2`, ...; a single site keeps the base name.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Sequence

from .constants import ANNOTATION_TYPE, DEFAULT_ANNOTATION_NAME
from .models import BindingSite


@dataclass(frozen=True)
class PrimerAnnotation:
    name: str
    start: int
    end: int
    forward: bool
    bases: str
    strand: int              # 1 or -1
    type: str = ANNOTATION_TYPE

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def to_primer_annotations(sites: Sequence[BindingSite], base_name: str = DEFAULT_ANNOTATION_NAME) -> List[PrimerAnnotation]:
    """
    Build one primer annotation per selected site.

    Raises:
        ValueError: no site selected.
    """
    if not sites:
        raise ValueError("Select at least one binding site")
    base = base_name.strip() or DEFAULT_ANNOTATION_NAME
    many = len(sites) > 1
    return [
        PrimerAnnotation(
            name=f"{base}_{i + 1}" if many else base,
            start=s.start,
            end=s.end,
            forward=s.forward,
            bases=s.primer_sequence,
            strand=1 if s.forward else -1,
        )
        for i, s in enumerate(sites)
    ]
