# File: primersites/app/core/binding/models.py
# Version: v0.1.0
"""
Value types produced by the binding-site search.

Coordinates
-----------
- `start`/`end` are 0-based, *inclusive*, on the plus strand and cover the
  binding (non-overhang) region only.
- On a circular template a site crossing the origin has `start > end`.

Primer indexing
---------------
Mismatch positions are always expressed in original-primer 5'->3'
coordinates, whichever strand the primer anneals to:

Fwd primer (5'->3')      oooo>>>>>>>>>>>>>>>>
Template (+)        ATTACCGATACCAATTGACCAGTTGGGACCCAGTTGACCAGTTGGACC
Rev primer (3'<-5')                        <<<<<<<<<<<<<<<<oooo
                    (o = overhang, never counted as a mismatch)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class RawCandidate:
    """Scanner output: one accepted window before filtering/annotation."""
    start: int
    end: int
    forward: bool
    num_mismatches: int
    mismatch_positions: Tuple[int, ...]   # relative to the binding region
    overhang_length: int
    binding_length: int
    matched_sequence: str

    @property
    def three_prime_end(self) -> int:
        """Plus-strand coordinate of the base paired with the primer 3' end."""
        return self.end if self.forward else self.start


@dataclass(frozen=True)
class BindingSite:
    start: int
    end: int
    forward: bool
    num_mismatches: int
    mismatch_positions: Tuple[int, ...]
    matched_sequence: str
    primer_sequence: str
    binding_sequence: str
    overhang_sequence: str
    overhang_length: int
    full_primer_mismatch_positions: Tuple[int, ...]
    tm: Optional[float] = None
    gc_percent: Optional[float] = None
    stability_3prime: Optional[float] = None
    id: str = ""

    @property
    def strand(self) -> str:
        return "+" if self.forward else "-"

    @property
    def has_overhang(self) -> bool:
        return self.overhang_length > 0

    def to_dict(self) -> Dict[str, Any]:
        """camelCase record consumed by the results table / preview / annotation UI."""
        return {
            "id": self.id,
            "start": self.start,
            "end": self.end,
            "forward": self.forward,
            "strand": self.strand,
            "numMismatches": self.num_mismatches,
            "mismatchPositions": list(self.mismatch_positions),
            "matchedSequence": self.matched_sequence,
            "primerSequence": self.primer_sequence,
            "bindingSequence": self.binding_sequence,
            "overhangSequence": self.overhang_sequence,
            "overhangLength": self.overhang_length,
            "hasOverhang": self.has_overhang,
            "fullPrimerMismatchPositions": list(self.full_primer_mismatch_positions),
            "tm": self.tm,
            "gcPercent": self.gc_percent,
            "stability3Prime": self.stability_3prime,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "BindingSite":
        """Inverse of `to_dict` (derived keys `strand`/`hasOverhang` are ignored)."""
        return cls(
            start=int(d["start"]),
            end=int(d["end"]),
            forward=bool(d["forward"]),
            num_mismatches=int(d["numMismatches"]),
            mismatch_positions=tuple(d.get("mismatchPositions") or ()),
            matched_sequence=d.get("matchedSequence", ""),
            primer_sequence=d["primerSequence"],
            binding_sequence=d.get("bindingSequence", ""),
            overhang_sequence=d.get("overhangSequence", ""),
            overhang_length=int(d.get("overhangLength", 0)),
            full_primer_mismatch_positions=tuple(d.get("fullPrimerMismatchPositions") or ()),
            tm=d.get("tm"),
            gc_percent=d.get("gcPercent"),
            stability_3prime=d.get("stability3Prime"),
            id=d.get("id", ""),
        )
