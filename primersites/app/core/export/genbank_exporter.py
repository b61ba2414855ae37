# File: primersites/app/core/export/genbank_exporter.py
# Version: v0.1.0
"""
GenBank exporter: template sequence plus one `primer_bind` feature per annotation.

Notes
-----
- Annotation `start`/`end` are 0-based inclusive; Biopython locations are
  0-based end-exclusive, so features span [start, end + 1).
- A site crossing the origin of a circular template (start > end) becomes a
  join of [start, N) and [0, end + 1), listed in 5'->3' order of its strand.
- Required GenBank annotations (molecule_type, topology) are always set.
"""

from __future__ import annotations

from typing import Optional, Sequence

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqFeature import CompoundLocation, FeatureLocation, SeqFeature
from Bio.SeqRecord import SeqRecord

from primersites.app.core.binding.annotations import PrimerAnnotation


def _location(a: PrimerAnnotation, seq_len: int):
    if a.start <= a.end:
        return FeatureLocation(a.start, a.end + 1, strand=a.strand)
    head = FeatureLocation(a.start, seq_len, strand=a.strand)
    tail = FeatureLocation(0, a.end + 1, strand=a.strand)
    parts = [head, tail] if a.strand == 1 else [tail, head]
    return CompoundLocation(parts)


def _mk_feature(a: PrimerAnnotation, seq_len: int) -> SeqFeature:
    qualifiers = {
        "label": [a.name],
        "note": [f"primer: {a.bases}"],
    }
    return SeqFeature(location=_location(a, seq_len), type=a.type, qualifiers=qualifiers)


def build_record(
    template: str,
    annotations: Sequence[PrimerAnnotation],
    *,
    record_id: str = "template",
    circular: bool = False,
    definition: Optional[str] = None,
) -> SeqRecord:
    rec = SeqRecord(
        Seq(template.upper()),
        id=record_id or "template",
        name=(record_id or "template")[:16],
        description=definition or ".",
    )
    rec.annotations["molecule_type"] = "DNA"
    rec.annotations["topology"] = "circular" if circular else "linear"
    rec.annotations.setdefault("data_file_division", "UNC")
    for a in annotations:
        rec.features.append(_mk_feature(a, len(template)))
    return rec


def export_genbank_with_primers(
    template: str,
    annotations: Sequence[PrimerAnnotation],
    out_path,
    *,
    record_id: str = "template",
    circular: bool = False,
    definition: Optional[str] = None,
) -> None:
    """Write `template` with primer_bind features to `out_path` (path or handle)."""
    rec = build_record(template, annotations, record_id=record_id, circular=circular, definition=definition)
    if hasattr(out_path, "write"):
        SeqIO.write(rec, out_path, "genbank")
    else:
        SeqIO.write(rec, str(out_path), "genbank")
