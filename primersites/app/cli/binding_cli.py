# File: primersites/app/cli/binding_cli.py
# Version: v0.1.0
"""
CLI for primer binding-site search.

- Template is read with Biopython (FASTA, or GenBank for .gb/.gbk/.genbank);
  exactly one record is expected. A GenBank 'circular' topology marks the
  template circular unless --circular/--linear says otherwise.
- Parameters come from --params-json (camelCase BindingSearchParameters) or
  the packaged defaults; individual flags override them.
- Writes binding_sites.json and binding_sites.csv; with --genbank also writes
  binding_sites.gb with one primer_bind feature per reported site.

Usage:
    python -m primersites.app.cli.binding_cli \
        --template data/pUC19.gb \
        --primer "GAATTC ACGTTGTAAAACGACGGCCAGT" \
        --outdir out/binding \
        [--params-json binding_param.json] [--max-mismatches 1] \
        [--circular | --linear] [--no-reverse] [--min-binding 12] \
        [--no-overhang] [--tm-method nn] [--filter] [--genbank] \
        [--log-level DEBUG]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple

from Bio import SeqIO

from primersites.app.config.config_binding import load_default_params, load_params_file
from primersites.app.core.binding.annotations import to_primer_annotations
from primersites.app.core.binding.constants import MIN_PRIMER_LENGTH
from primersites.app.core.binding.filters import filter_binding_sites
from primersites.app.core.binding.parameters import BindingSearchParameters, BindingSiteFilters
from primersites.app.core.binding.search import search
from primersites.app.core.binding.sequence import normalize_primer
from primersites.app.core.export.genbank_exporter import export_genbank_with_primers
from primersites.app.core.export.sites_exporter import export_sites_to_csv, export_sites_to_json

_GENBANK_SUFFIXES = {".gb", ".gbk", ".genbank"}


# ---------- IO helpers ----------

def read_template(path: Path) -> Tuple[str, str, bool]:
    """Return (name, sequence, is_circular). Enforces exactly one record."""
    fmt = "genbank" if path.suffix.lower() in _GENBANK_SUFFIXES else "fasta"
    records = list(SeqIO.parse(str(path), fmt))
    if not records:
        raise ValueError(f"No {fmt} record found in {path}.")
    if len(records) > 1:
        raise ValueError(f"Multiple records found in {path}. Provide a single-sequence file.")
    rec = records[0]
    circular = str(rec.annotations.get("topology", "linear")).lower() == "circular"
    return rec.id or "template", str(rec.seq).upper(), circular


def resolve_params(args: argparse.Namespace, file_circular: bool) -> BindingSearchParameters:
    params = load_params_file(args.params_json) if args.params_json else load_default_params()
    update = {}
    if args.max_mismatches is not None:
        update["maxMismatches"] = args.max_mismatches
    if args.min_binding is not None:
        update["minBindingRegion"] = args.min_binding
    if args.no_reverse:
        update["searchReverseStrand"] = False
    if args.no_overhang:
        update["detectOverhang"] = False
    if args.tm_method is not None:
        update["tmMethod"] = args.tm_method
    if args.circular is not None:
        update["isCircular"] = args.circular
    elif file_circular:
        update["isCircular"] = True
    # Re-validate so CLI overrides obey the same bounds as the JSON
    return BindingSearchParameters.model_validate({**params.model_dump(), **update})


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Find primer binding sites on a template")
    p.add_argument("--template", required=True, type=Path, help="FASTA or GenBank file with one record")
    p.add_argument("--primer", required=True, help="Primer sequence 5'->3' (whitespace ignored)")
    p.add_argument("--outdir", required=True, type=Path)
    p.add_argument("--params-json", type=Path, help="Path to JSON with BindingSearchParameters (camelCase)")
    p.add_argument("--max-mismatches", type=int, help="Mismatches allowed in the binding region")
    p.add_argument("--min-binding", type=int, help="Exact-match seed length at the primer 3' end")
    p.add_argument("--no-reverse", action="store_true", help="Do not search the antisense strand")
    p.add_argument("--no-overhang", action="store_true", help="Whole-primer Hamming match (no 5' overhang)")
    p.add_argument("--tm-method", choices=["nn", "wallace", "gc", "none"])
    topo = p.add_mutually_exclusive_group()
    topo.add_argument("--circular", dest="circular", action="store_const", const=True, help="Treat template as circular")
    topo.add_argument("--linear", dest="circular", action="store_const", const=False, help="Treat template as linear")
    p.add_argument("--filter", action="store_true", help="Apply default quality filters (length, Tm, GC)")
    p.add_argument("--genbank", action="store_true", help="Also write an annotated GenBank file")
    p.add_argument("--primer-name", default="Primer", help="Base name for GenBank primer features")
    p.add_argument("--log-level", dest="log_level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: INFO)")
    return p


# ---------- Main ----------

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))
    log = logging.getLogger("binding_cli")

    try:
        primer = normalize_primer(args.primer)
        if len(primer) < MIN_PRIMER_LENGTH:
            raise ValueError(f"Primer sequence must be at least {MIN_PRIMER_LENGTH} bases long")

        name, seq, file_circular = read_template(args.template)
        params = resolve_params(args, file_circular)
        log.info("TEMPLATE=%s (%d bp, %s) | PRIMER=%d bp | OUTDIR=%s",
                 name, len(seq), "circular" if params.isCircular else "linear", len(primer), args.outdir)

        sites = search(primer, seq, params)
        total = len(sites)
        if args.filter:
            sites = filter_binding_sites(sites, BindingSiteFilters())

        args.outdir.mkdir(parents=True, exist_ok=True)
        meta = {
            "template": {"name": name, "length": len(seq), "circular": params.isCircular},
            "primer": primer,
            "parameters": params.model_dump(),
            "total": total,
        }
        out_json = args.outdir / "binding_sites.json"
        export_sites_to_json(sites, out_json, meta=meta)
        export_sites_to_csv(sites, args.outdir / "binding_sites.csv")

        if args.genbank and sites:
            annotations = to_primer_annotations(sites, args.primer_name)
            export_genbank_with_primers(
                seq, annotations, args.outdir / "binding_sites.gb",
                record_id=name, circular=params.isCircular,
            )

        print(f"[OK] {len(sites)} binding site(s) ({total} before filters). Wrote {out_json}")
        return 0

    except Exception as ex:
        print(f"[ERROR] {ex}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
