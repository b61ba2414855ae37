# File: primersites/tests/test_exports_config.py
# Version: v0.1.0
"""
Parameter files (defaults, atomic save/load) and result exporters
(JSON, CSV, GenBank with primer_bind features).
"""

from __future__ import annotations

import csv
import io
import json

import pytest
from Bio import SeqIO
from Bio.SeqFeature import CompoundLocation
from conftest import PRIMER_20, embed
from pydantic import ValidationError

from primersites.app.config.config_binding import (
    ensure_current_exists,
    load_current_params,
    load_default_params,
    load_params_file,
    save_current_params,
)
from primersites.app.core.binding.annotations import PrimerAnnotation, to_primer_annotations
from primersites.app.core.binding.parameters import BindingSearchParameters
from primersites.app.core.binding.search import find_primer_binding_sites
from primersites.app.core.binding.sequence import reverse_complement
from primersites.app.core.export.genbank_exporter import build_record, export_genbank_with_primers
from primersites.app.core.export.sites_exporter import export_sites_to_csv, export_sites_to_json


# ---------- parameters ----------

def test_packaged_defaults_match_model_defaults():
    assert load_default_params() == BindingSearchParameters()


def test_missing_current_falls_back_to_defaults(params_dir):
    assert load_current_params() == BindingSearchParameters()
    created, params = ensure_current_exists()
    assert created is True
    assert (params_dir / "binding_param.json").exists()
    assert ensure_current_exists() == (False, params)


def test_save_then_load(params_dir):
    p = BindingSearchParameters(maxMismatches=3, detectOverhang=False, tmMethod="gc")
    save_current_params(p)
    assert load_current_params() == p
    assert not list(params_dir.glob("*.tmp"))


def test_invalid_file_rejected(tmp_path):
    bad = tmp_path / "params.json"
    bad.write_text(json.dumps({"maxMismatches": 11}))
    with pytest.raises(ValidationError):
        load_params_file(bad)


# ---------- JSON / CSV ----------

def test_json_and_csv_exports(tmp_path):
    sites = find_primer_binding_sites(PRIMER_20, embed(PRIMER_20, reverse_complement(PRIMER_20)))
    export_sites_to_json(sites, tmp_path / "sites.json", meta={"primer": PRIMER_20})
    export_sites_to_csv(sites, tmp_path / "sites.csv")

    payload = json.loads((tmp_path / "sites.json").read_text())
    assert payload["primer"] == PRIMER_20
    assert [s["strand"] for s in payload["sites"]] == ["+", "-"]

    with (tmp_path / "sites.csv").open(newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["position"] for r in rows] == ["31-50", "81-100"]
    assert rows[0]["tm"] == ""
    assert rows[0]["gc_percent"] == "55.00"


# ---------- GenBank ----------

def test_genbank_features_for_linear_sites(tmp_path):
    template = embed(PRIMER_20, reverse_complement(PRIMER_20))
    sites = find_primer_binding_sites(PRIMER_20, template)
    out = tmp_path / "out.gb"
    export_genbank_with_primers(template, to_primer_annotations(sites, "P"), out, record_id="demo")

    rec = SeqIO.read(str(out), "genbank")
    assert rec.annotations["topology"] == "linear"
    feats = [f for f in rec.features if f.type == "primer_bind"]
    assert [f.qualifiers["label"][0] for f in feats] == ["P_1", "P_2"]
    assert [int(f.location.start) for f in feats] == [30, 80]
    assert [f.location.strand for f in feats] == [1, -1]
    assert str(feats[1].extract(rec.seq)) == PRIMER_20


def test_genbank_origin_spanning_feature():
    template = "A" * 50
    ann = PrimerAnnotation(name="wrap", start=45, end=4, forward=False, bases="C" * 10, strand=-1)
    rec = build_record(template, [ann], circular=True)
    loc = rec.features[0].location
    assert isinstance(loc, CompoundLocation)
    assert len(loc) == 10

    handle = io.StringIO()
    export_genbank_with_primers(template, [ann], handle, circular=True)
    text = handle.getvalue()
    assert "circular" in text
    assert "primer_bind" in text
