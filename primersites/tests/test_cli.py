# File: primersites/tests/test_cli.py
# Version: v0.1.0
"""
Command-line entry: template IO, parameter overrides, output files.
"""

from __future__ import annotations

import json

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord
from conftest import PRIMER_20, embed

from primersites.app.cli.binding_cli import main
from primersites.app.core.binding.sequence import reverse_complement


def _write_fasta(path, seq, name="tpl"):
    path.write_text(f">{name}\n{seq}\n")
    return path


def _write_genbank(path, seq, circular):
    rec = SeqRecord(Seq(seq), id="tpl", name="tpl", description="test template")
    rec.annotations["molecule_type"] = "DNA"
    rec.annotations["topology"] = "circular" if circular else "linear"
    SeqIO.write(rec, str(path), "genbank")
    return path


def test_cli_writes_json_and_csv(tmp_path, capsys):
    tpl = _write_fasta(tmp_path / "t.fa", embed(PRIMER_20, reverse_complement(PRIMER_20)))
    out = tmp_path / "out"
    rc = main(["--template", str(tpl), "--primer", PRIMER_20, "--outdir", str(out), "--tm-method", "none"])
    assert rc == 0
    assert "[OK] 2 binding site(s)" in capsys.readouterr().out

    payload = json.loads((out / "binding_sites.json").read_text())
    assert payload["total"] == 2
    assert payload["template"]["circular"] is False
    assert [s["strand"] for s in payload["sites"]] == ["+", "-"]
    assert (out / "binding_sites.csv").exists()
    assert not (out / "binding_sites.gb").exists()


def test_cli_no_reverse_and_genbank(tmp_path):
    tpl = _write_fasta(tmp_path / "t.fa", embed(PRIMER_20, reverse_complement(PRIMER_20)))
    out = tmp_path / "out"
    rc = main([
        "--template", str(tpl), "--primer", PRIMER_20, "--outdir", str(out),
        "--no-reverse", "--genbank", "--primer-name", "M13",
    ])
    assert rc == 0
    rec = SeqIO.read(str(out / "binding_sites.gb"), "genbank")
    feats = [f for f in rec.features if f.type == "primer_bind"]
    assert len(feats) == 1
    assert feats[0].qualifiers["label"] == ["M13"]


def test_cli_takes_topology_from_genbank(tmp_path):
    template = PRIMER_20[10:] + "A" * 30 + PRIMER_20[:10]
    tpl = _write_genbank(tmp_path / "t.gb", template, circular=True)

    out = tmp_path / "circ"
    assert main(["--template", str(tpl), "--primer", PRIMER_20, "--outdir", str(out)]) == 0
    sites = json.loads((out / "binding_sites.json").read_text())["sites"]
    assert [(s["start"], s["end"]) for s in sites] == [(40, 9)]

    out = tmp_path / "lin"
    assert main(["--template", str(tpl), "--primer", PRIMER_20, "--outdir", str(out), "--linear"]) == 0
    assert json.loads((out / "binding_sites.json").read_text())["sites"] == []


def test_cli_params_json_and_overrides(tmp_path):
    mutated = PRIMER_20[:2] + "A" + PRIMER_20[3:]
    tpl = _write_fasta(tmp_path / "t.fa", embed(mutated))
    params = tmp_path / "p.json"
    params.write_text(json.dumps({"maxMismatches": 1, "detectOverhang": False, "tmMethod": "none"}))

    out = tmp_path / "a"
    assert main(["--template", str(tpl), "--primer", PRIMER_20, "--outdir", str(out), "--params-json", str(params)]) == 0
    payload = json.loads((out / "binding_sites.json").read_text())
    assert payload["parameters"]["maxMismatches"] == 1
    assert [s["numMismatches"] for s in payload["sites"]] == [1]

    out = tmp_path / "b"
    assert main([
        "--template", str(tpl), "--primer", PRIMER_20, "--outdir", str(out),
        "--params-json", str(params), "--max-mismatches", "0",
    ]) == 0
    assert json.loads((out / "binding_sites.json").read_text())["sites"] == []


def test_cli_errors_exit_2(tmp_path, capsys):
    tpl = _write_fasta(tmp_path / "t.fa", embed(PRIMER_20))
    assert main(["--template", str(tpl), "--primer", "ACG", "--outdir", str(tmp_path / "o")]) == 2
    assert "[ERROR] Primer sequence must be at least 5" in capsys.readouterr().err

    two = tmp_path / "two.fa"
    two.write_text(">a\nACGTACGT\n>b\nACGTACGT\n")
    assert main(["--template", str(two), "--primer", PRIMER_20, "--outdir", str(tmp_path / "o")]) == 2

    assert main([
        "--template", str(tpl), "--primer", PRIMER_20, "--outdir", str(tmp_path / "o"), "--max-mismatches", "99",
    ]) == 2
