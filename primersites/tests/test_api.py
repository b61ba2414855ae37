# File: primersites/tests/test_api.py
# Version: v0.1.1
"""
HTTP API: health, search, annotations and stored parameters.
"""

from __future__ import annotations

import json

from conftest import PRIMER_20, embed
from fastapi.testclient import TestClient

from primersites.app.core.binding.sequence import reverse_complement
from primersites.app.main import app

client = TestClient(app)
BASE = "/api/v1/binding-sites"


def test_health():
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert body["app"] == "PrimerSites"
    assert body["tmMethods"] == ["gc", "nn", "wallace", "none"]
    assert client.get("/healthz").status_code == 200


def test_search_with_explicit_parameters(params_dir):
    template = embed(PRIMER_20, reverse_complement(PRIMER_20))
    r = client.post(
        f"{BASE}/search",
        json={"primer": PRIMER_20.lower(), "template": template, "parameters": {"maxMismatches": 1, "tmMethod": "none"}},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["length"] == len(template)
    assert body["total"] == 2
    first, second = body["sites"]
    assert (first["start"], first["end"], first["strand"]) == (30, 49, "+")
    assert (second["start"], second["strand"]) == (80, "-")
    assert first["id"] == "binding-site-0"
    assert first["tm"] is None
    assert first["bindingSequence"] == PRIMER_20
    assert first["hasOverhang"] is False


def test_search_uses_stored_parameters(params_dir):
    (params_dir / "binding_param.json").write_text(json.dumps({"searchReverseStrand": False}))
    template = embed(PRIMER_20, reverse_complement(PRIMER_20))
    body = client.post(f"{BASE}/search", json={"primer": PRIMER_20, "template": template}).json()
    assert body["total"] == 1
    assert body["sites"][0]["forward"] is True


def test_search_applies_filters(params_dir):
    template = embed(PRIMER_20)
    r = client.post(
        f"{BASE}/search",
        json={"primer": PRIMER_20, "template": template, "filters": {"minGc": 60, "maxGc": 80}},
    )
    body = r.json()
    assert body["total"] == 1
    assert body["sites"] == []


def test_search_validation_errors(params_dir):
    r = client.post(f"{BASE}/search", json={"primer": "AC GT", "template": "ACGTACGT"})
    assert r.status_code == 422
    assert "at least 5" in r.text

    r = client.post(f"{BASE}/search", json={"primer": PRIMER_20, "template": "ACGT", "parameters": {"maxMismatches": -1}})
    assert r.status_code == 422

    r = client.post(
        f"{BASE}/search",
        json={"primer": PRIMER_20, "template": "ACGT", "filters": {"minTm": 70, "maxTm": 60}},
    )
    assert r.status_code == 422


def test_annotations_from_search_results(params_dir):
    primer = "GAATTC" + PRIMER_20
    template = embed(PRIMER_20, reverse_complement(PRIMER_20))
    sites = client.post(f"{BASE}/search", json={"primer": primer, "template": template}).json()["sites"]
    assert len(sites) == 2

    r = client.post(f"{BASE}/annotations", json={"sites": sites, "baseName": "EcoF"})
    assert r.status_code == 200
    anns = r.json()["annotations"]
    assert [a["name"] for a in anns] == ["EcoF_1", "EcoF_2"]
    assert [a["strand"] for a in anns] == [1, -1]
    assert all(a["bases"] == primer for a in anns)
    assert all(a["type"] == "primer_bind" for a in anns)


def test_annotations_require_selection():
    r = client.post(f"{BASE}/annotations", json={"sites": []})
    assert r.status_code == 400
    assert "at least one" in r.json()["detail"]


def test_parameters_roundtrip(params_dir):
    r = client.get(f"{BASE}/parameters")
    assert r.status_code == 200
    assert r.json()["minBindingRegion"] == 12
    assert (params_dir / "binding_param.json").exists()

    new = {**r.json(), "maxMismatches": 2, "isCircular": True}
    assert client.put(f"{BASE}/parameters", json=new).status_code == 200
    assert client.get(f"{BASE}/parameters").json()["maxMismatches"] == 2

    assert client.put(f"{BASE}/parameters", json={**new, "tmMethod": "bogus"}).status_code == 422
