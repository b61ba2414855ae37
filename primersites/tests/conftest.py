# File: primersites/tests/conftest.py
# Version: v0.1.0
"""
Test bootstrap: project root on sys.path so 'primersites.*' imports work
without an editable install, plus shared sequences and fixtures.
"""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]  # repo root (../.. from this file)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from primersites.app.core.config import settings  # noqa: E402

# 20 bp and 30 bp primers with no internal repeats; filler is poly-A
PRIMER_20 = "GTCAGGCATTCGAGCTTACG"
PRIMER_30 = "GTCAGGCATTCGAGCTTACGGATCCTTGAC"


def embed(*parts, pad=30):
    """Join `parts` separated (and flanked) by `pad` bases of poly-A."""
    spacer = "A" * pad
    return spacer + spacer.join(parts) + spacer


@pytest.fixture
def params_dir(tmp_path, monkeypatch):
    """Point the stored-parameters directory at a temp dir."""
    monkeypatch.setattr(settings, "PARAMS_DIR", tmp_path)
    return tmp_path
