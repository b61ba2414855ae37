# File: primersites/app/config/config_binding.py
# Version: v0.1.0
"""
Binding-site search parameters loader/saver.

- Reads defaults from: primersites/app/config/binding_param_default.json (packaged)
- Reads/writes current from: <settings.PARAMS_DIR>/binding_param.json
- Validates payloads with BindingSearchParameters (Pydantic)

Usage:
    from primersites.app.config.config_binding import load_current_params, save_current_params

Example JSON (camelCase keys):

  {
    "maxMismatches": 0,
    "searchReverseStrand": true,
    "isCircular": false,
    "minBindingRegion": 12,
    "detectOverhang": true,
    "tmMethod": "nn"
  }

Thread-safety:
- Uses atomic writes (tmp + replace) to avoid partial/dirty writes.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from primersites.app.core.binding.parameters import BindingSearchParameters
from primersites.app.core.config import settings

log = logging.getLogger(__name__)

# Resolve config directory relative to this file
_THIS_DIR = Path(__file__).resolve().parent
DEFAULT_FILE = _THIS_DIR / "binding_param_default.json"
CURRENT_NAME = "binding_param.json"


def current_file() -> Path:
    return Path(settings.PARAMS_DIR) / CURRENT_NAME


def _read_json(path: Path) -> dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _atomic_write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    with tmp.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")
    os.replace(tmp, path)


def load_params_file(path: Path) -> BindingSearchParameters:
    """Load and validate a parameters JSON file (missing keys take defaults)."""
    return BindingSearchParameters.model_validate(_read_json(path))


def load_default_params() -> BindingSearchParameters:
    """Load default search parameters from binding_param_default.json."""
    return load_params_file(DEFAULT_FILE)


def load_current_params(fallback_to_default: bool = True, path: Optional[Path] = None) -> BindingSearchParameters:
    """
    Load current (editable) search parameters.
    If the file is missing/empty and fallback is True, return defaults.
    """
    payload = _read_json(path or current_file())
    if not payload and fallback_to_default:
        return load_default_params()
    return BindingSearchParameters.model_validate(payload or {})


def save_current_params(params: BindingSearchParameters, path: Optional[Path] = None) -> None:
    """Persist current parameters (atomic write)."""
    target = path or current_file()
    _atomic_write_json(target, params.model_dump())
    log.info("Saved binding parameters to %s", target)


def ensure_current_exists(path: Optional[Path] = None) -> Tuple[bool, BindingSearchParameters]:
    """
    Ensure the current parameters file exists; if not, initialize from defaults.
    Returns (created, params).
    """
    target = path or current_file()
    if target.exists():
        return False, load_current_params(path=target)
    defaults = load_default_params()
    save_current_params(defaults, path=target)
    return True, defaults
