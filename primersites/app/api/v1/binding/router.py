# File: primersites/app/api/v1/binding/router.py
# Version: v0.1.0
"""
Binding-site endpoints:
- POST /search            ← find primer binding sites on a template
- POST /annotations       ← materialize selected sites as primer annotations
- GET /parameters         ← returns current search parameters
- PUT /parameters         ← validates & persists new parameters
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from primersites.app.config.config_binding import ensure_current_exists, load_current_params, save_current_params
from primersites.app.core.binding.annotations import to_primer_annotations
from primersites.app.core.binding.filters import filter_binding_sites
from primersites.app.core.binding.models import BindingSite
from primersites.app.core.binding.parameters import BindingSearchParameters
from primersites.app.core.binding.schemas import (
    AnnotationsRequest,
    AnnotationsResponse,
    BindingSearchRequest,
    BindingSearchResponse,
    BindingSiteOut,
    PrimerAnnotationOut,
)
from primersites.app.core.binding.search import search

log = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/binding-sites", tags=["binding-sites"])


@router.get("/parameters", response_model=BindingSearchParameters)
def get_parameters():
    """
    Return the current editable search parameters.
    If not initialized, create binding_param.json from defaults and return it.
    """
    _, params = ensure_current_exists()
    return params


@router.put("/parameters", response_model=BindingSearchParameters)
def update_parameters(payload: BindingSearchParameters):
    """Validate and persist new search parameters into binding_param.json."""
    save_current_params(payload)
    return payload


@router.post("/search", response_model=BindingSearchResponse)
def search_binding_sites(payload: BindingSearchRequest) -> BindingSearchResponse:
    """
    Search the template for primer binding sites.
    If `parameters` is omitted, the stored parameters are used.
    """
    params = payload.parameters or load_current_params()
    sites = search(payload.primer, payload.template, params)
    total = len(sites)
    if payload.filters is not None:
        sites = filter_binding_sites(sites, payload.filters)
    log.info("search: %d site(s), %d after filters", total, len(sites))
    return BindingSearchResponse(
        length=len(payload.template),
        total=total,
        sites=[BindingSiteOut(**s.to_dict()) for s in sites],
    )


@router.post("/annotations", response_model=AnnotationsResponse)
def create_annotations(payload: AnnotationsRequest) -> AnnotationsResponse:
    """Return primer annotations ({start, end, forward, bases, strand}) for the selected sites."""
    selected = [BindingSite.from_dict(s.model_dump()) for s in payload.sites]
    try:
        annotations = to_primer_annotations(selected, payload.baseName)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return AnnotationsResponse(annotations=[PrimerAnnotationOut(**a.to_dict()) for a in annotations])
