# File: primersites/app/core/binding/schemas.py
# Version: v0.1.0
"""
DTOs for requests and responses used by the binding-site endpoints.

- `BindingSearchRequest.parameters` is optional: when omitted the server uses
  the stored parameters (binding_param.json, falling back to defaults).
- `filters` is optional: when omitted no quality filter is applied.
"""

from __future__ import annotations

import re
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, constr, field_validator

from .constants import DEFAULT_ANNOTATION_NAME, MIN_PRIMER_LENGTH
from .parameters import BindingSearchParameters, BindingSiteFilters

_WS = re.compile(r"\s+")


class BindingSearchRequest(BaseModel):
    """Search a template for sites where `primer` may anneal."""
    primer: str = Field(..., description="Primer 5'->3' (case-insensitive; whitespace ignored).")
    template: constr(min_length=1) = Field(..., description="Template sequence (plus strand).")
    parameters: Optional[BindingSearchParameters] = None
    filters: Optional[BindingSiteFilters] = None

    @field_validator("primer")
    @classmethod
    def _primer_length(cls, v: str) -> str:
        v = _WS.sub("", v)
        if len(v) < MIN_PRIMER_LENGTH:
            raise ValueError(f"Primer sequence must be at least {MIN_PRIMER_LENGTH} bases long")
        return v

    @field_validator("template")
    @classmethod
    def _template_clean(cls, v: str) -> str:
        return _WS.sub("", v)


class BindingSiteOut(BaseModel):
    id: str = ""
    start: int = Field(..., ge=0, description="0-based inclusive start of the binding region.")
    end: int = Field(..., ge=0, description="0-based inclusive end; < start when wrapping the origin.")
    forward: bool
    strand: Literal["+", "-"] = "+"
    numMismatches: int = Field(..., ge=0)
    mismatchPositions: List[int] = Field(default_factory=list)
    matchedSequence: str = ""
    primerSequence: str
    bindingSequence: str = ""
    overhangSequence: str = ""
    overhangLength: int = Field(0, ge=0)
    hasOverhang: bool = False
    fullPrimerMismatchPositions: List[int] = Field(default_factory=list)
    tm: Optional[float] = None
    gcPercent: Optional[float] = None
    stability3Prime: Optional[float] = None


class BindingSearchResponse(BaseModel):
    length: int = Field(..., ge=0, description="Template length.")
    total: int = Field(..., ge=0, description="Sites found before quality filtering.")
    sites: List[BindingSiteOut] = Field(default_factory=list)


class AnnotationsRequest(BaseModel):
    sites: List[BindingSiteOut]
    baseName: str = DEFAULT_ANNOTATION_NAME


class PrimerAnnotationOut(BaseModel):
    name: str
    start: int
    end: int
    forward: bool
    type: str
    bases: str
    strand: Literal[1, -1]


class AnnotationsResponse(BaseModel):
    annotations: List[PrimerAnnotationOut]
