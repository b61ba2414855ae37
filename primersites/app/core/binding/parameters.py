# File: primersites/app/core/binding/parameters.py
# Version: v0.1.0
"""
Pydantic models for binding-site search parameters and result filters.

Keys are camelCase to match the JSON files and the HTTP payloads.

Usage:
    from primersites.app.core.binding.parameters import BindingSearchParameters
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, conint, confloat, model_validator

from .constants import (
    DEFAULT_FILTER_MAX_GC,
    DEFAULT_FILTER_MAX_LENGTH,
    DEFAULT_FILTER_MAX_TM,
    DEFAULT_FILTER_MIN_GC,
    DEFAULT_FILTER_MIN_LENGTH,
    DEFAULT_FILTER_MIN_TM,
    DEFAULT_MAX_MISMATCHES,
    DEFAULT_MIN_BINDING_REGION,
)

TmMethod = Literal["nn", "wallace", "gc", "none"]


class BindingSearchParameters(BaseModel):
    maxMismatches: conint(ge=0, le=10) = Field(DEFAULT_MAX_MISMATCHES, description="Mismatches allowed inside the binding region")
    searchReverseStrand: bool = Field(True, description="Also search the antisense strand")
    isCircular: bool = Field(False, description="Template is circular (windows wrap around the origin)")
    minBindingRegion: conint(ge=1) = Field(DEFAULT_MIN_BINDING_REGION, description="Exact-match seed length at the primer 3' end")
    detectOverhang: bool = Field(True, description="Split off a non-binding 5' overhang; false = whole-primer Hamming match")
    tmMethod: TmMethod = Field("nn", description="Tm calculator: nearest-neighbour, Wallace, GC formula, or none")


class BindingSiteFilters(BaseModel):
    """Quality bounds applied to search results (Tm/GC only when present)."""
    minLength: conint(ge=1) = Field(DEFAULT_FILTER_MIN_LENGTH, description="Minimum full primer length")
    maxLength: conint(ge=1) = Field(DEFAULT_FILTER_MAX_LENGTH, description="Maximum full primer length")
    minTm: confloat(ge=0) = Field(DEFAULT_FILTER_MIN_TM, description="Minimum binding-region Tm (°C)")
    maxTm: confloat(ge=0) = Field(DEFAULT_FILTER_MAX_TM, description="Maximum binding-region Tm (°C)")
    minGc: confloat(ge=0, le=100) = Field(DEFAULT_FILTER_MIN_GC, description="Minimum binding-region GC %")
    maxGc: confloat(ge=0, le=100) = Field(DEFAULT_FILTER_MAX_GC, description="Maximum binding-region GC %")

    @model_validator(mode="after")
    def _check_ranges(self) -> "BindingSiteFilters":
        if self.maxLength < self.minLength:
            raise ValueError("maxLength must be >= minLength")
        if self.maxTm < self.minTm:
            raise ValueError("maxTm must be >= minTm")
        if self.maxGc < self.minGc:
            raise ValueError("maxGc must be >= minGc")
        return self
