"""Domain models for the Tidemark assessment engine."""

from tidemark.models.assessment import AssessmentInput, Location
from tidemark.models.enums import (
    FoundationType,
    MaterialType,
    MitigationFeature,
    ResilienceBand,
    RoofMaterial,
)
from tidemark.models.result import AssessmentResult, ProjectionPoint

__all__ = [
    "AssessmentInput",
    "AssessmentResult",
    "FoundationType",
    "Location",
    "MaterialType",
    "MitigationFeature",
    "ProjectionPoint",
    "ResilienceBand",
    "RoofMaterial",
]
