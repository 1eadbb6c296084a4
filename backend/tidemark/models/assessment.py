"""Assessment input models for the Tidemark resilience engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tidemark.models.enums import (
    FoundationType,
    MaterialType,
    MitigationFeature,
    RoofMaterial,
)


class Location(BaseModel):
    """Site coordinates. Carried through to the caller, not scored."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class AssessmentInput(BaseModel):
    """A building described by the attributes that drive its flood resilience.

    This is the primary input to the assessment engine. Field aliases match
    the camelCase JSON payload accepted by ``POST /api/assess``; the
    snake_case attribute names are accepted too.
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, allow_inf_nan=False
    )

    foundation_type: FoundationType = Field(alias="foundationType")
    elevation_above_bfe: float = Field(ge=0, alias="elevationAboveBFE")
    current_bfe: float | None = Field(default=None, ge=0, alias="currentBFE")
    materials: list[MaterialType] = Field(min_length=1)
    roof_material: RoofMaterial = Field(alias="roofMaterial")
    mitigation_features: list[MitigationFeature] = Field(
        default_factory=list, alias="mitigationFeatures"
    )
    utility_protection: bool = Field(alias="utilityProtection")
    design_description: str | None = Field(
        default=None, max_length=1000, alias="designDescription"
    )
    location: Location | None = None

    @field_validator("mitigation_features")
    @classmethod
    def mitigation_features_must_be_unique(
        cls, v: list[MitigationFeature]
    ) -> list[MitigationFeature]:
        if len(set(v)) != len(v):
            msg = "mitigationFeatures must not contain duplicates"
            raise ValueError(msg)
        return v
