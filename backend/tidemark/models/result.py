"""Result models returned by the assessment engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProjectionPoint(BaseModel):
    """Projected resilience of a building in one simulation year."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    year: int
    projected_bfe: float = Field(alias="projectedBFE")
    score: float
    recommendations: list[str] = Field(default_factory=list)


class AssessmentResult(BaseModel):
    """Complete assessment: today's score, the timeline, and final advice."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    current_score: float = Field(alias="currentScore")
    timeline: list[ProjectionPoint]
    overall_recommendations: list[str] = Field(
        min_length=1, alias="overallRecommendations"
    )

    def to_response_dict(self) -> dict[str, object]:
        """Serialize with the camelCase keys used on the wire."""
        return self.model_dump(mode="json", by_alias=True)
