"""Rule-based recommendations for a (possibly projected) building state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tidemark.config import ScoreThresholds
from tidemark.formatting import format_feet
from tidemark.models.enums import (
    FoundationType,
    MaterialType,
    ResilienceBand,
    RoofMaterial,
)

if TYPE_CHECKING:
    from tidemark.models.assessment import AssessmentInput
    from tidemark.scoring import ResilienceScorer

# Freeboard below which elevating the structure is suggested
_LOW_FREEBOARD_FT = 3.0

CRITICAL_MESSAGE = "CRITICAL: Immediate action required to improve flood resilience"
WARNING_MESSAGE = "WARNING: Consider improvements to enhance flood resilience"
FOUNDATION_MESSAGE = "Consider upgrading to a more flood-resistant foundation type"
MATERIALS_MESSAGE = (
    "Consider using more flood-resistant materials for critical components"
)
ROOF_MESSAGE = (
    "Consider upgrading to metal or tile roofing for better wind resistance "
    "and longevity"
)
METAL_ROOF_PAIRING_MESSAGE = (
    "Metal roofing provides excellent resilience - consider pairing with "
    "elevated foundation for maximum protection"
)
UTILITY_MESSAGE = "Implement utility protection measures to prevent flood damage"


def elevation_message(projected_bfe: float) -> str:
    return (
        "Consider elevating the structure above projected BFE of "
        f"{format_feet(projected_bfe)}"
    )


class RecommendationRules:
    """Deterministic, ordered advice derived from a building's attributes.

    Args:
        scorer: Scorer used to re-score the building state being advised on.
        thresholds: Critical/warning cut-offs for the headline line.
    """

    def __init__(
        self,
        scorer: ResilienceScorer,
        thresholds: ScoreThresholds | None = None,
    ) -> None:
        self._scorer = scorer
        self._thresholds = thresholds or ScoreThresholds()

    def generate(
        self, assessment: AssessmentInput, projected_bfe: float
    ) -> list[str]:
        """Return recommendations in a fixed order.

        The list may be empty when nothing fires; the engine supplies the
        overall fallback line.
        """
        recommendations: list[str] = []

        band = self._thresholds.band(self._scorer.score(assessment))
        if band is ResilienceBand.CRITICAL:
            recommendations.append(CRITICAL_MESSAGE)
        elif band is ResilienceBand.WARNING:
            recommendations.append(WARNING_MESSAGE)

        if assessment.elevation_above_bfe < _LOW_FREEBOARD_FT:
            recommendations.append(elevation_message(projected_bfe))

        if assessment.foundation_type == FoundationType.SLAB_ON_GRADE:
            recommendations.append(FOUNDATION_MESSAGE)

        if MaterialType.WOOD_FRAME in assessment.materials:
            recommendations.append(MATERIALS_MESSAGE)

        if assessment.roof_material == RoofMaterial.ASPHALT_SHINGLE:
            recommendations.append(ROOF_MESSAGE)

        if (
            assessment.roof_material == RoofMaterial.METAL
            and assessment.foundation_type == FoundationType.SLAB_ON_GRADE
        ):
            recommendations.append(METAL_ROOF_PAIRING_MESSAGE)

        if not assessment.utility_protection:
            recommendations.append(UTILITY_MESSAGE)

        return recommendations
