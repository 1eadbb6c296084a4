"""Weighted-factor resilience scoring.

The ResilienceScorer turns an AssessmentInput into a 0-100 score:

1. **Elevation**: ``min(elevation_above_bfe * 10, 100)``, saturating at 10 ft
   of freeboard.
2. **Foundation**: factor table lookup.
3. **Structural materials**: mean of the factor values of every listed
   material (duplicates counted).
4. **Roof**: factor table lookup, blended 70/30 with structural materials.
5. **Mitigation**: sum of installed feature values, capped at 100.
6. **Utility protection**: 100 if protected, otherwise 0.
7. **Total**: weighted sum using the configured ScoringWeights.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tidemark.config import ScoringWeights
from tidemark.data.factors import (
    foundation_score,
    material_score,
    mitigation_feature_score,
    roof_material_score,
)
from tidemark.exceptions import ComputationPreconditionError

if TYPE_CHECKING:
    from tidemark.models.assessment import AssessmentInput

_ELEVATION_POINTS_PER_FOOT = 10.0
_MAX_FACTOR_SCORE = 100.0

# Split of the materials weight between structure and roof
_STRUCTURAL_SHARE = 0.7
_ROOF_SHARE = 0.3


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-factor sub-scores (each 0-100) and the weighted total."""

    elevation: float
    foundation: float
    structural_materials: float
    roof: float
    combined_materials: float
    mitigation: float
    utility: float
    total: float


class ResilienceScorer:
    """Pure scoring function over an AssessmentInput.

    Args:
        weights: Factor weights. Defaults to the standard calibration.
    """

    def __init__(self, weights: ScoringWeights | None = None) -> None:
        self._weights = weights or ScoringWeights()

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    def score(self, assessment: AssessmentInput) -> float:
        """Return the resilience score for a building state."""
        return self.breakdown(assessment).total

    def breakdown(self, assessment: AssessmentInput) -> ScoreBreakdown:
        """Compute every sub-score alongside the weighted total.

        Raises:
            ComputationPreconditionError: If ``materials`` is empty or a value
                is missing from the factor tables. Boundary validation makes
                both impossible for a properly constructed AssessmentInput.
        """
        w = self._weights

        elevation = min(
            assessment.elevation_above_bfe * _ELEVATION_POINTS_PER_FOOT,
            _MAX_FACTOR_SCORE,
        )
        foundation = foundation_score(assessment.foundation_type)

        if not assessment.materials:
            msg = "Cannot score an assessment with no structural materials"
            raise ComputationPreconditionError(msg)
        structural = sum(
            material_score(m) for m in assessment.materials
        ) / len(assessment.materials)

        roof = roof_material_score(assessment.roof_material)
        combined_materials = structural * _STRUCTURAL_SHARE + roof * _ROOF_SHARE

        mitigation = min(
            sum(mitigation_feature_score(f) for f in assessment.mitigation_features),
            _MAX_FACTOR_SCORE,
        )
        utility = _MAX_FACTOR_SCORE if assessment.utility_protection else 0.0

        total = (
            elevation * w.elevation
            + foundation * w.foundation
            + combined_materials * w.materials
            + mitigation * w.mitigation
            + utility * w.utility_protection
        )

        return ScoreBreakdown(
            elevation=elevation,
            foundation=foundation,
            structural_materials=structural,
            roof=roof,
            combined_materials=combined_materials,
            mitigation=mitigation,
            utility=utility,
            total=total,
        )
