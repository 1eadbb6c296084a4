"""Year-by-year projection of resilience under a linear flood-rise model."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tidemark.config import FloodParameters
from tidemark.models.result import ProjectionPoint

if TYPE_CHECKING:
    from tidemark.models.assessment import AssessmentInput
    from tidemark.recommendations import RecommendationRules
    from tidemark.scoring import ResilienceScorer

logger = logging.getLogger(__name__)


class TimelineProjector:
    """Projects a building's score across the configured simulation years.

    For each year the base flood elevation rises linearly from the site's
    current BFE. The rise is subtracted from the building's freeboard
    (floored at zero) while every other attribute, including ``current_bfe``,
    is held fixed; the eroded state is then scored and advised on.

    Args:
        scorer: Scores each projected building state.
        rules: Generates per-year recommendations.
        flood: Baseline BFE, annual rise rate and simulation years.
    """

    def __init__(
        self,
        scorer: ResilienceScorer,
        rules: RecommendationRules,
        flood: FloodParameters | None = None,
    ) -> None:
        self._scorer = scorer
        self._rules = rules
        self._flood = flood or FloodParameters()

    def project(self, assessment: AssessmentInput) -> list[ProjectionPoint]:
        """Return one ProjectionPoint per simulation year, ascending by year."""
        flood = self._flood
        base_bfe = (
            assessment.current_bfe
            if assessment.current_bfe is not None
            else flood.current_bfe
        )

        timeline: list[ProjectionPoint] = []
        for year in sorted(flood.simulation_years):
            years_elapsed = year - flood.baseline_year
            projected_bfe = base_bfe + years_elapsed * flood.annual_rise_rate
            bfe_rise = projected_bfe - base_bfe

            adjusted = assessment.model_copy(
                update={
                    "elevation_above_bfe": max(
                        0.0, assessment.elevation_above_bfe - bfe_rise
                    ),
                },
            )

            timeline.append(
                ProjectionPoint(
                    year=year,
                    projected_bfe=round(projected_bfe, 2),
                    score=self._scorer.score(adjusted),
                    recommendations=self._rules.generate(adjusted, projected_bfe),
                )
            )

        logger.debug(
            "Projected %d years from BFE %.2f at %.3f ft/yr",
            len(timeline),
            base_bfe,
            flood.annual_rise_rate,
        )
        return timeline
