"""Core assessment engine for the Tidemark resilience library.

The AssessmentEngine implements the full assessment flow:

1. **Current score**: score the building as described today.
2. **Timeline**: project the score across the simulation years, eroding the
   building's freeboard as the flood datum rises.
3. **Base recommendations**: take the rule-based advice for the earliest
   projected year.
4. **Enhancement**: hand the base advice plus the full timeline to the
   recommendation enhancer. Any enhancer failure or empty result falls back
   to the base advice; the enhancer can never fail an assessment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tidemark.models.result import AssessmentResult
from tidemark.services.enhancer import EnhancementContext, PassthroughEnhancer

if TYPE_CHECKING:
    from tidemark.models.assessment import AssessmentInput
    from tidemark.models.result import ProjectionPoint
    from tidemark.scoring import ResilienceScorer
    from tidemark.services.enhancer import RecommendationEnhancer
    from tidemark.timeline import TimelineProjector

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"

DEFAULT_RECOMMENDATION = (
    "Your building shows good resilience features. "
    "Consider regular maintenance and monitoring."
)


class AssessmentEngine:
    """Converts an AssessmentInput into an AssessmentResult.

    Args:
        scorer: Scores the building as described.
        projector: Produces the year-by-year timeline.
        enhancer: Rewrites the base recommendations. Defaults to a
            passthrough that returns them unchanged.

    Example::

        from tidemark import create_default_engine

        engine = create_default_engine()
        result = engine.assess(assessment)
    """

    def __init__(
        self,
        scorer: ResilienceScorer,
        projector: TimelineProjector,
        enhancer: RecommendationEnhancer | None = None,
    ) -> None:
        self._scorer = scorer
        self._projector = projector
        self._enhancer: RecommendationEnhancer = enhancer or PassthroughEnhancer()

    def assess(self, assessment: AssessmentInput) -> AssessmentResult:
        """Score, project and advise on a building.

        Raises:
            ComputationPreconditionError: If an invalid value reaches the
                scorer. Not expected for validated input.
        """
        current_score = self._scorer.score(assessment)
        timeline = self._projector.project(assessment)
        logger.debug(
            "Current score %.2f, %d timeline points", current_score, len(timeline)
        )

        base_recommendations = list(timeline[0].recommendations) if timeline else []
        overall = self._enhance(assessment, base_recommendations, timeline)
        if not overall:
            overall = [DEFAULT_RECOMMENDATION]

        return AssessmentResult(
            current_score=current_score,
            timeline=timeline,
            overall_recommendations=overall,
        )

    def _enhance(
        self,
        assessment: AssessmentInput,
        base_recommendations: list[str],
        timeline: list[ProjectionPoint],
    ) -> list[str]:
        """Run the enhancer once, falling back to the base advice on failure."""
        context = EnhancementContext(
            assessment=assessment,
            base_recommendations=list(base_recommendations),
            timeline=timeline,
        )
        try:
            enhanced = self._enhancer.enhance(context)
        except Exception:
            logger.exception(
                "Recommendation enhancement failed; using rule-based recommendations"
            )
            return base_recommendations

        cleaned = [rec for rec in (enhanced or []) if rec and rec.strip()]
        if not cleaned:
            logger.warning(
                "Recommendation enhancer returned nothing; "
                "using rule-based recommendations"
            )
            return base_recommendations
        return cleaned
