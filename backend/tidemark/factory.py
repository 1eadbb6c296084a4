"""Factory functions for creating pre-configured AssessmentEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tidemark.config import ResilienceConfig
from tidemark.engine import AssessmentEngine
from tidemark.recommendations import RecommendationRules
from tidemark.scoring import ResilienceScorer
from tidemark.timeline import TimelineProjector

if TYPE_CHECKING:
    from tidemark.services.enhancer import RecommendationEnhancer


def create_default_engine(
    config: ResilienceConfig | None = None,
    enhancer: RecommendationEnhancer | None = None,
) -> AssessmentEngine:
    """Create an AssessmentEngine wired from a configuration bundle.

    This is the recommended way to create an engine. The scorer, rules and
    projector all share the same weights, thresholds and flood parameters so
    callers don't need to understand the internal wiring.

    Args:
        config: Calibration to use. Defaults to ``ResilienceConfig()``; no
            environment variables are read here.
        enhancer: Optional recommendation enhancer. Without one, the
            rule-based recommendations are returned unchanged.

    Example::

        from tidemark import create_default_engine

        engine = create_default_engine()
        result = engine.assess(assessment)
    """
    config = config or ResilienceConfig()
    scorer = ResilienceScorer(config.weights)
    rules = RecommendationRules(scorer, config.thresholds)
    projector = TimelineProjector(scorer, rules, config.flood)
    return AssessmentEngine(scorer, projector, enhancer)
