"""Tidemark climate-flood resilience assessment engine.

Usage::

    from tidemark import create_default_engine, AssessmentInput

    engine = create_default_engine()
    result = engine.assess(assessment)
"""

from tidemark.config import (
    EnhancerSettings,
    FloodParameters,
    ResilienceConfig,
    ScoreThresholds,
    ScoringWeights,
    load_config,
)
from tidemark.engine import AssessmentEngine
from tidemark.factory import create_default_engine
from tidemark.models.assessment import AssessmentInput, Location
from tidemark.models.enums import (
    FoundationType,
    MaterialType,
    MitigationFeature,
    ResilienceBand,
    RoofMaterial,
)
from tidemark.models.result import AssessmentResult, ProjectionPoint
from tidemark.recommendations import RecommendationRules
from tidemark.scoring import ResilienceScorer, ScoreBreakdown
from tidemark.timeline import TimelineProjector

__all__ = [
    "AssessmentEngine",
    "AssessmentInput",
    "AssessmentResult",
    "EnhancerSettings",
    "FloodParameters",
    "FoundationType",
    "Location",
    "MaterialType",
    "MitigationFeature",
    "ProjectionPoint",
    "RecommendationRules",
    "ResilienceBand",
    "ResilienceConfig",
    "ResilienceScorer",
    "RoofMaterial",
    "ScoreBreakdown",
    "ScoreThresholds",
    "ScoringWeights",
    "TimelineProjector",
    "create_default_engine",
    "load_config",
]
