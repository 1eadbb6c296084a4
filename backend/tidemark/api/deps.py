"""Dependency wiring for FastAPI endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tidemark.config import load_config
from tidemark.factory import create_default_engine
from tidemark.services.enhancer import (
    AnthropicRecommendationEnhancer,
    PassthroughEnhancer,
)

if TYPE_CHECKING:
    from tidemark.config import ResilienceConfig
    from tidemark.engine import AssessmentEngine
    from tidemark.services.enhancer import RecommendationEnhancer

logger = logging.getLogger(__name__)


def create_enhancer(config: ResilienceConfig) -> RecommendationEnhancer:
    """Pick the recommendation enhancer for a configuration.

    Uses Claude when ANTHROPIC_API_KEY is configured; otherwise the
    rule-based recommendations are passed through unchanged.
    """
    settings = config.enhancer
    if not settings.enabled:
        logger.info(
            "ANTHROPIC_API_KEY is not set; recommendations will not be enhanced"
        )
        return PassthroughEnhancer()
    return AnthropicRecommendationEnhancer(
        api_key=settings.api_key or "",
        model=settings.model,
        timeout=settings.timeout,
    )


def create_engine(config: ResilienceConfig | None = None) -> AssessmentEngine:
    """Create an AssessmentEngine from environment configuration.

    Reads configuration via ``load_config`` when none is given.
    """
    config = config or load_config()
    return create_default_engine(config, enhancer=create_enhancer(config))
