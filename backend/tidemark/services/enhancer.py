"""Recommendation enhancement: rewrites rule-based advice with Claude.

The enhancer is a fallible collaborator: the engine calls it once per
assessment and falls back to the rule-based recommendations on any error or
empty result.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

import anthropic

from tidemark.config import DEFAULT_LLM_MODEL
from tidemark.exceptions import EnhancerError
from tidemark.formatting import (
    format_enum_list,
    format_feet,
    format_score,
    format_yes_no,
)

if TYPE_CHECKING:
    from tidemark.models.assessment import AssessmentInput
    from tidemark.models.result import ProjectionPoint

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Interface
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EnhancementContext:
    """Everything the enhancer may use to rewrite recommendations."""

    assessment: AssessmentInput
    base_recommendations: list[str]
    timeline: list[ProjectionPoint] = field(default_factory=list)


class RecommendationEnhancer(Protocol):
    """Turns rule-based advice plus context into final recommendations."""

    def enhance(self, context: EnhancementContext) -> list[str]: ...


class PassthroughEnhancer:
    """Returns the rule-based recommendations unchanged.

    Used when no language-model credentials are configured.
    """

    def enhance(self, context: EnhancementContext) -> list[str]:
        return list(context.base_recommendations)


# ---------------------------------------------------------------------------
# System prompt
# ---------------------------------------------------------------------------

_SYSTEM_PROMPT = (
    "You are an expert in flood-resilient architecture and climate "
    "adaptation. Provide specific, actionable recommendations for improving "
    "building resilience."
)

_MAX_TOKENS = 500
_TEMPERATURE = 0.7

# Leading "- ", "• ", "* ", "1. " or "1) " markers
_BULLET_RE = re.compile(r"^\s*(?:[-•*]|\d+[.)])\s*")


# ---------------------------------------------------------------------------
# Anthropic enhancer
# ---------------------------------------------------------------------------


class AnthropicRecommendationEnhancer:
    """Asks Claude to expand the rule-based advice into a final list.

    No retries are attempted; the request timeout bounds how long an
    assessment can wait on the model.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_LLM_MODEL,
        timeout: float = 30.0,
    ) -> None:
        self._client = anthropic.Anthropic(
            api_key=api_key,
            timeout=timeout,
            max_retries=0,
        )
        self._model = model

    def enhance(self, context: EnhancementContext) -> list[str]:
        """Return Claude's recommendations for the assessment.

        Raises
        ------
        EnhancerError
            If the model returns no usable recommendation lines.
        anthropic.APIError
            On transport or API failures; left for the engine to absorb.
        """
        prompt = build_prompt(context)
        raw_response = self._call_api(prompt)
        recommendations = parse_recommendations(raw_response)
        if not recommendations:
            msg = "Language model returned no recommendations"
            raise EnhancerError(msg)
        return recommendations

    def _call_api(self, prompt: str) -> str:
        """Call the Anthropic Messages API."""
        response = self._client.messages.create(
            model=self._model,
            max_tokens=_MAX_TOKENS,
            temperature=_TEMPERATURE,
            system=_SYSTEM_PROMPT,
            messages=[{"role": "user", "content": prompt}],
        )
        text_blocks = [
            block.text for block in response.content if block.type == "text"
        ]
        return "\n".join(text_blocks)


# ---------------------------------------------------------------------------
# Prompt building and response parsing
# ---------------------------------------------------------------------------


def build_prompt(context: EnhancementContext) -> str:
    """Render the assessment, base advice and timeline as a prompt."""
    a = context.assessment
    lines: list[str] = [
        "Building Assessment Details:",
        f"- Foundation Type: {a.foundation_type}",
        f"- Elevation Above BFE: {a.elevation_above_bfe} feet",
        f"- Materials: {format_enum_list(a.materials)}",
        f"- Roof Material: {a.roof_material}",
        f"- Mitigation Features: {format_enum_list(a.mitigation_features)}",
        f"- Utility Protection: {format_yes_no(a.utility_protection)}",
    ]
    if a.design_description:
        lines += ["", "Design Description & Goals:", a.design_description]

    lines += ["", "Current Recommendations:"]
    lines += [f"- {rec}" for rec in context.base_recommendations] or ["- None"]

    lines += ["", "Projected Timeline:"]
    for point in context.timeline:
        lines += [
            f"Year {point.year}:",
            f"- Projected BFE: {format_feet(point.projected_bfe)}",
            f"- Resilience Score: {format_score(point.score)}",
        ]

    considerations = [
        "Immediate improvements needed",
        "Long-term adaptation strategies",
        "Cost-effective solutions",
        "Local building codes and regulations",
        "Climate change projections",
    ]
    if a.design_description:
        considerations.append(
            "The user's design goals and requirements described above"
        )
    lines += [
        "",
        "Please provide specific, actionable recommendations for improving "
        "the building's flood resilience, considering:",
    ]
    lines += [f"{i}. {item}" for i, item in enumerate(considerations, start=1)]
    lines += [
        "",
        "Format each recommendation as a separate line, starting with a "
        "bullet point.",
    ]
    return "\n".join(lines)


def parse_recommendations(raw_response: str) -> list[str]:
    """Split a model response into one recommendation per non-blank line."""
    recommendations: list[str] = []
    for line in raw_response.splitlines():
        text = _BULLET_RE.sub("", line).strip()
        if text:
            recommendations.append(text)
    return recommendations
