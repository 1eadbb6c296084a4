"""Tests for the public API surface of the tidemark package.

Verifies that consumers can import everything they need from the top-level
``tidemark`` package, use ``create_default_engine`` for quick setup, and
round-trip results through JSON serialization.
"""

from __future__ import annotations

import json

from tidemark import (
    AssessmentEngine,
    AssessmentInput,
    AssessmentResult,
    FoundationType,
    MaterialType,
    MitigationFeature,
    ResilienceConfig,
    RoofMaterial,
    create_default_engine,
)


def _sample_assessment() -> AssessmentInput:
    return AssessmentInput(
        foundation_type=FoundationType.PIER_AND_BEAM,
        elevation_above_bfe=2.0,
        current_bfe=9.0,
        materials=[MaterialType.MASONRY],
        roof_material=RoofMaterial.TILE,
        mitigation_features=[MitigationFeature.WATERPROOFING],
        utility_protection=True,
    )


class TestPublicImports:
    def test_create_default_engine(self) -> None:
        assert isinstance(create_default_engine(), AssessmentEngine)

    def test_engine_accepts_config(self) -> None:
        engine = create_default_engine(ResilienceConfig())
        assert isinstance(engine.assess(_sample_assessment()), AssessmentResult)


class TestJsonRoundTrip:
    def test_result_round_trips(self) -> None:
        result = create_default_engine().assess(_sample_assessment())
        payload = json.dumps(result.to_response_dict())
        restored = AssessmentResult.model_validate(json.loads(payload))
        assert restored == result
