"""Tests for the ResilienceScorer: the weighted-factor scoring function."""

from __future__ import annotations

import itertools

import pytest

from tidemark.config import ScoringWeights
from tidemark.exceptions import ComputationPreconditionError
from tidemark.models.assessment import AssessmentInput
from tidemark.models.enums import (
    FoundationType,
    MaterialType,
    MitigationFeature,
    RoofMaterial,
)
from tidemark.scoring import ResilienceScorer


@pytest.fixture()
def scorer() -> ResilienceScorer:
    return ResilienceScorer()


# ---------------------------------------------------------------------------
# Helper builders
# ---------------------------------------------------------------------------


def _fortified_building(elevation: float = 10.0) -> AssessmentInput:
    return AssessmentInput(
        foundation_type=FoundationType.ELEVATED_FOUNDATION,
        elevation_above_bfe=elevation,
        current_bfe=8.0,
        materials=[MaterialType.CONCRETE],
        roof_material=RoofMaterial.METAL,
        mitigation_features=list(MitigationFeature),
        utility_protection=True,
    )


def _vulnerable_building(elevation: float = 0.0) -> AssessmentInput:
    return AssessmentInput(
        foundation_type=FoundationType.SLAB_ON_GRADE,
        elevation_above_bfe=elevation,
        current_bfe=8.0,
        materials=[MaterialType.WOOD_FRAME],
        roof_material=RoofMaterial.ASPHALT_SHINGLE,
        mitigation_features=[],
        utility_protection=False,
    )


# ---------------------------------------------------------------------------
# Reference scenarios
# ---------------------------------------------------------------------------


class TestReferenceScenarios:
    def test_fortified_building_breakdown(self, scorer: ResilienceScorer) -> None:
        b = scorer.breakdown(_fortified_building())
        assert b.elevation == 100
        assert b.foundation == 100
        assert b.structural_materials == 100
        assert b.roof == 80
        assert b.combined_materials == pytest.approx(94.0)
        assert b.mitigation == 100
        assert b.utility == 100
        assert b.total == pytest.approx(99.1)

    def test_fortified_building_score(self, scorer: ResilienceScorer) -> None:
        assert scorer.score(_fortified_building()) == pytest.approx(99.1)

    def test_vulnerable_building_breakdown(self, scorer: ResilienceScorer) -> None:
        b = scorer.breakdown(_vulnerable_building())
        assert b.elevation == 0
        assert b.foundation == 40
        assert b.combined_materials == pytest.approx(57.0)
        assert b.mitigation == 0
        assert b.utility == 0
        assert b.total == pytest.approx(16.55)


# ---------------------------------------------------------------------------
# Component behaviour
# ---------------------------------------------------------------------------


class TestElevation:
    def test_linear_below_saturation(self, scorer: ResilienceScorer) -> None:
        assert scorer.breakdown(_vulnerable_building(4.5)).elevation == pytest.approx(45.0)

    def test_saturates_at_ten_feet(self, scorer: ResilienceScorer) -> None:
        at_ten = scorer.breakdown(_vulnerable_building(10.0))
        at_eleven = scorer.breakdown(_vulnerable_building(11.0))
        assert at_ten.elevation == 100
        assert at_eleven.elevation == 100
        assert at_ten.total == at_eleven.total

    def test_monotonic_in_elevation(self, scorer: ResilienceScorer) -> None:
        scores = [
            scorer.score(_vulnerable_building(step / 2)) for step in range(0, 25)
        ]
        assert scores == sorted(scores)


class TestMaterials:
    def test_mean_of_materials(self, scorer: ResilienceScorer) -> None:
        building = _vulnerable_building().model_copy(
            update={"materials": [MaterialType.CONCRETE, MaterialType.MIXED]}
        )
        assert scorer.breakdown(building).structural_materials == pytest.approx(75.0)

    def test_duplicates_are_counted(self, scorer: ResilienceScorer) -> None:
        building = _vulnerable_building().model_copy(
            update={
                "materials": [
                    MaterialType.WOOD_FRAME,
                    MaterialType.WOOD_FRAME,
                    MaterialType.CONCRETE,
                ]
            }
        )
        # (60 + 60 + 100) / 3
        assert scorer.breakdown(building).structural_materials == pytest.approx(
            220 / 3
        )

    def test_roof_blends_thirty_percent(self, scorer: ResilienceScorer) -> None:
        building = _vulnerable_building().model_copy(
            update={"roof_material": RoofMaterial.TILE}
        )
        # 60 * 0.7 + 75 * 0.3
        assert scorer.breakdown(building).combined_materials == pytest.approx(64.5)

    def test_empty_materials_is_a_precondition_violation(
        self, scorer: ResilienceScorer
    ) -> None:
        building = AssessmentInput.model_construct(
            foundation_type=FoundationType.SLAB_ON_GRADE,
            elevation_above_bfe=1.0,
            current_bfe=8.0,
            materials=[],
            roof_material=RoofMaterial.METAL,
            mitigation_features=[],
            utility_protection=False,
        )
        with pytest.raises(ComputationPreconditionError):
            scorer.score(building)


class TestMitigation:
    def test_sums_features(self, scorer: ResilienceScorer) -> None:
        building = _vulnerable_building().model_copy(
            update={
                "mitigation_features": [
                    MitigationFeature.WATERPROOFING,
                    MitigationFeature.FLOOD_BARRIERS,
                ]
            }
        )
        assert scorer.breakdown(building).mitigation == 40

    def test_all_features_cap_at_100(self, scorer: ResilienceScorer) -> None:
        assert scorer.breakdown(_fortified_building()).mitigation == 100


class TestProperties:
    def test_score_is_idempotent(self, scorer: ResilienceScorer) -> None:
        building = _vulnerable_building(2.5)
        assert scorer.score(building) == scorer.score(building)

    def test_all_attribute_combinations_within_bounds(
        self, scorer: ResilienceScorer
    ) -> None:
        feature_sets = [
            [],
            [MitigationFeature.FLOOD_BARRIERS],
            [MitigationFeature.WATERPROOFING, MitigationFeature.FLOOD_VENTS],
            list(MitigationFeature),
        ]
        for foundation, material, roof, features, utility, elevation in (
            itertools.product(
                FoundationType,
                MaterialType,
                RoofMaterial,
                feature_sets,
                (True, False),
                (0.0, 3.0, 10.0, 25.0),
            )
        ):
            building = AssessmentInput(
                foundation_type=foundation,
                elevation_above_bfe=elevation,
                materials=[material],
                roof_material=roof,
                mitigation_features=features,
                utility_protection=utility,
            )
            score = scorer.score(building)
            assert 0.0 <= score <= 100.0 + 1e-9


class TestCustomWeights:
    def test_elevation_only_weights(self) -> None:
        scorer = ResilienceScorer(
            ScoringWeights(
                elevation=1.0,
                foundation=0.0,
                materials=0.0,
                mitigation=0.0,
                utility_protection=0.0,
            )
        )
        assert scorer.score(_vulnerable_building(6.0)) == pytest.approx(60.0)

    def test_exposes_weights(self) -> None:
        weights = ScoringWeights()
        assert ResilienceScorer(weights).weights is weights
