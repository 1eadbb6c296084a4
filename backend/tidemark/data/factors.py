"""Factor tables mapping building attributes to 0-100 sub-scores.

Higher values mean better flood resilience. Roof values follow FEMA P-424
wind-resistance guidance, IBHS uplift research and Florida Building Code
coastal durability ratings.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeVar

from tidemark.exceptions import ComputationPreconditionError
from tidemark.models.enums import (
    FoundationType,
    MaterialType,
    MitigationFeature,
    RoofMaterial,
)

FOUNDATION_SCORES: Mapping[FoundationType, float] = MappingProxyType({
    FoundationType.SLAB_ON_GRADE: 40,
    FoundationType.PIER_AND_BEAM: 60,
    FoundationType.PILE_FOUNDATION: 80,
    FoundationType.ELEVATED_FOUNDATION: 100,
})

MATERIAL_SCORES: Mapping[MaterialType, float] = MappingProxyType({
    MaterialType.CONCRETE: 100,
    MaterialType.STEEL_FRAME: 80,
    MaterialType.MASONRY: 70,
    MaterialType.WOOD_FRAME: 60,
    MaterialType.MIXED: 50,
})

ROOF_MATERIAL_SCORES: Mapping[RoofMaterial, float] = MappingProxyType({
    RoofMaterial.METAL: 80,
    RoofMaterial.TILE: 75,
    RoofMaterial.ASPHALT_SHINGLE: 50,
})

MITIGATION_FEATURE_SCORES: Mapping[MitigationFeature, float] = MappingProxyType({
    MitigationFeature.WATERPROOFING: 25,
    MitigationFeature.FLOOD_VENTS: 20,
    MitigationFeature.BACKFLOW_PREVENTION: 20,
    MitigationFeature.ELEVATED_UTILITIES: 20,
    MitigationFeature.FLOOD_BARRIERS: 15,
})

_K = TypeVar("_K")


def _lookup(table: Mapping[_K, float], key: _K, table_name: str) -> float:
    try:
        return table[key]
    except KeyError:
        msg = f"Unknown {table_name} value: {key!r}"
        raise ComputationPreconditionError(msg) from None


def foundation_score(foundation_type: FoundationType) -> float:
    return _lookup(FOUNDATION_SCORES, foundation_type, "foundation type")


def material_score(material: MaterialType) -> float:
    return _lookup(MATERIAL_SCORES, material, "material")


def roof_material_score(roof_material: RoofMaterial) -> float:
    return _lookup(ROOF_MATERIAL_SCORES, roof_material, "roof material")


def mitigation_feature_score(feature: MitigationFeature) -> float:
    return _lookup(MITIGATION_FEATURE_SCORES, feature, "mitigation feature")
