"""Static scoring data for the Tidemark assessment engine."""

from tidemark.data.factors import (
    FOUNDATION_SCORES,
    MATERIAL_SCORES,
    MITIGATION_FEATURE_SCORES,
    ROOF_MATERIAL_SCORES,
)

__all__ = [
    "FOUNDATION_SCORES",
    "MATERIAL_SCORES",
    "MITIGATION_FEATURE_SCORES",
    "ROOF_MATERIAL_SCORES",
]
