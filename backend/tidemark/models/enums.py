"""Enums for the Tidemark domain models.

Wire values are the upper-case member names so JSON payloads read the same
as the factor tables.
"""

from enum import StrEnum


class FoundationType(StrEnum):
    """Foundation systems, ordered roughly from least to most flood-resistant."""

    SLAB_ON_GRADE = "SLAB_ON_GRADE"
    PIER_AND_BEAM = "PIER_AND_BEAM"
    PILE_FOUNDATION = "PILE_FOUNDATION"
    ELEVATED_FOUNDATION = "ELEVATED_FOUNDATION"


class MaterialType(StrEnum):
    """Primary structural materials."""

    CONCRETE = "CONCRETE"
    STEEL_FRAME = "STEEL_FRAME"
    WOOD_FRAME = "WOOD_FRAME"
    MASONRY = "MASONRY"
    MIXED = "MIXED"


class RoofMaterial(StrEnum):
    """Roof covering materials."""

    METAL = "METAL"
    ASPHALT_SHINGLE = "ASPHALT_SHINGLE"
    TILE = "TILE"


class MitigationFeature(StrEnum):
    """Installed flood mitigation measures."""

    FLOOD_VENTS = "FLOOD_VENTS"
    WATERPROOFING = "WATERPROOFING"
    BACKFLOW_PREVENTION = "BACKFLOW_PREVENTION"
    ELEVATED_UTILITIES = "ELEVATED_UTILITIES"
    FLOOD_BARRIERS = "FLOOD_BARRIERS"


class ResilienceBand(StrEnum):
    """Where a score falls relative to the configured thresholds."""

    CRITICAL = "critical"
    WARNING = "warning"
    ADEQUATE = "adequate"
