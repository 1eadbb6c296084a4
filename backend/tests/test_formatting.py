"""Tests for formatting helpers."""

from tidemark.formatting import (
    format_enum_list,
    format_feet,
    format_score,
    format_yes_no,
)
from tidemark.models.enums import MitigationFeature


class TestFormatFeet:
    def test_one_decimal(self) -> None:
        assert format_feet(9.46) == "9.5 feet"

    def test_whole_number(self) -> None:
        assert format_feet(8) == "8.0 feet"


class TestFormatScore:
    def test_rounds_to_one_decimal(self) -> None:
        assert format_score(99.1) == "99.1"
        assert format_score(87.14) == "87.1"


class TestMisc:
    def test_yes_no(self) -> None:
        assert format_yes_no(True) == "Yes"
        assert format_yes_no(False) == "No"

    def test_enum_list(self) -> None:
        assert (
            format_enum_list(
                [MitigationFeature.FLOOD_VENTS, MitigationFeature.WATERPROOFING]
            )
            == "FLOOD_VENTS, WATERPROOFING"
        )

    def test_empty_enum_list(self) -> None:
        assert format_enum_list([]) == "None"
