"""Tests for the marriage tier table and asset metadata."""

from datetime import date
from decimal import Decimal

import pytest

from elective_share.models import Asset, AssetType
from elective_share.rules import (
    ASSET_TYPE_RULES,
    MARRIAGE_TIERS,
    RESPONSIBLE_PARTY_LABELS,
    calculate_years_married,
    classify_marriage,
    get_applicable_percentage,
    get_asset_type_label,
    get_marriage_tier,
    get_rules_version,
    requires_advanced_review,
)


class TestYearsMarried:
    """Test suite for calculate_years_married."""

    def test_full_years_on_anniversary(self):
        """Death on the anniversary completes the year."""
        assert calculate_years_married(date(2009, 6, 1), date(2024, 6, 1)) == 15

    def test_day_before_anniversary(self):
        """Death the day before the anniversary does not complete the year."""
        assert calculate_years_married(date(2009, 6, 1), date(2024, 5, 31)) == 14

    def test_earlier_month(self):
        assert calculate_years_married(date(2010, 9, 15), date(2015, 3, 1)) == 4

    def test_later_month(self):
        assert calculate_years_married(date(2010, 3, 15), date(2015, 9, 1)) == 5

    def test_death_before_marriage_clamps_to_zero(self):
        assert calculate_years_married(date(2020, 1, 1), date(2018, 1, 1)) == 0

    def test_missing_dates(self):
        """Missing dates default to zero years."""
        assert calculate_years_married(None, date(2024, 1, 1)) == 0
        assert calculate_years_married(date(2000, 1, 1), None) == 0
        assert calculate_years_married(None, None) == 0

    def test_leap_day_marriage(self):
        """A Feb 29 anniversary is completed on Mar 1 in common years."""
        assert calculate_years_married(date(2012, 2, 29), date(2017, 2, 28)) == 4
        assert calculate_years_married(date(2012, 2, 29), date(2017, 3, 1)) == 5


class TestMarriageTiers:
    """Test suite for the applicable percentage table."""

    @pytest.mark.parametrize(
        "years,expected",
        [
            (0, Decimal("0.15")),
            (4, Decimal("0.15")),
            (5, Decimal("0.25")),
            (9, Decimal("0.25")),
            (10, Decimal("0.33")),
            (14, Decimal("0.33")),
            (15, Decimal("0.50")),
            (60, Decimal("0.50")),
        ],
    )
    def test_tier_boundaries(self, years, expected):
        """Lower bounds are inclusive, upper bounds exclusive."""
        assert get_applicable_percentage(years) == expected

    def test_table_is_contiguous(self):
        """Each tier should start where the previous one ends."""
        for lower, upper in zip(MARRIAGE_TIERS, MARRIAGE_TIERS[1:]):
            assert lower.max_years == upper.min_years
        assert MARRIAGE_TIERS[0].min_years == 0

    def test_negative_years_fall_back_to_first_tier(self):
        assert get_marriage_tier(-3) is MARRIAGE_TIERS[0]

    def test_tier_labels(self):
        assert get_marriage_tier(15).label == "15 years or more"
        assert get_marriage_tier(3).label == "Less than 5 years"


class TestClassifyMarriage:
    """Test suite for classify_marriage."""

    def test_known_duration(self):
        duration = classify_marriage(date(2009, 6, 1), date(2024, 6, 1))

        assert duration.years == 15
        assert duration.percentage == Decimal("0.50")
        assert duration.known is True

    def test_unknown_duration_uses_first_tier(self):
        """Missing dates assume the lowest tier and say so."""
        duration = classify_marriage(None, date(2024, 6, 1))

        assert duration.years == 0
        assert duration.percentage == Decimal("0.15")
        assert duration.known is False


class TestAssetMetadata:
    """Test suite for asset and party labels."""

    def test_every_asset_type_has_a_rule(self):
        assert set(ASSET_TYPE_RULES) == set(AssetType)

    def test_labels(self):
        assert get_asset_type_label(AssetType.POD_TOD) == "POD/TOD Account"
        assert len(RESPONSIBLE_PARTY_LABELS) == 4

    def test_requires_advanced_review(self):
        """Trusts, retained interests and recent transfers need detail."""
        assert not requires_advanced_review([Asset(asset_type=AssetType.PROBATE)])
        assert requires_advanced_review(
            [Asset(asset_type=AssetType.PROBATE), Asset(asset_type=AssetType.REVOCABLE_TRUST)]
        )
        assert requires_advanced_review([Asset(asset_type=AssetType.ONE_YEAR_TRANSFER)])
        assert not requires_advanced_review([])

    def test_rules_version(self):
        assert get_rules_version().startswith("nc-")
