"""Tests for per-asset inclusion rules and responsible-party grouping."""

from decimal import Decimal

import pytest

from elective_share.models import Asset, AssetType, ResponsiblePartyType
from elective_share.valuation import (
    includable_value,
    responsible_party_key,
    value_assets,
)


class TestIncludableValue:
    """Test suite for includable_value."""

    def test_plain_asset_is_full_value(self):
        asset = Asset(asset_type=AssetType.PROBATE, value="$200,000")
        assert includable_value(asset) == Decimal("200000")

    def test_discount_applies_to_non_joint_types(self):
        """A 20% discount should reduce value to 80%."""
        asset = Asset(asset_type=AssetType.RETIREMENT, value="50000", discount_pct="20")
        assert includable_value(asset) == Decimal("40000")

    def test_blank_discount_is_ignored(self):
        asset = Asset(asset_type=AssetType.ANNUITY, value="50000", discount_pct="")
        assert includable_value(asset) == Decimal("50000")

    @pytest.mark.parametrize("discount", [None, "", "0", "15", "99"])
    def test_tenancy_by_entirety_is_half_regardless_of_discount(self, discount):
        """TBE property contributes exactly half its value."""
        asset = Asset(asset_type=AssetType.JOINT_TBE, value="100000", discount_pct=discount)
        assert includable_value(asset) == Decimal("50000")

    def test_known_portion_replaces_value(self):
        """An explicit includable portion ignores value and contribution."""
        asset = Asset(
            asset_type=AssetType.JOINT_JTWROS,
            value="300000",
            discount_pct="50",
            known_portion=True,
            includable_portion="42,500",
            contribution_pct="10",
        )
        assert includable_value(asset) == Decimal("42500")

    def test_contribution_percentage(self):
        asset = Asset(asset_type=AssetType.JOINT_JTWROS, value="80000", contribution_pct="25")
        assert includable_value(asset) == Decimal("20000")

    @pytest.mark.parametrize("contribution", [None, "", "0"])
    def test_missing_contribution_assumes_full(self, contribution):
        """Without contribution info the decedent is presumed to own it all."""
        asset = Asset(asset_type=AssetType.JOINT_JTWROS, value="80000", contribution_pct=contribution)
        assert includable_value(asset) == Decimal("80000")

    def test_jtwros_ignores_discount(self):
        asset = Asset(
            asset_type=AssetType.JOINT_JTWROS,
            value="80000",
            contribution_pct="50",
            discount_pct="50",
        )
        assert includable_value(asset) == Decimal("40000")

    def test_unparseable_value_is_zero(self):
        asset = Asset(asset_type=AssetType.LIFE_INSURANCE, value="unknown")
        assert includable_value(asset) == Decimal("0")


class TestResponsiblePartyKey:
    """Test suite for responsible_party_key."""

    def test_named_party(self):
        asset = Asset(responsible_type=ResponsiblePartyType.TRUSTEE, responsible_name="First Bank")
        assert responsible_party_key(asset) == ("First Bank", ResponsiblePartyType.TRUSTEE)

    def test_falls_back_to_type(self):
        asset = Asset(responsible_type=ResponsiblePartyType.TRANSFEREE, responsible_name="")
        assert responsible_party_key(asset) == ("transferee", ResponsiblePartyType.TRANSFEREE)

    def test_defaults_to_beneficiary(self):
        assert responsible_party_key(Asset()) == ("beneficiary", ResponsiblePartyType.BENEFICIARY)

    def test_name_kept_as_entered(self):
        asset = Asset(responsible_name="Child A ")
        assert responsible_party_key(asset) == ("Child A ", ResponsiblePartyType.BENEFICIARY)


class TestValueAssets:
    """Test suite for value_assets."""

    def test_routes_to_spouse_and_parties(self):
        assets = [
            Asset(asset_type=AssetType.PROBATE, value="200000", responsible_name="Child A"),
            Asset(asset_type=AssetType.JOINT_TBE, value="100000", passes_to_spouse=True),
            Asset(asset_type=AssetType.POD_TOD, value="30000", responsible_name="Child B"),
        ]

        summary = value_assets(assets)

        assert summary.total_assets == Decimal("280000")
        assert summary.property_passing == Decimal("50000")
        assert list(summary.buckets) == ["Child A", "Child B"]
        assert summary.values == [Decimal("200000"), Decimal("50000"), Decimal("30000")]

    def test_same_party_accumulates_in_first_seen_order(self):
        """A party named twice should keep its first position and type."""
        assets = [
            Asset(value="10", responsible_name="Trust", responsible_type=ResponsiblePartyType.TRUSTEE),
            Asset(value="20", responsible_name="Child"),
            Asset(value="5", responsible_name="Trust", responsible_type=ResponsiblePartyType.BENEFICIARY),
        ]

        summary = value_assets(assets)

        assert list(summary.buckets) == ["Trust", "Child"]
        assert summary.buckets["Trust"].value == Decimal("15")
        assert summary.buckets["Trust"].party_type == ResponsiblePartyType.TRUSTEE

    def test_names_differing_in_spacing_stay_separate(self):
        assets = [
            Asset(value="100", responsible_name="Child A"),
            Asset(value="100", responsible_name="Child A "),
        ]

        summary = value_assets(assets)

        assert list(summary.buckets) == ["Child A", "Child A "]
        assert summary.buckets["Child A"].value == Decimal("100")

    def test_asset_value_independent_of_other_assets(self):
        """Adding assets never changes an existing asset's value."""
        tbe = Asset(asset_type=AssetType.JOINT_TBE, value="100000")
        alone = value_assets([tbe]).values[0]
        together = value_assets([Asset(value="5"), tbe, Asset(value="7")]).values[1]
        assert alone == together == Decimal("50000")

    def test_empty_list(self):
        summary = value_assets([])
        assert summary.total_assets == 0
        assert summary.property_passing == 0
        assert not summary.buckets
