"""Statutory rule tables for the elective share.

This module holds the fixed tables the engine consults: the applicable
percentage tiers keyed by length of marriage, display metadata for asset and
responsible-party types, and the marriage duration classifier that reads the
tier table.

Tables are ordered tuples consulted by lookup. Edit the table, not the code,
when the statute changes, and bump RULES_VERSION.
"""

from datetime import date
from decimal import Decimal
from math import inf
from typing import NamedTuple, Optional

from .models import Asset, AssetType, ResponsiblePartyType

# =============================================================================
# VERSION TRACKING
# =============================================================================

RULES_VERSION = "nc-elective-share-2026.1"


def get_rules_version() -> str:
    """Return current rule table version."""
    return RULES_VERSION


# =============================================================================
# APPLICABLE PERCENTAGE BY LENGTH OF MARRIAGE
# =============================================================================
# Half-open intervals [min_years, max_years); the first matching tier wins.

class MarriageTier(NamedTuple):
    min_years: float
    max_years: float
    percentage: Decimal
    label: str

    def contains(self, years: int) -> bool:
        return self.min_years <= years < self.max_years


MARRIAGE_TIERS: tuple[MarriageTier, ...] = (
    MarriageTier(0, 5, Decimal("0.15"), "Less than 5 years"),
    MarriageTier(5, 10, Decimal("0.25"), "5 to less than 10 years"),
    MarriageTier(10, 15, Decimal("0.33"), "10 to less than 15 years"),
    MarriageTier(15, inf, Decimal("0.50"), "15 years or more"),
)


class MarriageDuration(NamedTuple):
    years: int
    tier: MarriageTier
    known: bool  # False when a date was missing and the first tier was assumed

    @property
    def percentage(self) -> Decimal:
        return self.tier.percentage


def calculate_years_married(
    marriage_date: Optional[date],
    death_date: Optional[date],
) -> int:
    """Whole completed years between marriage and death.

    Returns 0 when either date is missing or death precedes marriage.
    """
    if not marriage_date or not death_date:
        return 0

    years = death_date.year - marriage_date.year
    if (death_date.month, death_date.day) < (marriage_date.month, marriage_date.day):
        years -= 1
    return max(0, years)


def get_marriage_tier(years: int) -> MarriageTier:
    """Look up the tier for a duration, falling back to the first tier."""
    for tier in MARRIAGE_TIERS:
        if tier.contains(years):
            return tier
    return MARRIAGE_TIERS[0]


def get_applicable_percentage(years: int) -> Decimal:
    return get_marriage_tier(years).percentage


def classify_marriage(
    marriage_date: Optional[date],
    death_date: Optional[date],
) -> MarriageDuration:
    """Classify a marriage into its applicable percentage tier."""
    years = calculate_years_married(marriage_date, death_date)
    return MarriageDuration(
        years=years,
        tier=get_marriage_tier(years),
        known=bool(marriage_date and death_date),
    )


# =============================================================================
# ASSET AND RESPONSIBLE PARTY METADATA
# =============================================================================

class AssetTypeRule(NamedTuple):
    label: str
    requires_review: bool  # Calls for the detailed (advanced) entry fields


ASSET_TYPE_RULES: dict[AssetType, AssetTypeRule] = {
    AssetType.PROBATE: AssetTypeRule("Probate Property", False),
    AssetType.REVOCABLE_TRUST: AssetTypeRule("Revocable Trust", True),
    AssetType.POD_TOD: AssetTypeRule("POD/TOD Account", False),
    AssetType.JOINT_TBE: AssetTypeRule("Joint Property (TBE w/ Spouse)", False),
    AssetType.JOINT_JTWROS: AssetTypeRule("Joint Property (JTWROS w/ Non-Spouse)", True),
    AssetType.LIFE_INSURANCE: AssetTypeRule("Life Insurance", False),
    AssetType.RETIREMENT: AssetTypeRule("Retirement Account", False),
    AssetType.ANNUITY: AssetTypeRule("Annuity", False),
    AssetType.RETAINED_INTEREST: AssetTypeRule("Transfer w/ Retained Interest", True),
    AssetType.ONE_YEAR_TRANSFER: AssetTypeRule("Transfer Within 1 Year", True),
    AssetType.OTHER: AssetTypeRule("Other Asset", False),
}

# Joint holdings carry their own inclusion rule and never take a discount
JOINT_ASSET_TYPES = frozenset({AssetType.JOINT_TBE, AssetType.JOINT_JTWROS})

RESPONSIBLE_PARTY_LABELS: dict[ResponsiblePartyType, str] = {
    ResponsiblePartyType.PERSONAL_REP: "Personal Representative",
    ResponsiblePartyType.TRUSTEE: "Trustee",
    ResponsiblePartyType.BENEFICIARY: "Beneficiary",
    ResponsiblePartyType.TRANSFEREE: "Transferee",
}

DEFAULT_RESPONSIBLE_TYPE = ResponsiblePartyType.BENEFICIARY


def get_asset_type_label(asset_type: AssetType) -> str:
    return ASSET_TYPE_RULES[asset_type].label


def requires_advanced_review(assets: list[Asset]) -> bool:
    """True if any asset's type calls for the detailed entry fields."""
    return any(ASSET_TYPE_RULES[a.asset_type].requires_review for a in assets)
