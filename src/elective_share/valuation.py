"""Per-asset inclusion rules and responsible-party grouping.

Each asset type maps to one pure valuation function of that asset's own
fields. ``value_assets`` runs them over the asset list and accumulates the
totals the share calculation needs.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable

import structlog

from .models import Asset, AssetType, ResponsiblePartyBucket
from .normalize import ZERO, to_amount
from .rules import DEFAULT_RESPONSIBLE_TYPE

logger = structlog.get_logger()

HUNDRED = Decimal("100")


def _discounted_value(asset: Asset) -> Decimal:
    """Fair market value less any valuation discount."""
    value = to_amount(asset.value)
    discount = to_amount(asset.discount_pct)
    if discount:
        value = value * (1 - discount / HUNDRED)
    return value


def _entirety_value(asset: Asset) -> Decimal:
    """Half of property held by the entirety with the spouse."""
    return to_amount(asset.value) / 2


def _survivorship_value(asset: Asset) -> Decimal:
    """Decedent's share of property held jointly with a non-spouse.

    An explicitly known includable portion replaces the value outright;
    otherwise the contribution percentage applies, assuming 100% when unset.
    """
    if asset.known_portion:
        return to_amount(asset.includable_portion)
    contribution = to_amount(asset.contribution_pct) or HUNDRED
    return to_amount(asset.value) * contribution / HUNDRED


VALUATION_RULES: dict[AssetType, Callable[[Asset], Decimal]] = {
    AssetType.JOINT_TBE: _entirety_value,
    AssetType.JOINT_JTWROS: _survivorship_value,
}


def includable_value(asset: Asset) -> Decimal:
    """Value of a single asset counted toward total assets."""
    rule = VALUATION_RULES.get(asset.asset_type, _discounted_value)
    return rule(asset)


def responsible_party_key(asset: Asset) -> tuple[str, str]:
    """Return (bucket name, party type) for a non-spousal asset."""
    party_type = asset.responsible_type or DEFAULT_RESPONSIBLE_TYPE
    name = asset.responsible_name or party_type.value
    return name, party_type


@dataclass
class AssetValuationSummary:
    """Totals produced by valuing the asset list."""
    total_assets: Decimal = ZERO
    property_passing: Decimal = ZERO
    values: list[Decimal] = field(default_factory=list)  # Per asset, in input order
    buckets: "OrderedDict[str, ResponsiblePartyBucket]" = field(default_factory=OrderedDict)


def value_assets(assets: list[Asset]) -> AssetValuationSummary:
    """Value every asset and route it to the spouse or a responsible party.

    Buckets keep the order in which each party first appears.
    """
    summary = AssetValuationSummary()

    for asset in assets:
        value = includable_value(asset)
        summary.values.append(value)
        summary.total_assets += value

        if asset.passes_to_spouse:
            summary.property_passing += value
            recipient = "spouse"
        else:
            name, party_type = responsible_party_key(asset)
            bucket = summary.buckets.get(name)
            if bucket is None:
                bucket = ResponsiblePartyBucket(name=name, party_type=party_type)
                summary.buckets[name] = bucket
            bucket.value += value
            recipient = name

        logger.debug(
            "asset_valued",
            asset_id=asset.id,
            asset_type=asset.asset_type.value,
            raw_value=str(asset.value),
            includable=str(value),
            recipient=recipient,
        )

    return summary
