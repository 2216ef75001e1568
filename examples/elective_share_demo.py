#!/usr/bin/env python3
"""
Elective Share Demonstration

This script walks through both calculation modes:
1. Build an itemized estate case
2. Calculate the elective share and who pays it
3. Re-estimate the same estate from quick totals

Run: python examples/elective_share_demo.py
"""

from elective_share import (
    Asset,
    AssetType,
    Basics,
    Deductions,
    ElectiveShareCalculator,
    EstateCase,
    QuickTotals,
    ResponsiblePartyType,
    SpouseReceipt,
    SpouseReceiptItem,
)
from elective_share.logging_config import configure_logging
from elective_share.rules import RESPONSIBLE_PARTY_LABELS, get_asset_type_label


def create_sample_case() -> EstateCase:
    """Create a sample estate with a trust, a joint account and a recent gift."""
    basics = Basics(
        death_date="2024-06-01",
        marriage_date="2012-09-15",
        letters_issued_date="2024-07-10",
    )

    assets = [
        Asset(
            asset_type=AssetType.PROBATE,
            description="Checking and brokerage",
            value="$185,000",
            responsible_type=ResponsiblePartyType.PERSONAL_REP,
            responsible_name="Estate of R. Smith",
        ),
        Asset(
            asset_type=AssetType.REVOCABLE_TRUST,
            description="Lake house held in trust",
            value="420,000",
            discount_pct="10",
            responsible_type=ResponsiblePartyType.TRUSTEE,
            responsible_name="Carolina Trust Co.",
        ),
        Asset(
            asset_type=AssetType.JOINT_TBE,
            description="Marital residence",
            value="240,000",
            passes_to_spouse=True,
        ),
        Asset(
            asset_type=AssetType.JOINT_JTWROS,
            description="Joint savings with daughter",
            value="60,000",
            contribution_pct="75",
            responsible_type=ResponsiblePartyType.BENEFICIARY,
            responsible_name="Emily Smith",
        ),
        Asset(
            asset_type=AssetType.ONE_YEAR_TRANSFER,
            description="Gift to son, March 2024",
            value="25,000",
            responsible_type=ResponsiblePartyType.TRANSFEREE,
            responsible_name="Michael Smith",
        ),
    ]

    spouse_receipt = SpouseReceipt(
        items=[SpouseReceiptItem(description="Vehicle", value="18,000")],
        statutory_allowance="60,000",
    )

    deductions = Deductions(total_claims="42,500", allowance_to_others="0")

    return EstateCase(
        basics=basics,
        assets=assets,
        spouse_receipt=spouse_receipt,
        deductions=deductions,
    )


def main():
    """Run the demo."""
    configure_logging("WARNING")

    print("=" * 70)
    print("Elective Share Demo")
    print("=" * 70)
    print()

    case = create_sample_case()
    calculator = ElectiveShareCalculator()

    print("Step 1: Guided calculation...")
    for asset in case.assets:
        print(f"  - {get_asset_type_label(asset.asset_type)}: {asset.description} ({asset.value})")
    result = calculator.calculate(case)
    print()
    print(f"  Marriage: {result.years_married} years ({result.tier_label}) -> {result.applicable_percentage:.0%}")
    print(f"  Total Assets:          ${result.total_assets:,.2f}")
    print(f"  Net Assets:            ${result.net_assets:,.2f}")
    print(f"  Preliminary Share:     ${result.preliminary_share:,.2f}")
    print(f"  Net Property Passing:  ${result.net_property_passing:,.2f}")
    print(f"  Elective Share:        ${result.final_elective_share:,.2f}")
    print()

    print("Step 2: Who pays...")
    for entry in result.apportionment:
        print(
            f"  - {entry.name} ({RESPONSIBLE_PARTY_LABELS[entry.party_type]}): "
            f"${entry.dollar_share:,.2f} ({entry.percent_of_liability:.1f}%)"
        )
    if result.deadline_status:
        print(f"  Filing deadline: {result.deadline} ({result.deadline_status.status.value})")
    for warning in result.warnings:
        print(f"  [{warning.severity.value}] {warning.message}")
    print()

    print("Step 3: Quick totals estimate...")
    quick = calculator.calculate_quick(
        case.basics,
        QuickTotals(
            total_assets=str(result.total_assets),
            total_claims="42,500",
            property_passing=str(result.gross_property_passing),
        ),
    )
    print(f"  Elective Share (quick): ${quick.final_elective_share:,.2f}")
    print()
    print("=" * 70)
    print("Demo complete!")
    print("=" * 70)


if __name__ == "__main__":
    main()
