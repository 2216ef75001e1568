"""Elective share calculation for a surviving spouse.

The calculation runs in one direction:

1. Classify the marriage into an applicable percentage tier
2. Value each asset and total the estate (guided mode), or take the
   totals as given (quick mode)
3. Net the estate against claims and allowances to others
4. Net the spouse's receipts against taxes and claims allocated to them
5. Elective share = max(0, net estate x percentage - net receipts)
6. Apportion the share among responsible parties (guided mode only)

The filing deadline and advisory warnings are derived alongside and never
feed back into the numbers. Every step is logged for the audit trail.
"""

from datetime import datetime
from decimal import Decimal
from typing import NamedTuple, Optional

import structlog

from .advisories import evaluate_warnings
from .apportionment import apportion
from .config import ElectiveShareConfig
from .deadline import calculate_deadline, classify_deadline
from .models import (
    ApportionmentEntry,
    AuditEntry,
    Basics,
    CalculationMode,
    CalculationResult,
    Deductions,
    EstateCase,
    QuickTotals,
    SpouseReceipt,
)
from .normalize import ZERO, parse_date, to_amount
from .rules import MarriageDuration, classify_marriage, get_rules_version
from .valuation import value_assets

logger = structlog.get_logger()


# =============================================================================
# AGGREGATION STEPS
# =============================================================================

def calculate_net_assets(
    total_assets: Decimal,
    total_claims: Decimal,
    allowance_to_others: Decimal,
) -> Decimal:
    """Total assets less claims and allowances paid to others. May be negative."""
    return total_assets - total_claims - allowance_to_others


def total_spouse_receipts(receipt: SpouseReceipt) -> Decimal:
    """Additional property and the statutory allowance received by the spouse."""
    items = sum((to_amount(i.value) for i in receipt.items), ZERO)
    return items + to_amount(receipt.statutory_allowance)


class ShareComputation(NamedTuple):
    preliminary_share: Decimal
    net_property_passing: Decimal
    final_elective_share: Decimal


def compute_share(
    net_assets: Decimal,
    applicable_percentage: Decimal,
    gross_property_passing: Decimal,
    taxes: Decimal,
    claims_on_spouse: Decimal,
) -> ShareComputation:
    """Preliminary share less net property passing, floored at zero.

    The floor is applied here and nowhere else; intermediate figures keep
    their sign.
    """
    preliminary = net_assets * applicable_percentage
    net_passing = gross_property_passing - taxes - claims_on_spouse
    final = max(ZERO, preliminary - net_passing)
    return ShareComputation(preliminary, net_passing, final)


# =============================================================================
# CALCULATOR
# =============================================================================

class ElectiveShareCalculator:
    """
    Calculate the elective share for a surviving spouse.

    Supports the guided mode, which values an itemized asset list and
    apportions the share among responsible parties, and the quick totals
    mode, which works from aggregate figures.

    The audit log is rebuilt on every call; use one instance per thread.
    """

    def __init__(self, config: Optional[ElectiveShareConfig] = None):
        """
        Initialize calculator.

        Args:
            config: Engine settings (default: loaded from the environment)
        """
        self.config = config or ElectiveShareConfig()
        self.rules_version = get_rules_version()
        self._audit_log: list[AuditEntry] = []

    def _log_step(
        self,
        step: str,
        input_value: str,
        output_value: str,
        source: str,
        notes: Optional[str] = None
    ) -> None:
        """Add an entry to the audit log."""
        entry = AuditEntry(
            step=step,
            input_value=input_value,
            output_value=output_value,
            source=source,
            notes=notes,
        )
        self._audit_log.append(entry)
        logger.info(
            "calculation_step",
            step=step,
            input=input_value,
            output=output_value,
            source=source,
        )

    def _classify_marriage(self, basics: Basics) -> MarriageDuration:
        duration = classify_marriage(
            parse_date(basics.marriage_date),
            parse_date(basics.death_date),
        )
        self._log_step(
            step="applicable_percentage",
            input_value=f"marriage={basics.marriage_date}, death={basics.death_date}",
            output_value=f"years={duration.years}, percentage={duration.percentage}",
            source=f"Marriage tier table {self.rules_version}",
            notes=duration.tier.label if duration.known else "Dates missing; first tier assumed",
        )
        return duration

    def _finish(
        self,
        *,
        mode: CalculationMode,
        basics: Basics,
        duration: MarriageDuration,
        total_assets: Decimal,
        total_claims: Decimal,
        allowance_to_others: Decimal,
        gross_property_passing: Decimal,
        taxes: Decimal,
        claims_on_spouse: Decimal,
        buckets: list,
        assets: list,
        now: Optional[datetime],
    ) -> CalculationResult:
        """Shared tail of both modes: net, share, apportion, deadline, warnings."""
        rules = self.config.rules

        net_assets = calculate_net_assets(total_assets, total_claims, allowance_to_others)
        self._log_step(
            step="net_assets",
            input_value=f"{total_assets} - {total_claims} - {allowance_to_others}",
            output_value=str(net_assets),
            source="Total assets less claims and allowances to others",
        )

        share = compute_share(
            net_assets,
            duration.percentage,
            gross_property_passing,
            taxes,
            claims_on_spouse,
        )
        self._log_step(
            step="preliminary_share",
            input_value=f"{net_assets} * {duration.percentage}",
            output_value=str(share.preliminary_share),
            source="Net assets times applicable percentage",
        )
        self._log_step(
            step="net_property_passing",
            input_value=f"{gross_property_passing} - {taxes} - {claims_on_spouse}",
            output_value=str(share.net_property_passing),
            source="Property passing to spouse less taxes and claims",
        )
        self._log_step(
            step="final_elective_share",
            input_value=f"max(0, {share.preliminary_share} - {share.net_property_passing})",
            output_value=str(share.final_elective_share),
            source="Elective share formula",
        )

        apportionment: list[ApportionmentEntry] = []
        if mode == CalculationMode.GUIDED:
            apportionment = apportion(buckets, share.final_elective_share)
            self._log_step(
                step="apportionment",
                input_value=f"{len(buckets)} responsible parties",
                output_value=", ".join(f"{e.name}={e.dollar_share}" for e in apportionment) or "none",
                source="Pro rata by nonspousal asset value",
            )

        deadline = calculate_deadline(
            parse_date(basics.letters_issued_date), rules.deadline_months
        )
        deadline_status = classify_deadline(deadline, now, rules.urgent_threshold_days)
        if deadline_status is not None:
            self._log_step(
                step="filing_deadline",
                input_value=f"letters={basics.letters_issued_date}",
                output_value=f"{deadline_status.deadline} ({deadline_status.status.value})",
                source=f"Letters date plus {rules.deadline_months} months",
            )

        warnings = evaluate_warnings(
            basics,
            assets,
            deadline_status,
            final_elective_share=share.final_elective_share,
            mode=mode,
            deadline_months=rules.deadline_months,
            procedural_cutover=rules.procedural_cutover_date,
        )

        logger.info(
            "elective_share_calculated",
            mode=mode.value,
            years_married=duration.years,
            final_elective_share=str(share.final_elective_share),
            warnings=len(warnings),
        )

        return CalculationResult(
            mode=mode,
            years_married=duration.years,
            applicable_percentage=duration.percentage,
            tier_label=duration.tier.label,
            duration_known=duration.known,
            deadline=deadline,
            deadline_status=deadline_status,
            total_assets=total_assets,
            total_claims=total_claims,
            allowance_to_others=allowance_to_others,
            net_assets=net_assets,
            preliminary_share=share.preliminary_share,
            gross_property_passing=gross_property_passing,
            taxes=taxes,
            claims_on_spouse=claims_on_spouse,
            net_property_passing=share.net_property_passing,
            final_elective_share=share.final_elective_share,
            apportionment=apportionment,
            warnings=warnings,
            audit_log=self._audit_log,
            rules_version=self.rules_version,
        )

    def calculate(
        self,
        case: EstateCase,
        now: Optional[datetime] = None,
    ) -> CalculationResult:
        """
        Calculate the elective share from an itemized case.

        Args:
            case: Basics, assets, spouse receipts and deductions
            now: Reference time for the deadline (default: current time)

        Returns:
            CalculationResult with apportionment, warnings and audit trail
        """
        self._audit_log = []

        duration = self._classify_marriage(case.basics)

        valuation = value_assets(case.assets)
        for asset, value in zip(case.assets, valuation.values):
            self._log_step(
                step=f"asset_{asset.id}",
                input_value=f"type={asset.asset_type.value}, value={asset.value}",
                output_value=str(value),
                source="Asset inclusion rules",
                notes=asset.description or None,
            )
        self._log_step(
            step="total_assets",
            input_value=f"{len(case.assets)} assets",
            output_value=str(valuation.total_assets),
            source="Sum of includable values",
        )

        receipts = total_spouse_receipts(case.spouse_receipt)
        gross_passing = valuation.property_passing + receipts
        self._log_step(
            step="gross_property_passing",
            input_value=f"assets={valuation.property_passing}, receipts={receipts}",
            output_value=str(gross_passing),
            source="Assets passing to spouse plus additional receipts",
        )

        deductions: Deductions = case.deductions
        receipt: SpouseReceipt = case.spouse_receipt
        return self._finish(
            mode=CalculationMode.GUIDED,
            basics=case.basics,
            duration=duration,
            total_assets=valuation.total_assets,
            total_claims=to_amount(deductions.total_claims),
            allowance_to_others=to_amount(deductions.allowance_to_others),
            gross_property_passing=gross_passing,
            taxes=to_amount(receipt.taxes_attributable),
            claims_on_spouse=to_amount(receipt.claims_allocated),
            buckets=list(valuation.buckets.values()),
            assets=case.assets,
            now=now,
        )

    def calculate_quick(
        self,
        basics: Basics,
        totals: QuickTotals,
        now: Optional[datetime] = None,
    ) -> CalculationResult:
        """
        Estimate the elective share from aggregate totals.

        Apportionment is always empty since no per-party breakdown exists.
        """
        self._audit_log = []

        duration = self._classify_marriage(basics)
        total_assets = to_amount(totals.total_assets)
        self._log_step(
            step="total_assets",
            input_value=str(totals.total_assets),
            output_value=str(total_assets),
            source="User provided total",
        )

        return self._finish(
            mode=CalculationMode.QUICK,
            basics=basics,
            duration=duration,
            total_assets=total_assets,
            total_claims=to_amount(totals.total_claims),
            allowance_to_others=to_amount(totals.allowance_to_others),
            gross_property_passing=to_amount(totals.property_passing),
            taxes=to_amount(totals.taxes),
            claims_on_spouse=to_amount(totals.claims_on_spouse),
            buckets=[],
            assets=[],
            now=now,
        )
