"""Advisory checks run alongside the elective share calculation.

The checks never change the numbers. Each is a row in ``WARNING_CHECKS``:
a stable code and a function that inspects the case and returns a
(severity, message) pair when it fires. Rows are evaluated in table order and
every row that fires contributes one warning.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Callable, NamedTuple, Optional

from .deadline import DEFAULT_DEADLINE_MONTHS
from .models import (
    Asset,
    AssetType,
    Basics,
    CalculationMode,
    DeadlineState,
    DeadlineStatus,
    ShareWarning,
    WarningSeverity,
)
from .normalize import is_blank, parse_date

DEFAULT_PROCEDURAL_CUTOVER = date(2026, 1, 1)


def _long_date(value: date) -> str:
    return f"{value.strftime('%B')} {value.day}, {value.year}"


@dataclass
class AdvisoryContext:
    """Inputs visible to the advisory checks."""
    basics: Basics
    assets: list[Asset] = field(default_factory=list)
    deadline_status: Optional[DeadlineStatus] = None
    final_elective_share: Optional[Decimal] = None
    mode: CalculationMode = CalculationMode.GUIDED
    deadline_months: int = DEFAULT_DEADLINE_MONTHS
    procedural_cutover: date = DEFAULT_PROCEDURAL_CUTOVER


Finding = Optional[tuple[WarningSeverity, str]]


class WarningCheck(NamedTuple):
    code: str
    evaluate: Callable[[AdvisoryContext], Finding]


def _one_year_transfer(ctx: AdvisoryContext) -> Finding:
    if any(a.asset_type == AssetType.ONE_YEAR_TRANSFER for a in ctx.assets):
        return (
            WarningSeverity.WARNING,
            "Transfer within 1 year detected. May be includable; consult counsel.",
        )
    return None


def _missing_contribution(ctx: AdvisoryContext) -> Finding:
    for a in ctx.assets:
        if (
            a.asset_type == AssetType.JOINT_JTWROS
            and not a.known_portion
            and is_blank(a.contribution_pct)
        ):
            return (
                WarningSeverity.WARNING,
                "Joint property with non-spouse missing contribution info.",
            )
    return None


def _not_domiciled(ctx: AdvisoryContext) -> Finding:
    if not ctx.basics.domiciled:
        return (
            WarningSeverity.ERROR,
            "NC elective share applies only to NC-domiciled decedents.",
        )
    return None


def _filing_deadline(ctx: AdvisoryContext) -> Finding:
    status = ctx.deadline_status
    if status is None:
        return None
    if status.status == DeadlineState.PASSED:
        return (
            WarningSeverity.ERROR,
            f"The {ctx.deadline_months}-month deadline has passed.",
        )
    if status.status == DeadlineState.URGENT:
        return (
            WarningSeverity.WARNING,
            f"Only {status.days_remaining} days until filing deadline.",
        )
    return None


def _revised_procedure(ctx: AdvisoryContext) -> Finding:
    if ctx.basics.claim_after_cutover:
        return (
            WarningSeverity.INFO,
            f"Claims filed on or after {_long_date(ctx.procedural_cutover)}: "
            "petition must be verified, Rule 4 service applies, and failure to "
            "serve within 6 months does not bar the claim.",
        )
    return None


def _unknown_duration(ctx: AdvisoryContext) -> Finding:
    marriage = parse_date(ctx.basics.marriage_date)
    death = parse_date(ctx.basics.death_date)
    if marriage is None or death is None:
        return (
            WarningSeverity.INFO,
            "Marriage or death date missing; the lowest applicable percentage "
            "(15%) was assumed.",
        )
    return None


def _share_satisfied(ctx: AdvisoryContext) -> Finding:
    if ctx.final_elective_share is not None and ctx.final_elective_share == 0:
        return (
            WarningSeverity.INFO,
            "Spouse's receipts meet or exceed the elective share.",
        )
    return None


def _quick_estimate(ctx: AdvisoryContext) -> Finding:
    if ctx.mode == CalculationMode.QUICK:
        return (
            WarningSeverity.INFO,
            "Estimate only: quick totals cannot calculate detailed apportionment.",
        )
    return None


WARNING_CHECKS: tuple[WarningCheck, ...] = (
    WarningCheck("one_year_transfer", _one_year_transfer),
    WarningCheck("jtwros_missing_contribution", _missing_contribution),
    WarningCheck("not_domiciled", _not_domiciled),
    WarningCheck("filing_deadline", _filing_deadline),
    WarningCheck("revised_procedure", _revised_procedure),
    WarningCheck("marriage_duration_unknown", _unknown_duration),
    WarningCheck("share_satisfied", _share_satisfied),
    WarningCheck("quick_estimate", _quick_estimate),
)


def run_checks(ctx: AdvisoryContext) -> list[ShareWarning]:
    warnings = []
    for check in WARNING_CHECKS:
        finding = check.evaluate(ctx)
        if finding is not None:
            severity, message = finding
            warnings.append(
                ShareWarning(code=check.code, severity=severity, message=message)
            )
    return warnings


def evaluate_warnings(
    basics: Basics,
    assets: Optional[list[Asset]] = None,
    deadline_status: Optional[DeadlineStatus] = None,
    *,
    final_elective_share: Optional[Decimal] = None,
    mode: CalculationMode = CalculationMode.GUIDED,
    deadline_months: int = DEFAULT_DEADLINE_MONTHS,
    procedural_cutover: date = DEFAULT_PROCEDURAL_CUTOVER,
) -> list[ShareWarning]:
    """Run every advisory check against a case.

    Args:
        basics: Case basics.
        assets: Asset list (empty in quick totals mode).
        deadline_status: Classified filing deadline, if letters have issued.
        final_elective_share: Computed share, when a result exists.
        mode: Which calculation path produced the result.
        deadline_months: Filing window used in the deadline message.
        procedural_cutover: First filing date under the revised procedure.

    Returns:
        Warnings in check order.
    """
    return run_checks(
        AdvisoryContext(
            basics=basics,
            assets=list(assets or []),
            deadline_status=deadline_status,
            final_elective_share=final_elective_share,
            mode=mode,
            deadline_months=deadline_months,
            procedural_cutover=procedural_cutover,
        )
    )
