"""Data models for elective share calculations.

Input records keep money and date fields exactly as entered (strings,
numbers or Decimals) so a case can be saved and restored verbatim; the
engine normalizes them when it runs. Output records carry Decimals.
"""

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .normalize import RawAmount, RawDate


def _utc_now() -> datetime:
    """Return current UTC datetime with timezone info."""
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex[:9]


# =============================================================================
# ENUMERATIONS
# =============================================================================

class AssetType(str, Enum):
    """Categories of property considered for the elective share."""
    PROBATE = "probate"
    REVOCABLE_TRUST = "revocable_trust"
    POD_TOD = "pod_tod"
    JOINT_TBE = "joint_tbe"  # Tenancy by the entirety with the spouse
    JOINT_JTWROS = "joint_jtwros"  # Joint with right of survivorship, non-spouse
    LIFE_INSURANCE = "life_insurance"
    RETIREMENT = "retirement"
    ANNUITY = "annuity"
    RETAINED_INTEREST = "retained_interest"
    ONE_YEAR_TRANSFER = "one_year_transfer"
    OTHER = "other"


class ResponsiblePartyType(str, Enum):
    """Who holds a non-spousal asset and answers for part of the share."""
    PERSONAL_REP = "personal_rep"
    TRUSTEE = "trustee"
    BENEFICIARY = "beneficiary"
    TRANSFEREE = "transferee"


class CalculationMode(str, Enum):
    GUIDED = "guided"
    QUICK = "quick"


class WarningSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class DeadlineState(str, Enum):
    """Urgency of the filing deadline relative to now."""
    PASSED = "passed"
    URGENT = "urgent"
    OK = "ok"


# =============================================================================
# CASE INPUTS
# =============================================================================

class Basics(BaseModel):
    """Case facts about the decedent and the marriage."""
    death_date: RawDate = None
    marriage_date: RawDate = None
    domiciled: bool = True  # Decedent domiciled in the governing state
    letters_issued_date: RawDate = None
    claim_after_cutover: bool = False  # Claim filed under the revised procedure


class Asset(BaseModel):
    """A single item of property as entered by the user."""
    id: str = Field(default_factory=_new_id)
    asset_type: AssetType = AssetType.PROBATE
    description: str = ""
    value: RawAmount = None  # Fair market value
    passes_to_spouse: bool = False
    responsible_type: Optional[ResponsiblePartyType] = None
    responsible_name: Optional[str] = None
    discount_pct: RawAmount = None

    # Joint-with-non-spouse only
    known_portion: bool = False
    includable_portion: RawAmount = None
    contribution_pct: RawAmount = None


class SpouseReceiptItem(BaseModel):
    id: str = Field(default_factory=_new_id)
    description: str = ""
    value: RawAmount = None


class SpouseReceipt(BaseModel):
    """Property the surviving spouse receives outside the asset list."""
    items: list[SpouseReceiptItem] = Field(default_factory=list)
    statutory_allowance: RawAmount = None  # Spouse's year's allowance
    taxes_attributable: RawAmount = None
    claims_allocated: RawAmount = None


class Deductions(BaseModel):
    total_claims: RawAmount = None  # Debts, funeral and administration costs
    allowance_to_others: RawAmount = None  # Year's allowance paid to others


class QuickTotals(BaseModel):
    """Aggregate figures used when no per-asset breakdown is available."""
    total_assets: RawAmount = None
    total_claims: RawAmount = None
    allowance_to_others: RawAmount = None
    property_passing: RawAmount = None
    taxes: RawAmount = None
    claims_on_spouse: RawAmount = None


class EstateCase(BaseModel):
    """Everything the guided calculation needs."""
    basics: Basics = Field(default_factory=Basics)
    assets: list[Asset] = Field(default_factory=list)
    spouse_receipt: SpouseReceipt = Field(default_factory=SpouseReceipt)
    deductions: Deductions = Field(default_factory=Deductions)


# =============================================================================
# CALCULATION RESULTS
# =============================================================================

class ResponsiblePartyBucket(BaseModel):
    """Running total of includable value held by one responsible party."""
    name: str
    party_type: ResponsiblePartyType
    value: Decimal = Decimal("0")


class ApportionmentEntry(BaseModel):
    """One party's pro rata slice of the elective share liability."""
    name: str
    party_type: ResponsiblePartyType
    value: Decimal
    dollar_share: Decimal
    percent_of_liability: Decimal


class ShareWarning(BaseModel):
    """Advisory raised by the warnings engine."""
    code: str
    severity: WarningSeverity
    message: str


class DeadlineStatus(BaseModel):
    deadline: date
    status: DeadlineState
    days_remaining: int


class AuditEntry(BaseModel):
    """Audit log entry for calculation transparency."""
    timestamp: datetime = Field(default_factory=_utc_now)
    step: str
    input_value: str
    output_value: str
    source: str
    notes: Optional[str] = None


class CalculationResult(BaseModel):
    """Complete elective share calculation."""

    mode: CalculationMode

    # Marriage duration
    years_married: int
    applicable_percentage: Decimal
    tier_label: str
    duration_known: bool

    # Filing deadline
    deadline: Optional[date] = None
    deadline_status: Optional[DeadlineStatus] = None

    # Net estate
    total_assets: Decimal
    total_claims: Decimal
    allowance_to_others: Decimal
    net_assets: Decimal
    preliminary_share: Decimal

    # Property passing to spouse
    gross_property_passing: Decimal
    taxes: Decimal
    claims_on_spouse: Decimal
    net_property_passing: Decimal

    final_elective_share: Decimal = Field(ge=0)
    apportionment: list[ApportionmentEntry] = Field(default_factory=list)

    warnings: list[ShareWarning] = Field(default_factory=list)
    audit_log: list[AuditEntry] = Field(default_factory=list)

    rules_version: str
    calculated_at: datetime = Field(default_factory=_utc_now)

    @property
    def has_errors(self) -> bool:
        """True when any advisory is error severity."""
        return any(w.severity == WarningSeverity.ERROR for w in self.warnings)
