"""Serializable snapshot of an in-progress case.

The engine stores nothing itself. A front end that wants to keep a user's
answers between sessions saves a CaseSnapshot and restores it later; raw
entries (including half-typed amounts) come back as they were saved.
"""

import json
from datetime import datetime, timezone
from typing import Optional

import structlog
from pydantic import BaseModel, Field, ValidationError

from .exceptions import SnapshotError
from .models import (
    Asset,
    Basics,
    CalculationMode,
    Deductions,
    EstateCase,
    QuickTotals,
    SpouseReceipt,
)

logger = structlog.get_logger()

SNAPSHOT_VERSION = 1


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CaseSnapshot(BaseModel):
    """Everything a user has entered, in either mode."""

    version: int = SNAPSHOT_VERSION
    mode: Optional[CalculationMode] = None
    basics: Basics = Field(default_factory=Basics)
    assets: list[Asset] = Field(default_factory=list)
    spouse_receipt: SpouseReceipt = Field(default_factory=SpouseReceipt)
    deductions: Deductions = Field(default_factory=Deductions)
    quick: QuickTotals = Field(default_factory=QuickTotals)
    saved_at: datetime = Field(default_factory=_utc_now)

    @classmethod
    def from_case(
        cls,
        case: EstateCase,
        quick: Optional[QuickTotals] = None,
        mode: CalculationMode = CalculationMode.GUIDED,
    ) -> "CaseSnapshot":
        return cls(
            mode=mode,
            basics=case.basics,
            assets=case.assets,
            spouse_receipt=case.spouse_receipt,
            deductions=case.deductions,
            quick=quick or QuickTotals(),
        )

    def to_case(self) -> EstateCase:
        return EstateCase(
            basics=self.basics,
            assets=self.assets,
            spouse_receipt=self.spouse_receipt,
            deductions=self.deductions,
        )

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, payload: str) -> "CaseSnapshot":
        """Restore a snapshot saved with ``to_json``.

        Raises:
            SnapshotError: If the payload is not valid JSON or does not
                describe a case.
        """
        try:
            data = json.loads(payload)
        except (TypeError, ValueError) as e:
            raise SnapshotError(
                "Snapshot is not valid JSON",
                details={"error": str(e)},
            ) from e

        if not isinstance(data, dict):
            raise SnapshotError(
                "Snapshot must be a JSON object",
                details={"type": type(data).__name__},
            )

        try:
            snapshot = cls.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first.get("loc", ()))
            raise SnapshotError(
                f"Snapshot field is invalid: {first.get('msg')}",
                field=field or None,
                details={"error_count": e.error_count()},
            ) from e

        logger.debug(
            "snapshot_restored",
            mode=snapshot.mode.value if snapshot.mode else None,
            assets=len(snapshot.assets),
        )
        return snapshot
