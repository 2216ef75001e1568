"""Elective Share - surviving spouse elective share calculations."""

__version__ = "0.1.0"

from .advisories import evaluate_warnings
from .calculator import ElectiveShareCalculator
from .config import ElectiveShareConfig, RulesConfig, load_config
from .exceptions import ConfigurationError, ElectiveShareError, SnapshotError
from .models import (
    ApportionmentEntry,
    Asset,
    AssetType,
    Basics,
    CalculationMode,
    CalculationResult,
    DeadlineState,
    DeadlineStatus,
    Deductions,
    EstateCase,
    QuickTotals,
    ResponsiblePartyType,
    ShareWarning,
    SpouseReceipt,
    SpouseReceiptItem,
    WarningSeverity,
)
from .snapshot import CaseSnapshot

__all__ = [
    "ElectiveShareCalculator",
    "evaluate_warnings",
    "ElectiveShareConfig",
    "RulesConfig",
    "load_config",
    "ElectiveShareError",
    "ConfigurationError",
    "SnapshotError",
    "ApportionmentEntry",
    "Asset",
    "AssetType",
    "Basics",
    "CalculationMode",
    "CalculationResult",
    "DeadlineState",
    "DeadlineStatus",
    "Deductions",
    "EstateCase",
    "QuickTotals",
    "ResponsiblePartyType",
    "ShareWarning",
    "SpouseReceipt",
    "SpouseReceiptItem",
    "WarningSeverity",
    "CaseSnapshot",
]
