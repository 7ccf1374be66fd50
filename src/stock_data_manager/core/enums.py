"""Strict enums for pipeline models."""

from enum import Enum


class IndicatorKind(str, Enum):
    """Indicator families computed over a series."""

    SMA = "sma"
    EMA = "ema"


class FamilyStatus(str, Enum):
    """Outcome of one indicator family for one symbol."""

    COMPUTED = "computed"
    INSUFFICIENT_HISTORY = "insufficient_history"
    SKIPPED = "skipped"


class SymbolStatus(str, Enum):
    """Outcome of one symbol within a run."""

    OK = "ok"
    FAILED = "failed"
