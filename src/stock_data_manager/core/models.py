"""Pydantic v2 models for bars and pipeline reports."""

import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from .dates import to_iso_date
from .enums import FamilyStatus, IndicatorKind, SymbolStatus
from .validation import require_finite


# Document fields owned by ingestion; the indicator engine never writes them
OHLCV_FIELDS = ("date", "open", "high", "low", "close", "volume")

INDICATOR_LABEL_RE = re.compile(r"^\d+_day_(sma|ema)$")


class Bar(BaseModel):
    """One trading day for one symbol."""

    date: str = Field(description="ISO trading date, natural key of the series")
    open: float
    high: float
    low: float
    close: float
    volume: Optional[float] = Field(default=None, description="Absent in some source variants")
    indicators: Dict[str, float] = Field(
        default_factory=dict, description="Indicator label -> value"
    )

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> str:
        """Normalize date/datetime/str to an ISO date string."""
        return to_iso_date(v)

    @field_validator("open", "high", "low", "close", mode="after")
    @classmethod
    def validate_price(cls, v: float, info: ValidationInfo) -> float:
        """Prices must be finite."""
        return require_finite(info.field_name, v)

    @field_validator("volume", mode="after")
    @classmethod
    def validate_volume(cls, v: Optional[float]) -> Optional[float]:
        """Volume, when present, must be finite."""
        if v is None:
            return v
        return require_finite("volume", v)

    def to_document(self) -> Dict[str, Any]:
        """Flatten to the stored document shape (indicators as top-level fields)."""
        doc: Dict[str, Any] = {
            "date": self.date,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
        }
        if self.volume is not None:
            doc["volume"] = self.volume
        doc.update(self.indicators)
        return doc

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Bar":
        """Build a Bar from a stored document, ignoring unknown fields such as _id."""
        indicators = {
            k: float(v) for k, v in doc.items()
            if isinstance(k, str) and INDICATOR_LABEL_RE.match(k) and v is not None
        }
        return cls(
            date=doc["date"],
            open=doc["open"],
            high=doc["high"],
            low=doc["low"],
            close=doc["close"],
            volume=doc.get("volume"),
            indicators=indicators,
        )


class IngestionResult(BaseModel):
    """Outcome of merging one raw batch into a series."""

    symbol: str
    received: int = Field(ge=0, description="Raw bars handed to the pipeline")
    inserted: int = Field(ge=0, description="Genuinely new dates written")
    skipped: int = Field(ge=0, description="Dates already stored or repeated in the batch")


class FamilyOutcome(BaseModel):
    """Outcome of one indicator family over one series."""

    kind: IndicatorKind
    status: FamilyStatus
    periods: List[int] = Field(default_factory=list)
    values_written: int = Field(default=0, ge=0)


class IndicatorReport(BaseModel):
    """Outcome of an indicator pass over one series."""

    symbol: str
    bars: int = Field(ge=0, description="Series length at read time")
    families: List[FamilyOutcome] = Field(default_factory=list)

    def outcome(self, kind: IndicatorKind) -> Optional[FamilyOutcome]:
        """Return the outcome for one family, if it was evaluated."""
        for family in self.families:
            if family.kind == kind:
                return family
        return None


class SymbolResult(BaseModel):
    """Outcome of ingestion plus indicators for one symbol."""

    symbol: str
    status: SymbolStatus
    ingestion: Optional[IngestionResult] = None
    indicators: Optional[IndicatorReport] = None
    error: Optional[str] = Field(default=None, description="Failure summary when status is failed")


class RunReport(BaseModel):
    """Outcome of one orchestrator run over the ticker universe."""

    results: List[SymbolResult] = Field(default_factory=list)

    @property
    def succeeded(self) -> List[str]:
        return [r.symbol for r in self.results if r.status == SymbolStatus.OK]

    @property
    def failed(self) -> List[str]:
        return [r.symbol for r in self.results if r.status == SymbolStatus.FAILED]

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return self.model_dump_json(exclude_none=True, indent=indent)
