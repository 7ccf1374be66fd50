"""Core models and utilities for the stock data pipeline."""

from .dates import parse_iso_date, to_iso_date
from .enums import FamilyStatus, IndicatorKind, SymbolStatus
from .errors import (
    ConfigurationError,
    SchemaError,
    StockDataError,
    StoreConnectionError,
    TransportError,
)
from .models import (
    OHLCV_FIELDS,
    Bar,
    FamilyOutcome,
    IndicatorReport,
    IngestionResult,
    RunReport,
    SymbolResult,
)
from .validation import normalize_periods, require_finite

__all__ = [
    # Enums
    "IndicatorKind",
    "FamilyStatus",
    "SymbolStatus",
    # Errors
    "StockDataError",
    "TransportError",
    "SchemaError",
    "StoreConnectionError",
    "ConfigurationError",
    # Models
    "OHLCV_FIELDS",
    "Bar",
    "IngestionResult",
    "FamilyOutcome",
    "IndicatorReport",
    "SymbolResult",
    "RunReport",
    # Date utilities
    "to_iso_date",
    "parse_iso_date",
    # Validation
    "require_finite",
    "normalize_periods",
]
