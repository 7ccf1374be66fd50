"""Base interface for raw daily bar sources."""

from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass
class RawBar:
    """One daily bar as parsed from a provider response."""
    
    date: str  # ISO trading date, YYYY-MM-DD
    open: float
    high: float
    low: float
    close: float
    volume: Optional[float] = None  # Absent in some source variants


class BarSource(Protocol):
    """
    Protocol for raw bar sources.
    
    All sources must implement fetch_daily_bars() to return a symbol's daily
    history in any order.
    """
    
    def fetch_daily_bars(self, symbol: str) -> List[RawBar]:
        """
        Fetch daily bars for a symbol.
        
        Args:
            symbol: Ticker symbol (e.g., "IBM")
        
        Returns:
            List of RawBar objects (order not guaranteed)
        
        Raises:
            TransportError: Source unreachable or non-success status
            SchemaError: Response lacks the expected time-series container
        """
        ...
