"""Exception taxonomy for the ingestion and indicator pipeline."""


class StockDataError(Exception):
    """Base class for all pipeline errors."""


class TransportError(StockDataError):
    """Raw bar source unreachable or answered with a non-success status."""


class SchemaError(StockDataError):
    """Payload is missing the time-series container or carries invalid bars."""


class StoreConnectionError(StockDataError):
    """Persistent store cannot be reached. Fatal for the whole run."""


class ConfigurationError(StockDataError):
    """Missing or invalid configuration. Fatal at startup."""
