"""Runtime configuration loaded from environment variables and an optional .env file."""

import json
from pathlib import Path
from typing import Annotated, Any, List, Optional

from pydantic import Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .core import ConfigurationError, normalize_periods


API_KEY_PLACEHOLDER = "YOUR_API_KEY"


def parse_period_list(value: Any) -> List[int]:
    """
    Parse a period set from config.

    Accepts a list of ints, a comma-separated string ("20, 50,200") or a JSON
    list string ("[20, 50]"). Blank strings yield an empty list.
    """
    if value is None:
        return []
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return []
        if s.startswith("["):
            try:
                value = json.loads(s)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid period list: {value!r}") from e
        else:
            try:
                value = [int(part.strip()) for part in s.split(",") if part.strip()]
            except ValueError as e:
                raise ValueError(f"Invalid period list: {value!r}") from e
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"Period list must be a list or comma-separated string, got {value!r}")
    return list(value)


class Settings(BaseSettings):
    """Pipeline settings. Every field can be set through an ``SDM_``-prefixed env var."""

    # Provider
    alpha_vantage_api_key: str = ""
    alpha_vantage_base_url: str = "https://www.alphavantage.co/query"
    request_timeout: float = Field(default=30.0, gt=0)

    # Store
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str = "stock_data"
    stocks_list_collection: str = "stocks_list"
    mongo_timeout_ms: int = Field(default=5000, gt=0)

    # Indicators
    sma_periods: Annotated[List[int], NoDecode] = Field(default_factory=lambda: [20, 50, 200])
    ema_periods: Annotated[List[int], NoDecode] = Field(default_factory=lambda: [12, 26])

    # Runtime
    max_workers: int = Field(default=1, ge=1)
    log_level: str = "INFO"
    log_dir: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix="SDM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("sma_periods", "ema_periods", mode="before")
    @classmethod
    def split_periods(cls, v: Any) -> List[int]:
        """Allow comma-separated strings for period sets."""
        return parse_period_list(v)

    @field_validator("sma_periods", "ema_periods", mode="after")
    @classmethod
    def validate_periods(cls, v: List[int], info: ValidationInfo) -> List[int]:
        """Positive ints only; duplicates collapsed keeping order."""
        return normalize_periods(info.field_name, v)

    @field_validator("log_level", mode="after")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper()

    def require_api_key(self) -> str:
        """
        Return the Alpha Vantage API key.

        Raises:
            ConfigurationError: If the key is missing or still the placeholder
        """
        key = self.alpha_vantage_api_key.strip()
        if not key or key == API_KEY_PLACEHOLDER:
            raise ConfigurationError(
                f"Please replace '{API_KEY_PLACEHOLDER}' with your actual Alpha Vantage "
                "API key (set SDM_ALPHA_VANTAGE_API_KEY)."
            )
        return key

    def require_store(self) -> None:
        """
        Check store settings are present.

        Raises:
            ConfigurationError: If the connection string or database name is blank
        """
        if not self.mongo_uri.strip():
            raise ConfigurationError("Missing store connection string (SDM_MONGO_URI).")
        if not self.mongo_database.strip():
            raise ConfigurationError("Missing store database name (SDM_MONGO_DATABASE).")


def load_settings(**overrides: Any) -> Settings:
    """
    Build Settings from the environment, .env and explicit overrides.

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
