"""Runtime configuration, read from ``STOREFRONT_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="STOREFRONT_", env_file=".env", extra="ignore")

    environment: str = "development"
    data_dir: Path = _DEFAULT_DATA_DIR

    payment_gateway: Literal["braintree", "fake"] = "braintree"
    braintree_environment: Literal["sandbox", "production"] = "sandbox"
    braintree_merchant_id: str = ""
    braintree_public_key: str = ""
    braintree_private_key: str = ""

    # Outbound calls never block without bound.
    gateway_timeout_seconds: float = 30.0
    store_timeout_seconds: float = 5.0

    # When False, checkout re-prices every cart entry from the catalog.
    trust_client_prices: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
