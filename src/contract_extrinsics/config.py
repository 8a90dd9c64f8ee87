"""Configuration management for contract-extrinsics using Pydantic Settings."""

from enum import Enum
from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from contract_extrinsics.blockchain.networks import ProductionChain
from contract_extrinsics.blockchain.urls import DEFAULT_NODE_URL, parse_url
from contract_extrinsics.core.wallet import EnvironmentSigner


class Verbosity(str, Enum):
    """Message reporting levels."""

    QUIET = "quiet"
    DEFAULT = "default"
    VERBOSE = "verbose"

    @property
    def log_level(self) -> str:
        """Log level matching this verbosity."""
        return {
            Verbosity.QUIET: "WARNING",
            Verbosity.DEFAULT: "INFO",
            Verbosity.VERBOSE: "DEBUG",
        }[self]

    def is_verbose(self) -> bool:
        return self is Verbosity.VERBOSE

    def is_quiet(self) -> bool:
        return self is Verbosity.QUIET


class ExtrinsicsConfig(BaseSettings):
    """Extrinsic settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # Network
    url: str = Field(default=DEFAULT_NODE_URL, alias="CONTRACT_URL")
    chain: ProductionChain | None = Field(default=None, alias="CONTRACT_CHAIN")

    # Signer
    suri: SecretStr | None = Field(default=None, alias="CONTRACT_SURI")
    suri_file: str | None = Field(default=None, alias="CONTRACT_SURI_FILE")

    # Extrinsic
    storage_deposit_limit: int | None = Field(
        default=None, alias="CONTRACT_STORAGE_DEPOSIT_LIMIT", ge=0
    )
    verbosity: Verbosity = Field(default=Verbosity.DEFAULT, alias="CONTRACT_VERBOSITY")

    # Artifacts
    file: Path | None = Field(default=None, alias="CONTRACT_FILE")
    manifest_path: Path | None = Field(default=None, alias="CONTRACT_MANIFEST_PATH")

    # Observability
    log_level: str = Field(default="INFO", alias="CONTRACT_LOG_LEVEL")
    log_format: str = Field(default="text", alias="CONTRACT_LOG_FORMAT")

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        parse_url(value)
        return value

    @field_validator("chain", mode="before")
    @classmethod
    def _resolve_chain(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, ProductionChain):
            if not value.strip():
                return None
            return ProductionChain.from_name(value)
        return value

    def signer(self) -> EnvironmentSigner:
        """Build the signer from the configured secret.

        Raises
        ------
        ValueError
            If neither CONTRACT_SURI nor CONTRACT_SURI_FILE is set.
        """
        if self.suri is None and self.suri_file is None:
            raise ValueError("No signer configured. Set CONTRACT_SURI or CONTRACT_SURI_FILE")
        return EnvironmentSigner(private_key=self.suri, private_key_file=self.suri_file)
