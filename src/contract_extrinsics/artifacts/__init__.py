"""Contract build artifacts."""

from .loader import ContractArtifacts

__all__ = ["ContractArtifacts"]
