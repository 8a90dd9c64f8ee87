"""Core contract-extrinsics components."""

from .wallet import EnvironmentSigner, Signer

__all__ = [
    "EnvironmentSigner",
    "Signer",
]
