"""Options and target chain resolution for contract extrinsics."""

from .artifacts import ContractArtifacts
from .blockchain import Chain, ProductionChain
from .config import ExtrinsicsConfig, Verbosity
from .core import EnvironmentSigner, Signer
from .exceptions import (
    AmbiguousManifestAndFileError,
    ArtifactError,
    ArtifactNotFoundError,
    ArtifactParseError,
    ExtrinsicsError,
    InvalidUrlError,
    UnknownChainError,
)
from .options import ExtrinsicOptions, ExtrinsicOptionsBuilder

__all__ = [
    "AmbiguousManifestAndFileError",
    "ArtifactError",
    "ArtifactNotFoundError",
    "ArtifactParseError",
    "Chain",
    "ContractArtifacts",
    "EnvironmentSigner",
    "ExtrinsicOptions",
    "ExtrinsicOptionsBuilder",
    "ExtrinsicsConfig",
    "ExtrinsicsError",
    "InvalidUrlError",
    "ProductionChain",
    "Signer",
    "UnknownChainError",
    "Verbosity",
]
