"""Options for creating and sending an extrinsic to a node.

``ExtrinsicOptions`` values are immutable. They are assembled with
``ExtrinsicOptionsBuilder``, whose setters each return a new builder:

    opts = (
        ExtrinsicOptionsBuilder.new(signer)
        .file("target/ink/flipper.contract")
        .chain(ProductionChain.ASTAR)
        .storage_deposit_limit(10**12)
        .done()
    )
    chain, endpoint = opts.chain_and_endpoint()
"""

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import AnyUrl
from pydantic_core import Url

from contract_extrinsics.artifacts import ContractArtifacts
from contract_extrinsics.blockchain.networks import Chain, ProductionChain
from contract_extrinsics.blockchain.urls import DEFAULT_NODE_URL, parse_url, url_to_string
from contract_extrinsics.config import ExtrinsicsConfig, Verbosity
from contract_extrinsics.core.wallet import Signer

logger = logging.getLogger(__name__)

# Balances are integers in the chain's smallest unit
Balance = int

SignerT = TypeVar("SignerT", bound=Signer)


def _default_url() -> AnyUrl:
    return parse_url(DEFAULT_NODE_URL)


@dataclass(frozen=True)
class ExtrinsicOptions(Generic[SignerT]):
    """Arguments required for creating and sending an extrinsic.

    Attributes
    ----------
    signer : Signer
        The account that authorizes the extrinsic.
    file : Path | None
        Path to a contract artifact file.
    manifest_path : Path | None
        Path to the contract's ``Cargo.toml``.
    url : AnyUrl
        Websocket URL of the node.
    storage_deposit_limit : int | None
        Maximum balance that can be charged to the signer for storage.
    verbosity : Verbosity
        Message reporting level.
    chain : ProductionChain | None
        Explicitly selected production chain.
    """

    signer: SignerT
    file: Path | None = None
    manifest_path: Path | None = None
    url: AnyUrl = field(default_factory=_default_url)
    storage_deposit_limit: Balance | None = None
    verbosity: Verbosity = Verbosity.DEFAULT
    chain: ProductionChain | None = None

    def __post_init__(self):
        # Frozen: normalize through object.__setattr__
        if not isinstance(self.url, AnyUrl):
            object.__setattr__(self, "url", parse_url(self.url))
        if self.file is not None:
            object.__setattr__(self, "file", Path(self.file))
        if self.manifest_path is not None:
            object.__setattr__(self, "manifest_path", Path(self.manifest_path))
        limit = self.storage_deposit_limit
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int)):
            raise ValueError(f"Storage deposit limit must be an integer, got {limit!r}")
        if limit is not None and limit < 0:
            raise ValueError(
                f"Storage deposit limit must be non-negative, got {self.storage_deposit_limit}"
            )
        if not isinstance(self.verbosity, Verbosity):
            object.__setattr__(self, "verbosity", Verbosity(self.verbosity))
        if isinstance(self.chain, str) and not isinstance(self.chain, ProductionChain):
            object.__setattr__(self, "chain", ProductionChain.from_name(self.chain))

    def url_string(self) -> str:
        """Return the node URL in canonical form."""
        return url_to_string(self.url)

    def contract_artifacts(self) -> ContractArtifacts:
        """Load the contract artifacts.

        Artifacts are loaded afresh on every call.

        Raises
        ------
        ArtifactError
            Whatever the loader raises.
        """
        return ContractArtifacts.from_manifest_or_file(self.manifest_path, self.file)

    def is_verifiable(self) -> bool:
        """Check whether the contract artifacts come from a verifiable build.

        Raises
        ------
        ArtifactError
            If the artifacts cannot be loaded.
        """
        return self.contract_artifacts().is_verifiable()

    def chain_and_endpoint(self) -> tuple[Chain, str]:
        """Get the target chain and its endpoint.

        An explicitly selected chain always wins, even over a conflicting
        URL. Otherwise a URL that points at a production chain is still
        classified as that chain and replaced by its canonical endpoint.

        Returns
        -------
        tuple[Chain, str]
            The chain classification and the endpoint to connect to.
        """
        if self.chain is not None:
            result = (Chain.production(self.chain.value), self.chain.end_point())
        else:
            url = self.url_string()
            matched = ProductionChain.chain_by_endpoint(url)
            if matched is not None:
                result = (Chain.production(matched.value), matched.end_point())
            else:
                result = (Chain.custom(), url)

        logger.debug("Resolved target chain %s at %s", result[0], result[1])
        return result


@dataclass(frozen=True)
class ExtrinsicOptionsBuilder(Generic[SignerT]):
    """Builder for :class:`ExtrinsicOptions`.

    Every setter returns a new builder; passing None resets the field.
    """

    opts: ExtrinsicOptions[SignerT]

    @classmethod
    def new(cls, signer: SignerT) -> "ExtrinsicOptionsBuilder[SignerT]":
        """Return a clean builder for ``signer``."""
        return cls(opts=ExtrinsicOptions(signer=signer))

    @classmethod
    def from_config(
        cls, config: ExtrinsicsConfig, signer: SignerT | None = None
    ) -> "ExtrinsicOptionsBuilder[SignerT]":
        """Seed a builder from environment configuration.

        Parameters
        ----------
        config : ExtrinsicsConfig
            The loaded configuration.
        signer : Signer | None
            Signer to use. Defaults to the one built from the config.
        """
        return (
            cls.new(signer if signer is not None else config.signer())
            .file(config.file)
            .manifest_path(config.manifest_path)
            .url(config.url)
            .storage_deposit_limit(config.storage_deposit_limit)
            .verbosity(config.verbosity)
            .chain(config.chain)
        )

    def _update(self, **changes) -> "ExtrinsicOptionsBuilder[SignerT]":
        return replace(self, opts=replace(self.opts, **changes))

    def file(self, file: str | os.PathLike | None) -> "ExtrinsicOptionsBuilder[SignerT]":
        """Set the path to the contract build artifact file."""
        return self._update(file=file)

    def manifest_path(
        self, manifest_path: str | os.PathLike | None
    ) -> "ExtrinsicOptionsBuilder[SignerT]":
        """Set the path to the ``Cargo.toml`` of the contract."""
        return self._update(manifest_path=manifest_path)

    def url(self, url: str | AnyUrl | Url | None) -> "ExtrinsicOptionsBuilder[SignerT]":
        """Set the websocket URL of the node.

        Raises
        ------
        InvalidUrlError
            If the URL cannot be parsed.
        """
        return self._update(url=parse_url(url if url is not None else DEFAULT_NODE_URL))

    def storage_deposit_limit(
        self, storage_deposit_limit: Balance | None
    ) -> "ExtrinsicOptionsBuilder[SignerT]":
        """Set the maximum balance that can be charged to the caller for storage."""
        return self._update(storage_deposit_limit=storage_deposit_limit)

    def verbosity(
        self, verbosity: Verbosity | str | None
    ) -> "ExtrinsicOptionsBuilder[SignerT]":
        """Set the verbosity level."""
        return self._update(verbosity=verbosity if verbosity is not None else Verbosity.DEFAULT)

    def chain(
        self, chain: ProductionChain | str | None
    ) -> "ExtrinsicOptionsBuilder[SignerT]":
        """Set the production chain.

        Raises
        ------
        UnknownChainError
            If a chain name is not in the registry.
        """
        return self._update(chain=chain)

    def done(self) -> ExtrinsicOptions[SignerT]:
        """Return the assembled options."""
        return self.opts
