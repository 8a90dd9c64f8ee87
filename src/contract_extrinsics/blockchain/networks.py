"""Known production networks and target chain classification.

Production endpoints are fixed; anything else is treated as a custom
(local or development) network and used verbatim.
"""

from dataclasses import dataclass
from enum import Enum

from contract_extrinsics.blockchain.urls import canonicalize
from contract_extrinsics.exceptions import InvalidUrlError, UnknownChainError


class ProductionChain(str, Enum):
    """Publicly known networks with a canonical endpoint."""

    POLKADOT = "polkadot"
    KUSAMA = "kusama"
    ALEPH_ZERO = "aleph-zero"
    ASTAR = "astar"
    SHIDEN = "shiden"
    KREST = "krest"

    def __str__(self) -> str:
        return self.value

    def end_point(self) -> str:
        """Get the canonical endpoint of the chain.

        Returns
        -------
        str
            The endpoint URL, rendered with an explicit port.
        """
        return _END_POINTS[self]

    @classmethod
    def chain_by_endpoint(cls, end_point: str) -> "ProductionChain | None":
        """Find the production chain served at an endpoint.

        The endpoint is canonicalized before matching, so an omitted default
        port or a trailing slash still matches.

        Parameters
        ----------
        end_point : str
            The endpoint URL to look up.

        Returns
        -------
        ProductionChain | None
            The matching chain, or None if the endpoint is not a known one.
        """
        try:
            rendered = canonicalize(end_point)
        except InvalidUrlError:
            return None
        for chain in cls:
            if chain.end_point() == rendered:
                return chain
        return None

    @classmethod
    def from_name(cls, name: str) -> "ProductionChain":
        """Look up a chain by name.

        Matching ignores case and accepts ``_`` in place of ``-``.

        Raises
        ------
        UnknownChainError
            If no chain has that name.
        """
        normalized = name.strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            raise UnknownChainError(
                f"Unknown chain {name!r}. Available: {', '.join(cls.names())}"
            ) from None

    @classmethod
    def names(cls) -> list[str]:
        """Return the names of all production chains."""
        return [chain.value for chain in cls]


_END_POINTS: dict[ProductionChain, str] = {
    ProductionChain.POLKADOT: "wss://rpc.polkadot.io:443",
    ProductionChain.KUSAMA: "wss://kusama-rpc.polkadot.io:443",
    ProductionChain.ALEPH_ZERO: "wss://ws.azero.dev:443",
    ProductionChain.ASTAR: "wss://rpc.astar.network:443",
    ProductionChain.SHIDEN: "wss://rpc.shiden.astar.network:443",
    ProductionChain.KREST: "wss://wss-krest.peaq.network:443",
}


@dataclass(frozen=True)
class Chain:
    """Classification of the network an extrinsic is sent to.

    Attributes
    ----------
    name : str | None
        The production chain name, or None for a custom network.
    """

    name: str | None = None

    @classmethod
    def production(cls, name: str) -> "Chain":
        """A known production network."""
        return cls(name=name)

    @classmethod
    def custom(cls) -> "Chain":
        """A network not in the production registry."""
        return cls()

    @property
    def is_production(self) -> bool:
        return self.name is not None

    @property
    def is_custom(self) -> bool:
        return self.name is None

    def __str__(self) -> str:
        return f"Production({self.name})" if self.name is not None else "Custom"
