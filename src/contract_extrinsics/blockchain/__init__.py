"""Network registry and URL handling."""

from .networks import Chain, ProductionChain
from .urls import DEFAULT_NODE_URL, canonicalize, parse_url, url_to_string

__all__ = [
    "DEFAULT_NODE_URL",
    "Chain",
    "ProductionChain",
    "canonicalize",
    "parse_url",
    "url_to_string",
]
