"""Node URL validation and canonical rendering."""

from pydantic import AnyUrl, TypeAdapter, ValidationError
from pydantic_core import Url

from contract_extrinsics.exceptions import InvalidUrlError

DEFAULT_NODE_URL = "ws://localhost:9944"

# Ports assumed by the scheme when the URL leaves them out
KNOWN_DEFAULT_PORTS = {
    "ws": 80,
    "wss": 443,
    "http": 80,
    "https": 443,
}

_url_adapter = TypeAdapter(AnyUrl)


def parse_url(value: str | AnyUrl | Url) -> AnyUrl:
    """Parse and validate a node URL.

    Parameters
    ----------
    value : str | AnyUrl | Url
        The URL to validate.

    Returns
    -------
    AnyUrl
        The parsed URL.

    Raises
    ------
    InvalidUrlError
        If the value is not a string or URL, or cannot be parsed as a URL.
    """
    if isinstance(value, (AnyUrl, Url)):
        value = str(value)
    if not isinstance(value, str):
        raise InvalidUrlError(value, f"expected a string or URL, got {type(value).__name__}")
    try:
        return _url_adapter.validate_python(value.strip())
    except ValidationError as e:
        reason = e.errors()[0]["msg"] if e.errors() else None
        raise InvalidUrlError(value, reason) from e


def url_to_string(url: AnyUrl) -> str:
    """Render a URL to its canonical string form.

    The port is always written out when the scheme has a known default,
    so ``wss://rpc.polkadot.io`` and ``wss://rpc.polkadot.io:443/`` render
    identically. A bare root path is dropped.

    Parameters
    ----------
    url : AnyUrl
        A URL returned by :func:`parse_url`.

    Returns
    -------
    str
        The canonical URL string.
    """
    if not url.host:
        return str(url)

    netloc = url.host
    if url.username or url.password:
        userinfo = url.username or ""
        if url.password:
            userinfo = f"{userinfo}:{url.password}"
        netloc = f"{userinfo}@{netloc}"

    port = url.port if url.port is not None else KNOWN_DEFAULT_PORTS.get(url.scheme)
    if port is not None:
        netloc = f"{netloc}:{port}"

    rendered = f"{url.scheme}://{netloc}"
    if url.path and url.path != "/":
        rendered += url.path
    if url.query:
        rendered += f"?{url.query}"
    if url.fragment:
        rendered += f"#{url.fragment}"
    return rendered


def canonicalize(value: str | AnyUrl | Url) -> str:
    """Parse a URL and render it in canonical form.

    Raises
    ------
    InvalidUrlError
        If the value cannot be parsed as a URL.
    """
    return url_to_string(parse_url(value))
