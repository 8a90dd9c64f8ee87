"""Signer abstraction for authorizing extrinsics."""

from abc import ABC, abstractmethod
from pathlib import Path

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount
from pydantic import SecretStr


class Signer(ABC):
    """Capability to authorize an extrinsic on behalf of an account.

    Extrinsic options only store and forward a signer; they never inspect it.
    """

    signature_scheme: str = ""

    @property
    @abstractmethod
    def account_id(self) -> str:
        """Get the account identifier the signer signs for.

        Returns
        -------
        str
            The account identifier.
        """
        ...

    @abstractmethod
    def sign(self, payload: bytes) -> bytes:
        """Sign an encoded extrinsic payload.

        Parameters
        ----------
        payload : bytes
            The signing payload.

        Returns
        -------
        bytes
            The signature.
        """
        ...


class EnvironmentSigner(Signer):
    """ECDSA signer loaded from a secret URI or a key file.

    Parameters
    ----------
    private_key : SecretStr, optional
        The hex-encoded private key (from env var).
    private_key_file : str, optional
        Path to a file containing the private key.

    Raises
    ------
    ValueError
        If neither private_key nor private_key_file is provided.
    FileNotFoundError
        If private_key_file does not exist.
    """

    signature_scheme = "ecdsa"

    def __init__(
        self,
        private_key: SecretStr | None = None,
        private_key_file: str | None = None,
    ):
        if private_key is not None:
            self._account: LocalAccount = Account.from_key(private_key.get_secret_value())
        elif private_key_file is not None:
            key_path = Path(private_key_file).expanduser()
            if not key_path.exists():
                raise FileNotFoundError(f"Private key file not found: {private_key_file}")
            self._account = Account.from_key(key_path.read_text().strip())
        else:
            raise ValueError("Either private_key or private_key_file must be provided")

    @property
    def account_id(self) -> str:
        return self._account.address

    def sign(self, payload: bytes) -> bytes:
        signed = self._account.sign_message(encode_defunct(primitive=payload))
        return bytes(signed.signature)

    def __repr__(self) -> str:
        return f"EnvironmentSigner(account_id={self.account_id!r})"
