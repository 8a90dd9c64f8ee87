"""Exception classes for contract-extrinsics."""


class ExtrinsicsError(Exception):
    """Base exception for extrinsic option errors."""

    pass


class InvalidUrlError(ExtrinsicsError, ValueError):
    """Raised when a node URL cannot be parsed."""

    def __init__(self, value: object, reason: str | None = None):
        self.value = value
        message = f"Invalid node URL: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnknownChainError(ExtrinsicsError, ValueError):
    """Raised when a production chain name is not in the registry."""

    pass


class ArtifactError(ExtrinsicsError):
    """Base exception for contract artifact loading errors."""

    pass


class ArtifactNotFoundError(ArtifactError, FileNotFoundError):
    """Raised when a contract artifact or manifest cannot be found."""

    pass


class ArtifactParseError(ArtifactError, ValueError):
    """Raised when a contract artifact or manifest is malformed."""

    pass


class AmbiguousManifestAndFileError(ArtifactError, ValueError):
    """Raised when both a manifest path and an artifact file are given."""

    pass
