"""Contract artifact loading.

A contract build produces up to three artifacts under ``target/ink``:

- ``<name>.contract`` - bundle of metadata and hex-encoded Wasm code
- ``<name>.json`` - metadata only
- ``<name>.wasm`` - code only
"""

import hashlib
import json
import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from contract_extrinsics.exceptions import (
    AmbiguousManifestAndFileError,
    ArtifactNotFoundError,
    ArtifactParseError,
)

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = "Cargo.toml"
ARTIFACT_DIR = Path("target") / "ink"


@dataclass(frozen=True)
class ContractArtifacts:
    """Loaded contract build artifacts.

    Attributes
    ----------
    artifact_path : Path
        The file the artifacts were loaded from.
    metadata : dict | None
        The contract metadata, if available.
    code : bytes | None
        The contract Wasm code, if available.
    """

    artifact_path: Path
    metadata: dict[str, Any] | None = None
    code: bytes | None = None

    @classmethod
    def from_manifest_or_file(
        cls,
        manifest_path: str | os.PathLike | None = None,
        file: str | os.PathLike | None = None,
    ) -> "ContractArtifacts":
        """Load artifacts from a build manifest or directly from a file.

        Parameters
        ----------
        manifest_path : str | PathLike | None
            Path to the contract's ``Cargo.toml``. Defaults to
            ``./Cargo.toml`` when neither argument is given.
        file : str | PathLike | None
            Path to a ``.contract``, ``.json`` or ``.wasm`` artifact.

        Returns
        -------
        ContractArtifacts
            The loaded artifacts.

        Raises
        ------
        AmbiguousManifestAndFileError
            If both arguments are given.
        ArtifactNotFoundError
            If the manifest or artifact does not exist.
        ArtifactParseError
            If the manifest or artifact is malformed.
        """
        if manifest_path is not None and file is not None:
            raise AmbiguousManifestAndFileError(
                "Conflicting options: a manifest path and an artifact file were both given"
            )
        if file is not None:
            return cls.from_file(file)

        manifest = Path(manifest_path) if manifest_path is not None else Path(DEFAULT_MANIFEST)
        return cls.from_manifest(manifest)

    @classmethod
    def from_manifest(cls, manifest_path: str | os.PathLike) -> "ContractArtifacts":
        """Locate and load the artifacts built from a crate manifest."""
        manifest = Path(manifest_path)
        if manifest.is_dir():
            manifest = manifest / DEFAULT_MANIFEST
        if not manifest.is_file():
            raise ArtifactNotFoundError(f"Manifest not found: {manifest}")

        try:
            with manifest.open("rb") as f:
                package = tomllib.load(f).get("package", {})
        except tomllib.TOMLDecodeError as e:
            raise ArtifactParseError(f"Invalid manifest {manifest}: {e}") from e

        name = package.get("name") if isinstance(package, dict) else None
        if not isinstance(name, str) or not name:
            raise ArtifactParseError(f"Manifest {manifest} has no [package] name")

        target_dir = manifest.parent / ARTIFACT_DIR
        artifact_name = name.replace("-", "_")
        for suffix in (".contract", ".json"):
            candidate = target_dir / f"{artifact_name}{suffix}"
            if candidate.is_file():
                return cls.from_file(candidate)

        raise ArtifactNotFoundError(
            f"No artifacts for {name!r} in {target_dir}. Build the contract first"
        )

    @classmethod
    def from_file(cls, file: str | os.PathLike) -> "ContractArtifacts":
        """Load artifacts from a ``.contract``, ``.json`` or ``.wasm`` file."""
        path = Path(file)
        if not path.is_file():
            raise ArtifactNotFoundError(f"Artifact file not found: {path}")

        logger.debug("Loading contract artifacts from %s", path)
        suffix = path.suffix.lower()
        if suffix == ".contract":
            metadata = _read_json(path)
            return cls(artifact_path=path, metadata=metadata, code=_bundle_code(path, metadata))
        if suffix == ".json":
            wasm = path.with_suffix(".wasm")
            code = wasm.read_bytes() if wasm.is_file() else None
            return cls(artifact_path=path, metadata=_read_json(path), code=code)
        if suffix == ".wasm":
            sibling = path.with_suffix(".json")
            metadata = _read_json(sibling) if sibling.is_file() else None
            return cls(artifact_path=path, metadata=metadata, code=path.read_bytes())

        raise ArtifactParseError(
            f"Unsupported artifact {path}: expected a .contract, .json or .wasm file"
        )

    @property
    def contract_name(self) -> str:
        """Contract name from metadata, falling back to the file stem."""
        if self.metadata:
            contract = self.metadata.get("contract")
            if isinstance(contract, dict) and contract.get("name"):
                return contract["name"]
        return self.artifact_path.stem

    @property
    def code_hash(self) -> str | None:
        """Hex-encoded blake2b-256 hash of the contract code."""
        if self.code is None:
            return None
        return "0x" + hashlib.blake2b(self.code, digest_size=32).hexdigest()

    def is_verifiable(self) -> bool:
        """Check whether the contract was built in a reproducible image.

        Returns
        -------
        bool
            True if the metadata names a build image.
        """
        if self.metadata is None:
            return False
        return self.metadata.get("image") is not None


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ArtifactParseError(f"Invalid artifact {path}: {e}") from e
    if not isinstance(data, dict):
        raise ArtifactParseError(f"Invalid artifact {path}: expected a JSON object")
    return data


def _bundle_code(path: Path, metadata: dict[str, Any]) -> bytes | None:
    source = metadata.get("source")
    wasm = source.get("wasm") if isinstance(source, dict) else None
    if wasm is None:
        return None
    try:
        return bytes.fromhex(wasm.removeprefix("0x"))
    except (AttributeError, ValueError) as e:
        raise ArtifactParseError(f"Invalid Wasm code in {path}: {e}") from e
