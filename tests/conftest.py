"""Pytest configuration and fixtures for contract-extrinsics tests."""

import os

import pytest
from pydantic import SecretStr

from contract_extrinsics.core.wallet import EnvironmentSigner

# Well-known test key (DO NOT USE IN PRODUCTION)
TEST_PRIVATE_KEY = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear contract-related environment variables before each test."""
    for key in list(os.environ.keys()):
        if key.startswith("CONTRACT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def signer():
    """A signer backed by the test key."""
    return EnvironmentSigner(private_key=SecretStr(TEST_PRIVATE_KEY))
