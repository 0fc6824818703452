"""Shared test fixtures and configuration"""

import sys

import pytest

from dotnet_sdk_commands.core.secrets import MappingSecretResolver


@pytest.fixture
def secrets():
    """Credential references and their secret values"""
    return {
        "nuget-org": "oy2-super-secret-key",
        "symbol-server": "symbol-secret",
    }


@pytest.fixture
def secret_resolver(secrets):
    """Resolver backed by the secrets fixture"""
    return MappingSecretResolver(secrets)


@pytest.fixture
def python_tool():
    """The current interpreter, used as a stand-in for the dotnet executable"""
    return sys.executable
