"""Resolution of credential references into literal secret values."""

import logging
import os
from typing import Mapping, Optional, Protocol, runtime_checkable

from ..errors import SecretNotFoundError

logger = logging.getLogger(__name__)


@runtime_checkable
class SecretResolver(Protocol):
    """Turns a credential reference into its secret value.

    Implementations raise SecretNotFoundError when the reference is unknown.
    """

    def resolve_secret(self, reference: str) -> str:
        ...


class MappingSecretResolver:
    """Resolves references from an in-memory mapping."""

    def __init__(self, secrets: Mapping[str, str]):
        self._secrets = dict(secrets)

    def resolve_secret(self, reference: str) -> str:
        value = self._secrets.get(reference)
        if value is None:
            raise SecretNotFoundError(reference)
        return value


class EnvironmentSecretResolver:
    """Resolves references from environment variables.

    A reference ``nuget-org`` with the default prefix is looked up as
    ``DOTNET_SECRET_NUGET_ORG``.
    """

    def __init__(self, prefix: str = "DOTNET_SECRET_", environ: Optional[Mapping[str, str]] = None):
        self.prefix = prefix
        self._environ = environ if environ is not None else os.environ

    def variable_name(self, reference: str) -> str:
        normalized = "".join(ch if ch.isalnum() else "_" for ch in reference.strip()).upper()
        return f"{self.prefix}{normalized}"

    def resolve_secret(self, reference: str) -> str:
        name = self.variable_name(reference)
        value = self._environ.get(name)
        if value is None:
            logger.debug(f"Environment variable {name} not set for credential reference '{reference}'")
            raise SecretNotFoundError(reference)
        return value


__all__ = ["SecretResolver", "MappingSecretResolver", "EnvironmentSecretResolver"]
