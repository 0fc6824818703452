"""Exceptions raised while assembling and running dotnet commands."""


class DotNetCommandError(Exception):
    """Base class for all errors raised by this package."""


class DotNetValidationError(DotNetCommandError):
    """Raised when the caller hands the assembler something it cannot use."""


class DotNetConfigError(DotNetCommandError):
    """Raised for invalid SDK runtime settings."""


class CommandAssemblyError(DotNetCommandError):
    """Raised when an argument list cannot be assembled."""


class SecretNotFoundError(CommandAssemblyError):
    """Raised when a credential reference cannot be resolved to a value."""

    def __init__(self, reference: str, message: str | None = None):
        self.reference = reference
        super().__init__(message or f"No secret found for credential reference '{reference}'")


__all__ = [
    "DotNetCommandError",
    "DotNetValidationError",
    "DotNetConfigError",
    "CommandAssemblyError",
    "SecretNotFoundError",
]
