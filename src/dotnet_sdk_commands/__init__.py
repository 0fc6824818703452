import logging

from .command_config import (
    BuildCommandConfig,
    CleanCommandConfig,
    DotNetCommandConfig,
    ListPackageCommandConfig,
    MSBuildCommandConfig,
    MSBuildConfig,
    NuGetDeleteCommandConfig,
    NuGetLocalsCommandConfig,
    NuGetPushCommandConfig,
    PackCommandConfig,
    PublishCommandConfig,
    RestoreCommandConfig,
    TestCommandConfig,
    ToolRestoreCommandConfig,
)
from .config import DotNetSdkConfig
from .core import (
    REDACTION_MARKER,
    ArgumentList,
    EnvironmentSecretResolver,
    MappingSecretResolver,
    SecretResolver,
    Token,
    build_dotnet_command,
    build_dotnet_invocations,
    normalize_list,
    parse_properties,
    tokenize_options,
)
from .errors import (
    CommandAssemblyError,
    DotNetCommandError,
    DotNetConfigError,
    DotNetValidationError,
    SecretNotFoundError,
)
from .step import run_dotnet_step

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    # Entry points
    "build_dotnet_command",
    "build_dotnet_invocations",
    "run_dotnet_step",
    # Building blocks
    "REDACTION_MARKER",
    "ArgumentList",
    "Token",
    "normalize_list",
    "parse_properties",
    "tokenize_options",
    "SecretResolver",
    "MappingSecretResolver",
    "EnvironmentSecretResolver",
    # Configurations
    "DotNetSdkConfig",
    "DotNetCommandConfig",
    "MSBuildConfig",
    "MSBuildCommandConfig",
    "BuildCommandConfig",
    "CleanCommandConfig",
    "PackCommandConfig",
    "PublishCommandConfig",
    "TestCommandConfig",
    "RestoreCommandConfig",
    "ListPackageCommandConfig",
    "NuGetDeleteCommandConfig",
    "NuGetPushCommandConfig",
    "NuGetLocalsCommandConfig",
    "ToolRestoreCommandConfig",
    # Errors
    "DotNetCommandError",
    "DotNetValidationError",
    "DotNetConfigError",
    "CommandAssemblyError",
    "SecretNotFoundError",
]
