"""
Configuration models for dotnet commands.

Each model holds the raw, user-supplied values for one build step. Values
are stored as given; trimming, list normalization and property parsing
happen when the command line is assembled.

References:
- https://learn.microsoft.com/en-us/dotnet/core/tools/
"""

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List, Union


class DotNetCommandConfig(BaseModel):
    """
    Settings shared by every dotnet command.
    On its own, runs the bare ``dotnet`` executable plus any extra options.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    options: Optional[Union[str, List[Optional[str]]]] = Field(
        default=None,
        description="Extra command line options, appended last. A string is split shell-style (single quotes group); a list gives one argument per non-blank element."
    )
    show_sdk_info: bool = Field(
        default=False,
        description="Run 'dotnet --info' before the command"
    )
    working_directory: Optional[str] = Field(
        default=None,
        description="Working directory for the dotnet process"
    )


class MSBuildConfig(DotNetCommandConfig):
    """
    Settings shared by commands that drive MSBuild.
    """
    project: Optional[str] = Field(
        default=None,
        description="Project or solution file to operate on"
    )
    configuration: Optional[str] = Field(
        default=None,
        description="Build configuration (e.g. 'Debug', 'Release')"
    )
    nologo: bool = Field(
        default=False,
        description="Suppress the startup banner"
    )
    output_directory: Optional[str] = Field(
        default=None,
        description="Directory to place the output in"
    )
    properties: Optional[str] = Field(
        default=None,
        description="MSBuild properties, one 'key=value' per line; '#' starts a comment line and a trailing backslash continues a line"
    )
    verbosity: Optional[str] = Field(
        default=None,
        description="MSBuild verbosity level (quiet, minimal, normal, detailed, diagnostic)"
    )
    shut_down_build_servers: bool = Field(
        default=False,
        description="Run 'dotnet build-server shutdown' after the command"
    )


class MSBuildCommandConfig(MSBuildConfig):
    """
    An MSBuild-based command given by name.
    """
    command: Optional[str] = Field(
        default=None,
        description="Subcommand to run (e.g. 'msbuild')"
    )


class BuildCommandConfig(MSBuildConfig):
    """
    Settings for 'dotnet build'.
    """
    force: bool = Field(
        default=False,
        description="Force all dependencies to be resolved even if the last restore was successful"
    )
    framework: Optional[str] = Field(
        default=None,
        description="Target framework moniker to build for"
    )
    no_dependencies: bool = Field(
        default=False,
        description="Ignore project-to-project references and only build the specified project"
    )
    no_incremental: bool = Field(
        default=False,
        description="Mark the build as unsafe for incremental build"
    )
    no_restore: bool = Field(
        default=False,
        description="Do not run an implicit restore"
    )
    runtime: Optional[str] = Field(
        default=None,
        description="Runtime identifier to build for"
    )
    targets: Optional[str] = Field(
        default=None,
        description="Space-separated MSBuild targets to run"
    )
    version_suffix: Optional[str] = Field(
        default=None,
        description="Value for the $(VersionSuffix) property"
    )


class CleanCommandConfig(MSBuildConfig):
    """
    Settings for 'dotnet clean'.
    """
    framework: Optional[str] = Field(default=None, description="Target framework moniker to clean")
    runtime: Optional[str] = Field(default=None, description="Runtime identifier to clean")


class PackCommandConfig(MSBuildConfig):
    """
    Settings for 'dotnet pack'.
    """
    force: bool = Field(default=False, description="Force all dependencies to be resolved")
    include_source: bool = Field(default=False, description="Include source files in the symbols package")
    include_symbols: bool = Field(default=False, description="Also create a symbols package")
    no_build: bool = Field(default=False, description="Do not build the project before packing")
    no_dependencies: bool = Field(default=False, description="Ignore project-to-project references")
    no_restore: bool = Field(default=False, description="Do not run an implicit restore")
    runtime: Optional[str] = Field(default=None, description="Runtime identifier to restore packages for")
    serviceable: bool = Field(default=False, description="Set the serviceable flag in the package")
    version_suffix: Optional[str] = Field(default=None, description="Value for the $(VersionSuffix) property")


class PublishCommandConfig(MSBuildConfig):
    """
    Settings for 'dotnet publish'.
    """
    force: bool = Field(default=False, description="Force all dependencies to be resolved")
    framework: Optional[str] = Field(default=None, description="Target framework moniker to publish for")
    manifests: Optional[str] = Field(
        default=None,
        description="Whitespace-separated target manifests listing packages to exclude from publishing"
    )
    no_build: bool = Field(default=False, description="Do not build the project before publishing")
    no_dependencies: bool = Field(default=False, description="Ignore project-to-project references")
    no_restore: bool = Field(default=False, description="Do not run an implicit restore")
    runtime: Optional[str] = Field(default=None, description="Runtime identifier to publish for")
    self_contained: bool = Field(default=False, description="Publish the .NET runtime with the application")
    use_current_runtime: bool = Field(default=False, description="Use the runtime of the current machine")
    version_suffix: Optional[str] = Field(default=None, description="Value for the $(VersionSuffix) property")


class TestCommandConfig(MSBuildConfig):
    """
    Settings for 'dotnet test'.
    """
    # keeps pytest from collecting this class
    __test__ = False

    blame: bool = Field(default=False, description="Run tests in blame mode")
    blame_crash: bool = Field(default=False, description="Collect a crash dump when the test host exits unexpectedly")
    blame_hang: bool = Field(default=False, description="Collect a hang dump when a test exceeds its timeout")
    collect: Optional[str] = Field(default=None, description="Data collector to enable (e.g. 'XPlat Code Coverage')")
    diag: Optional[str] = Field(default=None, description="File to write diagnostic logging to")
    framework: Optional[str] = Field(default=None, description="Target framework moniker to test")
    filter: Optional[str] = Field(default=None, description="Expression selecting the tests to run")
    list_tests: bool = Field(default=False, description="List discovered tests instead of running them")
    loggers: Optional[Union[str, List[str]]] = Field(
        default=None,
        description="Test loggers; a string is whitespace-separated, a list keeps each element whole"
    )
    no_build: bool = Field(default=False, description="Do not build the project before testing")
    no_restore: bool = Field(default=False, description="Do not run an implicit restore")
    runtime: Optional[str] = Field(default=None, description="Runtime identifier to test")
    results_directory: Optional[str] = Field(default=None, description="Directory for test results")
    settings: Optional[str] = Field(default=None, description="The .runsettings file to use")
    test_adapter_paths: Optional[str] = Field(
        default=None,
        description="Whitespace-separated paths to search for test adapters"
    )


class RestoreCommandConfig(DotNetCommandConfig):
    """
    Settings for 'dotnet restore'.
    """
    project: Optional[str] = Field(default=None, description="Project or solution file to restore")
    config_file: Optional[str] = Field(default=None, description="NuGet configuration file to use")
    disable_parallel: bool = Field(default=False, description="Restore projects one at a time")
    force: bool = Field(default=False, description="Force all dependencies to be resolved")
    force_evaluate: bool = Field(default=False, description="Re-evaluate all dependencies even if a lock file exists")
    ignore_failed_sources: bool = Field(default=False, description="Treat package source failures as warnings")
    lock_file_path: Optional[str] = Field(default=None, description="Location of the project lock file")
    locked_mode: bool = Field(default=False, description="Do not allow updating the project lock file")
    no_cache: bool = Field(default=False, description="Do not cache HTTP requests")
    no_dependencies: bool = Field(default=False, description="Only restore the root project")
    packages: Optional[str] = Field(default=None, description="Directory for restored packages")
    runtimes: Optional[str] = Field(default=None, description="Whitespace-separated runtime identifiers to restore for")
    sources: Optional[str] = Field(default=None, description="Whitespace-separated package source URIs")
    use_lock_file: bool = Field(default=False, description="Generate and use a project lock file")
    verbosity: Optional[str] = Field(default=None, description="Verbosity level")


class ListPackageCommandConfig(DotNetCommandConfig):
    """
    Settings for 'dotnet list package'.
    The prerelease/highest-version, config and source settings only apply
    when searching for outdated or deprecated packages.
    """
    project: Optional[str] = Field(default=None, description="Project or solution to list packages for")
    config: Optional[str] = Field(default=None, description="NuGet configuration file to use")
    deprecated: bool = Field(default=False, description="Show deprecated packages")
    frameworks: Optional[str] = Field(default=None, description="Whitespace-separated target framework monikers")
    highest_minor: bool = Field(default=False, description="Only consider packages with a matching major version")
    highest_patch: bool = Field(default=False, description="Only consider packages with matching major and minor versions")
    include_prerelease: bool = Field(default=False, description="Consider prerelease packages")
    include_transitive: bool = Field(default=False, description="Show transitive packages")
    outdated: bool = Field(default=False, description="Show outdated packages")
    sources: Optional[str] = Field(default=None, description="Whitespace-separated package sources to search")


class NuGetDeleteCommandConfig(DotNetCommandConfig):
    """
    Settings for 'dotnet nuget delete'.
    """
    package_name: Optional[str] = Field(default=None, description="Name of the package to delete")
    package_version: Optional[str] = Field(default=None, description="Version of the package to delete")
    api_key_id: Optional[str] = Field(default=None, description="Credential reference for the API key")
    force_english_output: bool = Field(default=False, description="Force English output")
    no_service_endpoint: bool = Field(default=False, description="Do not append 'api/v2/package' to the source URL")
    non_interactive: bool = Field(default=False, description="Do not prompt for user input or confirmations")
    source: Optional[str] = Field(default=None, description="Package source to delete from")


class NuGetPushCommandConfig(DotNetCommandConfig):
    """
    Settings for 'dotnet nuget push'.
    """
    root: Optional[str] = Field(default=None, description="Path (or glob) of the package(s) to push")
    api_key_id: Optional[str] = Field(default=None, description="Credential reference for the API key")
    symbol_api_key_id: Optional[str] = Field(default=None, description="Credential reference for the symbol server API key")
    disable_buffering: bool = Field(default=False, description="Disable buffering when pushing to an HTTP(S) server")
    force_english_output: bool = Field(default=False, description="Force English output")
    no_service_endpoint: bool = Field(default=False, description="Do not append 'api/v2/package' to the source URL")
    no_symbols: bool = Field(default=False, description="Do not push symbols")
    skip_duplicate: bool = Field(default=False, description="Treat an already-existing package as success")
    source: Optional[str] = Field(default=None, description="Package source to push to")
    symbol_source: Optional[str] = Field(default=None, description="Symbol server to push to")
    timeout: Optional[int] = Field(default=None, gt=0, description="Push timeout in seconds")


class NuGetLocalsCommandConfig(DotNetCommandConfig):
    """
    Settings for 'dotnet nuget locals'.
    """
    cache_location: Optional[str] = Field(
        default=None,
        description="Cache to operate on: 'all', 'http-cache', 'global-packages', 'temp' or 'plugins-cache'"
    )
    clear: bool = Field(default=False, description="Clear the selected cache")
    list_locations: bool = Field(default=False, description="Show the location of the selected cache")
    force_english_output: bool = Field(default=False, description="Force English output")


class ToolRestoreCommandConfig(DotNetCommandConfig):
    """
    Settings for 'dotnet tool restore'.
    """
    config_file: Optional[str] = Field(default=None, description="NuGet configuration file to use")
    additional_sources: Optional[str] = Field(default=None, description="Whitespace-separated extra package sources")
    disable_parallel: bool = Field(default=False, description="Restore tools one at a time")
    ignore_failed_sources: bool = Field(default=False, description="Treat package source failures as warnings")
    no_cache: bool = Field(default=False, description="Do not cache HTTP requests")
    tool_manifest: Optional[str] = Field(default=None, description="Path to the tool manifest file")
    verbosity: Optional[str] = Field(default=None, description="Verbosity level")


__all__ = [
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
]
