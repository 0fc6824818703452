"""Pure functions for building dotnet CLI commands.

Every supported command has an assembler that appends its tokens to an
ArgumentList in a fixed order. The assembler is picked by the type of the
configuration object.
"""

import logging
from typing import Callable, Optional, Union

from ..command_config import (
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
from ..errors import DotNetValidationError, SecretNotFoundError
from .arguments import ArgumentList
from .lists import fix_empty_and_trim, normalize_list
from .properties import parse_properties
from .secrets import SecretResolver
from .tokenizer import tokenize_options

logger = logging.getLogger(__name__)

Assembler = Callable[[DotNetCommandConfig, ArgumentList, Optional[SecretResolver]], None]


def _add_value(args: ArgumentList, flag: str, value: Optional[str]) -> None:
    """Append ``flag value`` as two tokens when a value is configured."""
    value = fix_empty_and_trim(value)
    if value is not None:
        args.extend([flag, value])


def _add_joined(args: ArgumentList, prefix: str, value: Optional[str]) -> None:
    """Append ``<prefix><value>`` as one token when a value is configured."""
    value = fix_empty_and_trim(value)
    if value is not None:
        args.append(prefix + value)


def _add_subject(args: ArgumentList, value: Optional[str]) -> None:
    value = fix_empty_and_trim(value)
    if value is not None:
        args.append(value)


def _add_secret(
    args: ArgumentList,
    flag: str,
    reference: Optional[str],
    resolver: Optional[SecretResolver],
) -> None:
    """Resolve a credential reference and append it as a masked value."""
    reference = fix_empty_and_trim(reference)
    if reference is None:
        return
    if resolver is None:
        raise DotNetValidationError(
            f"A secret resolver is required to resolve credential reference '{reference}'"
        )
    secret = resolver.resolve_secret(reference)
    if secret is None:
        raise SecretNotFoundError(reference)
    args.append(flag)
    args.append(secret, sensitive=True)


def _add_options(args: ArgumentList, options: Union[str, list[str], None]) -> None:
    if options is None:
        return
    if isinstance(options, str):
        args.extend(tokenize_options(options))
    else:
        args.extend(normalize_list(options) or [])


def _add_msbuild_arguments(config: MSBuildConfig, args: ArgumentList) -> None:
    """Shared MSBuild options, appended after the command-specific ones."""
    _add_value(args, "--output", config.output_directory)
    _add_joined(args, "-c:", config.configuration)
    if config.nologo:
        args.append("--nologo")
    for entry in parse_properties(config.properties):
        args.append(entry.to_argument("-p"))
    _add_joined(args, "-v:", config.verbosity)


def add_generic_arguments(config: DotNetCommandConfig, args: ArgumentList, resolver: Optional[SecretResolver]) -> None:
    """A bare ``dotnet`` invocation only carries its extra options."""


def add_msbuild_command_arguments(config: MSBuildConfig, args: ArgumentList, resolver: Optional[SecretResolver]) -> None:
    if isinstance(config, MSBuildCommandConfig):
        _add_subject(args, config.command)
    _add_subject(args, config.project)
    _add_msbuild_arguments(config, args)


def add_build_arguments(config: BuildCommandConfig, args: ArgumentList, resolver: Optional[SecretResolver]) -> None:
    """Adds ``build``, the project, the build options and the shared MSBuild options."""
    args.append("build")
    _add_subject(args, config.project)
    if config.force:
        args.append("--force")
    if config.no_dependencies:
        args.append("--no-dependencies")
    if config.no_incremental:
        args.append("--no-incremental")
    if config.no_restore:
        args.append("--no-restore")
    _add_joined(args, "-f:", config.framework)
    _add_joined(args, "-r:", config.runtime)
    for target in normalize_list(config.targets) or []:
        args.append("-t:" + target)
    _add_value(args, "--version-suffix", config.version_suffix)
    _add_msbuild_arguments(config, args)


def add_clean_arguments(config: CleanCommandConfig, args: ArgumentList, resolver: Optional[SecretResolver]) -> None:
    args.append("clean")
    _add_subject(args, config.project)
    _add_joined(args, "-f:", config.framework)
    _add_joined(args, "-r:", config.runtime)
    _add_msbuild_arguments(config, args)


def add_pack_arguments(config: PackCommandConfig, args: ArgumentList, resolver: Optional[SecretResolver]) -> None:
    args.append("pack")
    _add_subject(args, config.project)
    if config.force:
        args.append("--force")
    if config.include_source:
        args.append("--include-source")
    if config.include_symbols:
        args.append("--include-symbols")
    if config.no_build:
        args.append("--no-build")
    if config.no_dependencies:
        args.append("--no-dependencies")
    if config.no_restore:
        args.append("--no-restore")
    _add_joined(args, "-r:", config.runtime)
    if config.serviceable:
        args.append("--serviceable")
    _add_value(args, "--version-suffix", config.version_suffix)
    _add_msbuild_arguments(config, args)


def add_publish_arguments(config: PublishCommandConfig, args: ArgumentList, resolver: Optional[SecretResolver]) -> None:
    args.append("publish")
    _add_subject(args, config.project)
    if config.force:
        args.append("--force")
    for manifest in normalize_list(config.manifests) or []:
        args.extend(["--manifest", manifest])
    if config.no_build:
        args.append("--no-build")
    if config.no_dependencies:
        args.append("--no-dependencies")
    if config.no_restore:
        args.append("--no-restore")
    _add_joined(args, "-f:", config.framework)
    _add_joined(args, "-r:", config.runtime)
    if config.self_contained:
        args.append("--self-contained")
    if config.use_current_runtime:
        args.append("--use-current-runtime")
    _add_value(args, "--version-suffix", config.version_suffix)
    _add_msbuild_arguments(config, args)


def add_test_arguments(config: TestCommandConfig, args: ArgumentList, resolver: Optional[SecretResolver]) -> None:
    args.append("test")
    _add_subject(args, config.project)
    if config.blame:
        args.append("--blame")
    if config.blame_crash:
        args.append("--blame-crash")
    if config.blame_hang:
        args.append("--blame-hang")
    _add_value(args, "--collect", config.collect)
    _add_value(args, "--diag", config.diag)
    _add_joined(args, "-f:", config.framework)
    _add_value(args, "--filter", config.filter)
    if config.list_tests:
        args.append("--list-tests")
    for test_logger in normalize_list(config.loggers) or []:
        args.extend(["--logger", test_logger])
    if config.no_build:
        args.append("--no-build")
    if config.no_restore:
        args.append("--no-restore")
    _add_joined(args, "-r:", config.runtime)
    _add_value(args, "--results-directory", config.results_directory)
    _add_value(args, "--settings", config.settings)
    for path in normalize_list(config.test_adapter_paths) or []:
        args.extend(["--test-adapter-path", path])
    _add_msbuild_arguments(config, args)


def add_restore_arguments(config: RestoreCommandConfig, args: ArgumentList, resolver: Optional[SecretResolver]) -> None:
    args.append("restore")
    _add_subject(args, config.project)
    _add_value(args, "--configfile", config.config_file)
    if config.disable_parallel:
        args.append("--disable-parallel")
    if config.force:
        args.append("--force")
    if config.force_evaluate:
        args.append("--force-evaluate")
    if config.ignore_failed_sources:
        args.append("--ignore-failed-sources")
    _add_value(args, "--lock-file-path", config.lock_file_path)
    if config.locked_mode:
        args.append("--locked-mode")
    if config.no_cache:
        args.append("--no-cache")
    if config.no_dependencies:
        args.append("--no-dependencies")
    _add_value(args, "--packages", config.packages)
    for runtime in normalize_list(config.runtimes) or []:
        args.append("-r:" + runtime)
    for source in normalize_list(config.sources) or []:
        args.extend(["--source", source])
    if config.use_lock_file:
        args.append("--use-lock-file")
    _add_joined(args, "-v:", config.verbosity)


def add_list_package_arguments(config: ListPackageCommandConfig, args: ArgumentList, resolver: Optional[SecretResolver]) -> None:
    """Adds ``list <project> package`` and its options.

    Prerelease, highest-minor/patch, config and source options are only
    meaningful for an outdated or deprecated search and are left out
    otherwise.
    """
    args.append("list")
    _add_subject(args, config.project)
    args.append("package")
    if config.deprecated:
        args.append("--deprecated")
    if config.outdated:
        args.append("--outdated")
    for framework in normalize_list(config.frameworks) or []:
        args.extend(["--framework", framework])
    if config.include_transitive:
        args.append("--include-transitive")
    if config.outdated or config.deprecated:
        if config.include_prerelease:
            args.append("--include-prerelease")
        if config.highest_minor:
            args.append("--highest-minor")
        if config.highest_patch:
            args.append("--highest-patch")
        _add_value(args, "--config", config.config)
        for source in normalize_list(config.sources) or []:
            args.extend(["--source", source])


def add_nuget_delete_arguments(config: NuGetDeleteCommandConfig, args: ArgumentList, resolver: Optional[SecretResolver]) -> None:
    args.extend(["nuget", "delete"])
    _add_subject(args, config.package_name)
    _add_subject(args, config.package_version)
    if config.force_english_output:
        args.append("--force-english-output")
    _add_secret(args, "--api-key", config.api_key_id, resolver)
    if config.no_service_endpoint:
        args.append("--no-service-endpoint")
    if config.non_interactive:
        args.append("--non-interactive")
    _add_value(args, "--source", config.source)


def add_nuget_push_arguments(config: NuGetPushCommandConfig, args: ArgumentList, resolver: Optional[SecretResolver]) -> None:
    args.extend(["nuget", "push"])
    _add_subject(args, config.root)
    if config.force_english_output:
        args.append("--force-english-output")
    _add_secret(args, "--api-key", config.api_key_id, resolver)
    _add_secret(args, "--symbol-api-key", config.symbol_api_key_id, resolver)
    if config.disable_buffering:
        args.append("--disable-buffering")
    if config.no_service_endpoint:
        args.append("--no-service-endpoint")
    if config.no_symbols:
        args.append("--no-symbols")
    if config.skip_duplicate:
        args.append("--skip-duplicate")
    _add_value(args, "--source", config.source)
    _add_value(args, "--symbol-source", config.symbol_source)
    if config.timeout is not None:
        args.extend(["--timeout", str(config.timeout)])


def add_nuget_locals_arguments(config: NuGetLocalsCommandConfig, args: ArgumentList, resolver: Optional[SecretResolver]) -> None:
    args.extend(["nuget", "locals"])
    _add_subject(args, config.cache_location)
    if config.clear:
        args.append("--clear")
    if config.list_locations:
        args.append("--list")
    if config.force_english_output:
        args.append("--force-english-output")


def add_tool_restore_arguments(config: ToolRestoreCommandConfig, args: ArgumentList, resolver: Optional[SecretResolver]) -> None:
    args.extend(["tool", "restore"])
    _add_value(args, "--configfile", config.config_file)
    for source in normalize_list(config.additional_sources) or []:
        args.extend(["--add-source", source])
    if config.disable_parallel:
        args.append("--disable-parallel")
    if config.ignore_failed_sources:
        args.append("--ignore-failed-sources")
    if config.no_cache:
        args.append("--no-cache")
    _add_value(args, "--tool-manifest", config.tool_manifest)
    _add_joined(args, "-v:", config.verbosity)


ASSEMBLERS: dict[type, Assembler] = {
    DotNetCommandConfig: add_generic_arguments,
    MSBuildConfig: add_msbuild_command_arguments,
    MSBuildCommandConfig: add_msbuild_command_arguments,
    BuildCommandConfig: add_build_arguments,
    CleanCommandConfig: add_clean_arguments,
    PackCommandConfig: add_pack_arguments,
    PublishCommandConfig: add_publish_arguments,
    TestCommandConfig: add_test_arguments,
    RestoreCommandConfig: add_restore_arguments,
    ListPackageCommandConfig: add_list_package_arguments,
    NuGetDeleteCommandConfig: add_nuget_delete_arguments,
    NuGetPushCommandConfig: add_nuget_push_arguments,
    NuGetLocalsCommandConfig: add_nuget_locals_arguments,
    ToolRestoreCommandConfig: add_tool_restore_arguments,
}


def get_assembler(config_type: type) -> Assembler:
    """Find the assembler for a configuration class (or its nearest base)."""
    for cls in config_type.__mro__:
        assembler = ASSEMBLERS.get(cls)
        if assembler is not None:
            return assembler
    raise DotNetValidationError(f"Unsupported command configuration type: {config_type.__name__}")


def build_dotnet_command(
    config: DotNetCommandConfig,
    resolver: Optional[SecretResolver] = None,
    executable: str = "dotnet",
) -> ArgumentList:
    """Build a dotnet command line from configuration.

    This is a pure function: it performs no I/O beyond calls into the
    secret resolver.

    Args:
        config: The command configuration; its type selects the subcommand.
        resolver: Resolves credential references (only needed by commands
            that take API keys).
        executable: Path or name of the dotnet executable.

    Returns:
        A new ArgumentList starting with the executable.

    Raises:
        DotNetValidationError: If config is missing or of an unsupported type,
            or a secret is referenced without a resolver.
        SecretNotFoundError: If a credential reference cannot be resolved.
    """
    if config is None:
        raise DotNetValidationError("A command configuration is required")
    assembler = get_assembler(type(config))

    args = ArgumentList(executable)
    assembler(config, args, resolver)
    _add_options(args, config.options)

    logger.debug("Assembled dotnet command: %s", args)
    return args


def build_dotnet_invocations(
    config: DotNetCommandConfig,
    resolver: Optional[SecretResolver] = None,
    executable: str = "dotnet",
) -> list[ArgumentList]:
    """Build every invocation a step needs, in execution order.

    That is ``dotnet --info`` when SDK info was requested, then the command
    itself, then ``dotnet build-server shutdown`` when requested for an
    MSBuild-based command.
    """
    main = build_dotnet_command(config, resolver, executable)
    invocations: list[ArgumentList] = []

    if config.show_sdk_info:
        info = ArgumentList(executable)
        info.append("--info")
        invocations.append(info)

    invocations.append(main)

    if isinstance(config, MSBuildConfig) and config.shut_down_build_servers:
        shutdown = ArgumentList(executable)
        shutdown.extend(["build-server", "shutdown"])
        invocations.append(shutdown)

    return invocations


__all__ = [
    "ASSEMBLERS",
    "get_assembler",
    "build_dotnet_command",
    "build_dotnet_invocations",
]
