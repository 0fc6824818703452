"""Runs a configured dotnet build step end to end."""

import logging
from typing import List, Optional

from .command_config import DotNetCommandConfig
from .config import DotNetSdkConfig
from .core.command_builder import build_dotnet_invocations
from .core.dotnet_runner import DotNetCommandResult, run_dotnet_invocations
from .core.lists import fix_empty_and_trim
from .core.secrets import SecretResolver

logger = logging.getLogger(__name__)


def run_dotnet_step(
    config: DotNetCommandConfig,
    sdk: Optional[DotNetSdkConfig] = None,
    resolver: Optional[SecretResolver] = None,
) -> List[DotNetCommandResult]:
    """Assemble every invocation for *config*, then run them in order.

    Assembly happens up front, so a failed secret lookup or bad configuration
    aborts the step before any process is started.

    Args:
        config: The command configuration
        sdk: SDK runtime settings (defaults to DotNetSdkConfig.from_env())
        resolver: Resolves credential references

    Returns:
        One result per invocation that was run.
    """
    if sdk is None:
        sdk = DotNetSdkConfig.from_env()

    invocations = build_dotnet_invocations(config, resolver, sdk.executable())
    logger.debug(f"Running {len(invocations)} dotnet invocation(s)")

    results = run_dotnet_invocations(
        invocations,
        timeout_seconds=sdk.timeout,
        env=sdk.environment(),
        working_directory=fix_empty_and_trim(config.working_directory),
        output_tail_lines=sdk.output_tail_lines,
    )

    for result in results:
        if result.errors or result.warnings:
            logger.info(
                "%s: %d error(s), %d warning(s)", result.command, result.errors, result.warnings
            )
    return results


__all__ = ["run_dotnet_step"]
