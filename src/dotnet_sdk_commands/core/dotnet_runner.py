"""This module provides a sync subprocess runner for assembled dotnet commands.

It consumes finished ArgumentLists: the literal tokens go to the process,
the redacted rendering goes to the logs.
"""

import logging
import os
import re
import signal
import subprocess
import threading
from collections import deque
from dataclasses import dataclass
from typing import Optional, Sequence

from .arguments import ArgumentList

logger = logging.getLogger(__name__)

# MSBuild summary lines, e.g. "    0 Warning(s)" / "    2 Error(s)"
_ERROR_COUNT_PATTERN = re.compile(r"^ *(\d+) Error\(s\)$")
_WARNING_COUNT_PATTERN = re.compile(r"^ *(\d+) Warning\(s\)$")


@dataclass
class DotNetCommandResult:
    """Result of one dotnet invocation."""

    command: str
    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False
    errors: int = 0
    warnings: int = 0

    @property
    def success(self) -> bool:
        """Check if the command completed successfully."""
        return self.returncode == 0 and not self.timed_out


class _StatusScanner:
    """Tracks the error/warning counts reported in MSBuild summary lines."""

    def __init__(self):
        self.errors = 0
        self.warnings = 0

    def scan(self, line: str) -> None:
        m = _ERROR_COUNT_PATTERN.match(line)
        if m:
            self.errors = int(m.group(1))
            return
        m = _WARNING_COUNT_PATTERN.match(line)
        if m:
            self.warnings = int(m.group(1))


def run_dotnet_command(
    arguments: ArgumentList,
    timeout_seconds: int,
    env: dict[str, str] | None = None,
    working_directory: str | os.PathLike | None = None,
    output_tail_lines: int = 500,
) -> DotNetCommandResult:
    """Run one assembled dotnet command with proper process group handling.

    This function:
    1. Starts the process without a shell, one argument per token
    2. Streams process output to logs in real time
    3. Handles timeout with graceful shutdown (SIGTERM → SIGKILL)
    4. Picks up MSBuild's error and warning counts from the output

    Args:
        arguments: The assembled command line
        timeout_seconds: Maximum execution time
        env: Environment variables (merged with os.environ)
        working_directory: Working directory for the process
        output_tail_lines: Number of lines of each stream kept in the result

    Returns:
        DotNetCommandResult with execution details

    Raises:
        FileNotFoundError: If the executable cannot be found
        PermissionError: If the executable cannot be run
    """
    run_env = os.environ.copy()
    if env:
        run_env.update(env)

    display = arguments.to_display_string()
    stdout_tail: deque[str] = deque(maxlen=output_tail_lines)
    stderr_tail: deque[str] = deque(maxlen=output_tail_lines)
    scanner = _StatusScanner()
    timed_out = False
    returncode = -1
    use_process_group = os.name == "posix"

    logger.info("Running: %s", display)

    process = subprocess.Popen(
        arguments.to_command(),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        bufsize=1,
        env=run_env,
        cwd=working_directory,
        start_new_session=use_process_group,
        shell=False,
    )

    def _stream_pipe(pipe, tail: deque[str], level: int, stream_name: str) -> None:
        """Read pipe output line-by-line and stream to logger."""
        if pipe is None:
            return
        try:
            for line in iter(pipe.readline, ""):
                tail.append(line)
                text = line.rstrip("\r\n")
                if stream_name == "stdout":
                    scanner.scan(text)
                if text.strip():
                    logger.log(level, "dotnet[%s] %s", stream_name, text)
        finally:
            try:
                pipe.close()
            except OSError:
                pass

    stdout_thread = threading.Thread(
        target=_stream_pipe,
        args=(process.stdout, stdout_tail, logging.INFO, "stdout"),
        daemon=True,
    )
    stderr_thread = threading.Thread(
        target=_stream_pipe,
        args=(process.stderr, stderr_tail, logging.WARNING, "stderr"),
        daemon=True,
    )
    stdout_thread.start()
    stderr_thread.start()

    try:
        process.wait(timeout=timeout_seconds)
        returncode = process.returncode

        if returncode == 0:
            logger.info("dotnet command completed successfully")
        else:
            logger.error("dotnet command failed with return code %s", returncode)

    except subprocess.TimeoutExpired:
        logger.warning(f"dotnet command timed out after {timeout_seconds} seconds")
        timed_out = True

        try:
            if use_process_group:
                pgid = os.getpgid(process.pid)
                logger.info(f"Sending SIGTERM to process group {pgid}")
                os.killpg(pgid, signal.SIGTERM)
            else:
                process.terminate()

            try:
                process.wait(timeout=5)
                logger.info("Process terminated gracefully")
            except subprocess.TimeoutExpired:
                logger.warning("Process didn't terminate, sending SIGKILL")
                if use_process_group:
                    os.killpg(pgid, signal.SIGKILL)
                else:
                    process.kill()
                process.wait()

        except ProcessLookupError:
            logger.debug("Process already terminated")

        returncode = process.returncode if process.returncode is not None else -1
    finally:
        stdout_thread.join(timeout=5)
        stderr_thread.join(timeout=5)

    stderr = "".join(stderr_tail)
    if timed_out and not stderr:
        stderr = "Command timed out"

    return DotNetCommandResult(
        command=display,
        returncode=returncode,
        stdout="".join(stdout_tail),
        stderr=stderr,
        timed_out=timed_out,
        errors=scanner.errors,
        warnings=scanner.warnings,
    )


def run_dotnet_invocations(
    invocations: Sequence[ArgumentList],
    timeout_seconds: int,
    env: dict[str, str] | None = None,
    working_directory: str | os.PathLike | None = None,
    output_tail_lines: int = 500,
) -> list[DotNetCommandResult]:
    """Run invocations in order, stopping after the first one that fails."""
    results: list[DotNetCommandResult] = []
    for arguments in invocations:
        result = run_dotnet_command(
            arguments,
            timeout_seconds=timeout_seconds,
            env=env,
            working_directory=working_directory,
            output_tail_lines=output_tail_lines,
        )
        results.append(result)
        if not result.success:
            break
    return results


__all__ = ["DotNetCommandResult", "run_dotnet_command", "run_dotnet_invocations"]
