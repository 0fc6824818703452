"""Core module with the command-line assembly engine.

This module contains pure functions and small value types that:
- normalize multi-value option fields
- split free-form option strings shell-style
- parse properties blocks
- assemble masked argument lists per dotnet command
plus the subprocess runner that consumes the finished lists.
"""

from .arguments import REDACTION_MARKER, ArgumentList, Token
from .command_builder import build_dotnet_command, build_dotnet_invocations, get_assembler
from .dotnet_runner import DotNetCommandResult, run_dotnet_command, run_dotnet_invocations
from .lists import fix_empty_and_trim, normalize_list
from .properties import PropertyEntry, parse_properties
from .secrets import EnvironmentSecretResolver, MappingSecretResolver, SecretResolver
from .tokenizer import tokenize_options

__all__ = [
    "REDACTION_MARKER",
    "ArgumentList",
    "Token",
    "build_dotnet_command",
    "build_dotnet_invocations",
    "get_assembler",
    "DotNetCommandResult",
    "run_dotnet_command",
    "run_dotnet_invocations",
    "fix_empty_and_trim",
    "normalize_list",
    "PropertyEntry",
    "parse_properties",
    "EnvironmentSecretResolver",
    "MappingSecretResolver",
    "SecretResolver",
    "tokenize_options",
]
