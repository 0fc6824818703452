import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from .errors import DotNetConfigError


def _default_executable_name() -> str:
    return "dotnet.exe" if os.name == "nt" else "dotnet"


class DotNetSdkConfig(BaseModel):
    home: Optional[str] = Field(
        default=None,
        description="Directory of the .NET SDK installation. When unset, the executable is looked up on PATH.",
    )
    executable_name: str = Field(
        default_factory=_default_executable_name,
        description="File name of the dotnet executable",
    )
    timeout: int = Field(default=60*60, gt=0, description="Maximum run time per invocation, in seconds")
    output_tail_lines: int = Field(default=500, gt=0, description="Number of output lines kept per stream")
    telemetry_opt_out: bool = Field(default=True, description="Set DOTNET_CLI_TELEMETRY_OPTOUT for the process")
    skip_first_time_experience: bool = Field(
        default=True,
        description="Set DOTNET_SKIP_FIRST_TIME_EXPERIENCE and DOTNET_NOLOGO for the process",
    )

    @field_validator("home")
    @classmethod
    def validate_home(cls, v):
        if v is None or not v.strip():
            return None
        home = Path(v).expanduser().resolve()
        if not home.exists():
            raise ValueError(f"SDK home directory does not exist: {v}")
        if not home.is_dir():
            raise ValueError(f"SDK home path is not a directory: {v}")
        return str(home)

    @field_validator("executable_name", mode="before")
    @classmethod
    def validate_executable_name(cls, v):
        if isinstance(v, str) and v.strip():
            return v.strip()
        raise ValueError("executable_name must be a non-empty string")

    def executable(self) -> str:
        """Full path to the executable when a home is set, else its bare name."""
        if self.home:
            return str(Path(self.home) / self.executable_name)
        return self.executable_name

    def environment(self) -> Dict[str, str]:
        """Environment variables to add to the dotnet process environment."""
        env: Dict[str, str] = {}
        if self.home:
            env["DOTNET_ROOT"] = self.home
        if self.telemetry_opt_out:
            env["DOTNET_CLI_TELEMETRY_OPTOUT"] = "1"
        if self.skip_first_time_experience:
            env["DOTNET_SKIP_FIRST_TIME_EXPERIENCE"] = "1"
            env["DOTNET_NOLOGO"] = "1"
        return env

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DotNetSdkConfig":
        """
        Build settings from environment variables.

        Reads DOTNET_ROOT, DOTNET_COMMAND_TIMEOUT, DOTNET_OUTPUT_TAIL_LINES
        and DOTNET_CLI_TELEMETRY_OPTOUT; unset variables keep the defaults.

        Raises:
            DotNetConfigError: If a numeric variable is not an integer.
        """
        env = os.environ if environ is None else environ
        values: Dict[str, object] = {}

        if home := env.get("DOTNET_ROOT"):
            values["home"] = home

        for var, field in (("DOTNET_COMMAND_TIMEOUT", "timeout"), ("DOTNET_OUTPUT_TAIL_LINES", "output_tail_lines")):
            raw = env.get(var)
            if raw is None or not raw.strip():
                continue
            try:
                values[field] = int(raw)
            except ValueError as e:
                raise DotNetConfigError(f"{var} must be an integer, got '{raw}'") from e

        opt_out = env.get("DOTNET_CLI_TELEMETRY_OPTOUT")
        if opt_out is not None:
            values["telemetry_opt_out"] = opt_out.lower().strip() in ("true", "1", "yes", "on")

        return cls(**values)


__all__ = ["DotNetSdkConfig"]
