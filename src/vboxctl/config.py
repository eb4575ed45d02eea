"""Runtime configuration for vboxctl.

The configuration is a single immutable value built once when the CLI starts
and handed to every component that needs it. There is no configuration file;
values come from command-line options, then environment variables, then
defaults.

Environment variables (all optional):
    VBOXCTL_TOOL: Path to the VBoxManage executable
    VBOXCTL_VERBOSE: Echo invocations and raw output (1/true/yes/on)
    VBOXCTL_TIMEOUT: Seconds to wait for each VBoxManage call (unset: forever)
"""

import math
import os
import sys
from dataclasses import dataclass

from vboxctl.errors import ConfigError

if sys.platform == "win32":
    DEFAULT_TOOL_PATH = os.path.join("C:\\", "Program Files", "Oracle", "VirtualBox", "VBoxManage.exe")
else:
    DEFAULT_TOOL_PATH = "VBoxManage"

TOOL_ENV_VAR = "VBOXCTL_TOOL"
VERBOSE_ENV_VAR = "VBOXCTL_VERBOSE"
TIMEOUT_ENV_VAR = "VBOXCTL_TIMEOUT"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class VBoxConfig:
    """Settings shared by every VBoxManage invocation."""

    tool_path: str = DEFAULT_TOOL_PATH
    verbose: bool = False
    timeout: float | None = None

    def __post_init__(self) -> None:
        if not self.tool_path:
            raise ConfigError("VBoxManage path must not be empty")
        if self.timeout is not None and not (math.isfinite(self.timeout) and self.timeout > 0):
            raise ConfigError(
                f"Timeout must be a positive, finite number of seconds, got {self.timeout}"
            )

    @classmethod
    def from_environment(
        cls,
        tool_path: str | None = None,
        verbose: bool | None = None,
        timeout: float | None = None,
    ) -> "VBoxConfig":
        """Build a configuration from explicit values and the environment.

        Explicit arguments take precedence over environment variables, which
        take precedence over the defaults.

        Args:
            tool_path: Path to VBoxManage (overrides VBOXCTL_TOOL)
            verbose: Verbose mode (overrides VBOXCTL_VERBOSE)
            timeout: Per-invocation timeout in seconds (overrides VBOXCTL_TIMEOUT)

        Returns:
            VBoxConfig instance

        Raises:
            ConfigError: If a value is empty or not a valid timeout
        """
        if tool_path is None:
            tool_path = os.getenv(TOOL_ENV_VAR) or DEFAULT_TOOL_PATH

        if verbose is None:
            verbose = os.getenv(VERBOSE_ENV_VAR, "").strip().lower() in _TRUE_VALUES

        if timeout is None:
            timeout = _parse_timeout(os.getenv(TIMEOUT_ENV_VAR, ""))

        return cls(tool_path=tool_path, verbose=verbose, timeout=timeout)


def _parse_timeout(raw: str) -> float | None:
    raw = raw.strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"Invalid {TIMEOUT_ENV_VAR} value: {raw!r}") from e


__all__ = ["DEFAULT_TOOL_PATH", "VBoxConfig"]
