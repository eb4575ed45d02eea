"""Exception hierarchy for vboxctl.

Low-level modules raise these; the click group in ``vboxctl.cli`` is the only
place that turns them into a printed diagnostic and a process exit code.
"""


class VBoxCtlError(Exception):
    """Base exception for vboxctl errors."""

    exit_code = 1


class ConfigError(VBoxCtlError):
    """Raised when the runtime configuration is invalid."""

    pass


class ToolExecutionError(VBoxCtlError):
    """Raised when a STRICT-mode VBoxManage invocation fails."""

    def __init__(self, message: str, argv: list[str], output: bytes = b""):
        super().__init__(message)
        self.argv = argv
        self.output = output


class ToolNotFoundError(ToolExecutionError):
    """Raised when the VBoxManage executable does not exist."""

    pass


class ToolLaunchError(ToolExecutionError):
    """Raised when the executable exists but could not be started."""

    pass


class ToolExitError(ToolExecutionError):
    """Raised when VBoxManage exits with a nonzero status."""

    def __init__(self, message: str, argv: list[str], returncode: int, output: bytes = b""):
        super().__init__(message, argv, output)
        self.returncode = returncode


class ToolTimeoutError(ToolExecutionError):
    """Raised when VBoxManage does not finish within the configured timeout."""

    def __init__(self, message: str, argv: list[str], timeout: float, output: bytes = b""):
        super().__init__(message, argv, output)
        self.timeout = timeout


class VMListingParseError(VBoxCtlError):
    """Raised when a line of ``VBoxManage list`` output is malformed."""

    def __init__(self, message: str, line: str):
        super().__init__(message)
        self.line = line


class NoTargetsError(VBoxCtlError):
    """Raised when interactive selection is requested but no VM is available."""

    pass


__all__ = [
    "ConfigError",
    "NoTargetsError",
    "ToolExecutionError",
    "ToolExitError",
    "ToolLaunchError",
    "ToolNotFoundError",
    "ToolTimeoutError",
    "VBoxCtlError",
    "VMListingParseError",
]
