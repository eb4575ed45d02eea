"""VBoxManage subprocess execution.

Provides run_tool() - a thin wrapper around subprocess.run that launches the
configured executable, captures its standard output as raw bytes and applies
one of two error-handling modes:

- STRICT: any failure (missing executable, nonzero exit, timeout) writes the
  captured output to stdout and raises a ToolExecutionError subclass.
- LENIENT: failures are logged and the captured output is returned anyway.
  VBoxManage's help command exits nonzero on success, hence this mode.

Standard error is not captured; it goes straight to the caller's terminal.

Usage:
    from vboxctl.tool_runner import RunMode, ToolInvocation, run_tool

    output = run_tool(ToolInvocation("VBoxManage", ["list", "vms"]))
    output = run_tool(ToolInvocation("VBoxManage", ["help"]), RunMode.LENIENT)
"""

import logging
import subprocess
from dataclasses import dataclass, field
from enum import Enum

import click

from vboxctl.errors import (
    ToolExitError,
    ToolLaunchError,
    ToolNotFoundError,
    ToolTimeoutError,
)

logger = logging.getLogger(__name__)


class RunMode(Enum):
    """Error-handling policy for a tool invocation."""

    STRICT = "strict"
    LENIENT = "lenient"


@dataclass
class ToolInvocation:
    """A single call of the external tool."""

    tool: str
    args: list[str] = field(default_factory=list)
    verbose: bool = False
    timeout: float | None = None

    @property
    def argv(self) -> list[str]:
        return [self.tool, *self.args]


def decode_output(data: bytes) -> str:
    """Decode raw tool output, replacing undecodable bytes."""
    return data.decode("utf-8", errors="replace")


def run_tool(invocation: ToolInvocation, mode: RunMode = RunMode.STRICT) -> bytes:
    """Execute the tool and return its captured standard output.

    Args:
        invocation: Executable, arguments, verbosity and timeout
        mode: STRICT raises on failure, LENIENT returns output regardless

    Returns:
        Raw bytes written by the tool to stdout

    Raises:
        ToolNotFoundError: Executable does not exist (STRICT only)
        ToolLaunchError: Executable could not be started (STRICT only)
        ToolExitError: Tool exited nonzero (STRICT only)
        ToolTimeoutError: Tool exceeded the configured timeout (STRICT only)
    """
    argv = invocation.argv
    strict = mode is RunMode.STRICT

    if invocation.verbose:
        click.echo(f" >> {invocation.tool} {invocation.args}", err=True)

    try:
        result = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            check=False,
            timeout=invocation.timeout,
        )
    except FileNotFoundError as e:
        if strict:
            raise ToolNotFoundError(f"VBoxManage not found at '{invocation.tool}'", argv) from e
        logger.warning(f"Ignoring launch failure of {invocation.tool}: {e}")
        return b""
    except OSError as e:
        if strict:
            raise ToolLaunchError(f"Failed to launch '{invocation.tool}': {e}", argv) from e
        logger.warning(f"Ignoring launch failure of {invocation.tool}: {e}")
        return b""
    except subprocess.TimeoutExpired as e:
        output = e.stdout or b""
        if strict:
            _relay(_trace(invocation, output))
            raise ToolTimeoutError(
                f"'{' '.join(argv)}' timed out after {invocation.timeout}s",
                argv,
                timeout=invocation.timeout,
                output=output,
            ) from e
        logger.warning(f"Ignoring timeout of '{' '.join(argv)}' after {invocation.timeout}s")
        return _trace(invocation, output)

    output = result.stdout or b""

    if result.returncode != 0:
        if strict:
            _relay(_trace(invocation, output))
            raise ToolExitError(
                f"'{' '.join(argv)}' exited with status {result.returncode}",
                argv,
                returncode=result.returncode,
                output=output,
            )
        logger.debug(f"Tolerating exit status {result.returncode} from '{' '.join(argv)}'")

    return _trace(invocation, output)


def _relay(output: bytes) -> None:
    click.echo(decode_output(output))


def _trace(invocation: ToolInvocation, output: bytes) -> bytes:
    if invocation.verbose:
        click.echo(decode_output(output), err=True)
    return output


__all__ = ["RunMode", "ToolInvocation", "decode_output", "run_tool"]
