"""VBoxManage command facade.

This module knows which VBoxManage argument vectors implement each vbox
operation:
- List all / running VMs
- Start a VM headless or with its GUI
- Power off a VM
- Pass arguments through to VBoxManage (help and raw commands)

Security:
- Arguments are passed as a list
- No shell=True
"""

import logging

import click

from vboxctl.config import VBoxConfig
from vboxctl.tool_runner import RunMode, ToolInvocation, decode_output, run_tool
from vboxctl.vm_listing import parse_vm_listing

logger = logging.getLogger(__name__)


class VBoxManager:
    """Run VBoxManage operations using a shared configuration."""

    def __init__(self, config: VBoxConfig):
        self.config = config

    def _invoke(self, args: list[str], mode: RunMode) -> bytes:
        invocation = ToolInvocation(
            tool=self.config.tool_path,
            args=list(args),
            verbose=self.config.verbose,
            timeout=self.config.timeout,
        )
        return run_tool(invocation, mode)

    def output(self, args: list[str]) -> bytes:
        """Run VBoxManage in STRICT mode and return its raw output."""
        return self._invoke(args, RunMode.STRICT)

    def output_text(self, args: list[str]) -> str:
        return decode_output(self.output(args))

    def run(self, args: list[str]) -> None:
        """Run VBoxManage in STRICT mode and print its output."""
        click.echo(self.output_text(args))

    def command(self, args: list[str]) -> None:
        """Pass arguments to VBoxManage verbatim."""
        self.run(args)

    def command_force(self, args: list[str]) -> None:
        """Like command(), but tolerate a nonzero exit status."""
        click.echo(decode_output(self._invoke(args, RunMode.LENIENT)))

    def start_vm(self, vm_name: str) -> None:
        logger.info(f"Starting VM '{vm_name}' (headless)")
        self.run(["startvm", vm_name, "--type", "headless"])

    def start_vm_gui(self, vm_name: str) -> None:
        logger.info(f"Starting VM '{vm_name}' (gui)")
        self.run(["startvm", vm_name])

    def stop_vm(self, vm_name: str) -> None:
        logger.info(f"Powering off VM '{vm_name}'")
        self.run(["controlvm", vm_name, "poweroff"])

    def all_vms(self) -> dict[str, str]:
        """Return every registered VM as name -> UUID."""
        return self._list_vms("vms")

    def running_vms(self) -> dict[str, str]:
        """Return the currently running VMs as name -> UUID."""
        return self._list_vms("runningvms")

    def help(self, args: list[str]) -> None:
        # VBoxManage returns != 0 when the help command is executed
        self.command_force(["help", *args])

    def _list_vms(self, kind: str) -> dict[str, str]:
        vms = parse_vm_listing(self.output_text(["list", kind]))
        logger.debug(f"VBoxManage list {kind}: {len(vms)} VM(s)")
        return vms


__all__ = ["VBoxManager"]
