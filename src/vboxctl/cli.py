"""CLI entry point for vbox.

Commands:
    vbox now                  # List current VM status
    vbox start [NAMES...]     # Start VMs headless (alias: r)
    vbox gui NAME             # Start a VM with its GUI
    vbox stop [NAME|all]      # Power off VMs
    vbox restart [NAME|all]   # Power off, then start headless
    vbox help [ARGS...]       # VBoxManage's own help
    vbox cmd ARGS...          # Pass arguments directly to VBoxManage
"""

import logging

import click

from vboxctl import __version__
from vboxctl.click_group import VBoxGroup
from vboxctl.config import DEFAULT_TOOL_PATH, VBoxConfig
from vboxctl.interaction import CLIInteractionHandler, InteractionHandler
from vboxctl.status_display import StatusDisplay
from vboxctl.vbox_manager import VBoxManager

logger = logging.getLogger(__name__)

PASSTHROUGH_SETTINGS = {
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}


def _manager(ctx: click.Context) -> VBoxManager:
    return VBoxManager(ctx.obj["config"])


def _interaction(ctx: click.Context) -> InteractionHandler:
    return ctx.obj.setdefault("interaction", CLIInteractionHandler())


def _select_target(ctx: click.Context, vbox: VBoxManager) -> str:
    return _interaction(ctx).select_target(list(vbox.all_vms()))


def _show_status(vbox: VBoxManager) -> None:
    all_vms = vbox.all_vms()
    running = vbox.running_vms()
    StatusDisplay().show(all_vms, running)


def _announce(action: str, vm_name: str) -> None:
    click.echo(f">> {action} [{click.style(vm_name, fg='red')}]")


def _stop_targets(ctx: click.Context, vbox: VBoxManager, target: str | None) -> list[str]:
    """Stop the chosen VMs and return their names."""
    if target is None:
        target = _select_target(ctx, vbox)
        click.echo(f"stop [{target}]")
        vbox.stop_vm(target)
        return [target]

    if target == "all":
        stopped = []
        for vm_name in vbox.running_vms():
            _announce("stop", vm_name)
            vbox.stop_vm(vm_name)
            stopped.append(vm_name)
        if not stopped:
            click.echo("No running VMs.")
        return stopped

    _announce("stop", target)
    vbox.stop_vm(target)
    return [target]


@click.group(
    cls=VBoxGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)
@click.option(
    "--tool",
    "-t",
    type=str,
    default=None,
    help=f"Path to VBoxManage [env: VBOXCTL_TOOL, default: {DEFAULT_TOOL_PATH}]",
)
@click.option(
    "--verbose",
    "-V",
    is_flag=True,
    help="Verbose mode: echo each VBoxManage call and its output [env: VBOXCTL_VERBOSE]",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds to wait for each VBoxManage call [env: VBOXCTL_TIMEOUT]",
)
@click.version_option(version=__version__)
@click.pass_context
def main(ctx: click.Context, tool: str | None, verbose: bool, timeout: float | None) -> None:
    """vbox - Virtual Box operation tool.

    Thin front end to VBoxManage for everyday VM start/stop work.

    \b
    EXAMPLES:
        $ vbox now
        $ vbox start dev-box "Ubuntu Server"
        $ vbox stop all
        $ vbox -t /usr/local/bin/VBoxManage restart dev-box
        $ vbox cmd showvminfo dev-box
    """
    config = VBoxConfig.from_environment(tool_path=tool, verbose=verbose or None, timeout=timeout)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING, format="%(message)s"
    )

    logger.debug(f"Using VBoxManage at {config.tool_path}")

    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    # If no subcommand provided, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


@main.command()
@click.pass_context
def now(ctx: click.Context) -> None:
    """List current VM status."""
    _show_status(_manager(ctx))


@main.command()
@click.argument("vm_names", nargs=-1)
@click.pass_context
def start(ctx: click.Context, vm_names: tuple[str, ...]) -> None:
    """Wake up VMs in headless mode (alias: r).

    With no VM name, pick one from a numbered list.

    \b
    Examples:
        vbox start dev-box
        vbox start dev-box "Ubuntu Server"
        vbox r
    """
    vbox = _manager(ctx)

    if not vm_names:
        target = _select_target(ctx, vbox)
        click.echo(f"start [{target}]")
        vbox.start_vm(target)
    else:
        for vm_name in vm_names:
            _announce("start", vm_name)
            vbox.start_vm(vm_name)

    _show_status(vbox)


@main.command()
@click.argument("vm_name", required=False)
@click.pass_context
def gui(ctx: click.Context, vm_name: str | None) -> None:
    """Wake up a VM in GUI mode."""
    if vm_name is None:
        click.echo("please specify VM image name")
        return

    vbox = _manager(ctx)
    click.echo(f">> start [{vm_name}]")
    vbox.start_vm_gui(vm_name)
    _show_status(vbox)


@main.command()
@click.argument("target", required=False)
@click.pass_context
def stop(ctx: click.Context, target: str | None) -> None:
    """Power off a VM, or every running VM with "all".

    With no argument, pick one from a numbered list.

    \b
    Examples:
        vbox stop dev-box
        vbox stop all
        vbox stop -- -old-box
    """
    vbox = _manager(ctx)
    _stop_targets(ctx, vbox, target)
    _show_status(vbox)


@main.command()
@click.argument("target", required=False)
@click.pass_context
def restart(ctx: click.Context, target: str | None) -> None:
    """Power off a VM and start it again headless.

    "all" restarts every running VM. With no argument, pick one from a
    numbered list; the same VM is stopped and started.
    """
    vbox = _manager(ctx)
    for vm_name in _stop_targets(ctx, vbox, target):
        _announce("start", vm_name)
        vbox.start_vm(vm_name)
    _show_status(vbox)


@main.command(name="help", context_settings=PASSTHROUGH_SETTINGS, add_help_option=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def help_command(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Exec VBoxManage's help."""
    _manager(ctx).help(list(args))


@main.command(context_settings=PASSTHROUGH_SETTINGS, add_help_option=False)
@click.argument("args", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def cmd(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Pass all params directly to VBoxManage."""
    _manager(ctx).command(list(args))


if __name__ == "__main__":
    main()
