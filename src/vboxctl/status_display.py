"""VM status display.

Renders the ``vbox now`` listing: every registered VM, right-aligned to the
longest name, followed by a red ``Run`` or a cyan ``stop``.
"""

from rich.console import Console
from rich.text import Text

RUNNING_LABEL = "Run"
STOPPED_LABEL = "stop"


def status_rows(all_vms: dict[str, str], running_vms: dict[str, str]) -> list[tuple[str, bool]]:
    """Pair every registered VM name with whether it is running."""
    return [(name, name in running_vms) for name in all_vms]


def format_status_line(name: str, running: bool, width: int) -> str:
    """Format one status line without styling.

    Example:
        >>> format_status_line("web", True, 5)
        '   web: Run'
    """
    label = RUNNING_LABEL if running else STOPPED_LABEL
    return f"{name:>{width + 1}}: {label}"


class StatusDisplay:
    """Print VM run state using a Rich console."""

    def __init__(self, console: Console | None = None):
        """Initialize display.

        Args:
            console: Optional Rich console (creates new one if None)
        """
        self.console = console or Console(highlight=False)

    def show(self, all_vms: dict[str, str], running_vms: dict[str, str]) -> None:
        rows = status_rows(all_vms, running_vms)

        self.console.print()
        self.console.print("VM status:")

        if not rows:
            self.console.print("No VMs registered.")
            return

        width = max(len(name) for name, _ in rows)
        for name, running in rows:
            line = Text(f"{name:>{width + 1}}: ")
            if running:
                line.append(RUNNING_LABEL, style="red")
            else:
                line.append(STOPPED_LABEL, style="cyan")
            self.console.print(line, soft_wrap=True)


__all__ = ["StatusDisplay", "format_status_line", "status_rows"]
