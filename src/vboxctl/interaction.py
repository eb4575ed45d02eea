"""Interactive VM selection for commands run without a target.

This module provides a protocol-based approach to target selection, so that
commands can prompt on the terminal (click) in normal use and take scripted
answers in tests.

Example:
    >>> handler = CLIInteractionHandler()
    >>> target = handler.select_target(["dev", "build", "db"])
     0:dev
     1:build
     2:db
    >> target No.: 1
    >>> target
    'build'

    Testing example:
    >>> test_handler = MockInteractionHandler(responses=[2])
    >>> test_handler.select_target(["dev", "build", "db"])
    'db'
"""

from typing import Protocol, runtime_checkable

import click

from vboxctl.errors import NoTargetsError


@runtime_checkable
class InteractionHandler(Protocol):
    """Protocol for choosing one VM out of a list of names."""

    def select_target(self, names: list[str]) -> str:
        """Return one of ``names`` chosen by the user.

        Raises:
            NoTargetsError: If names is empty
            click.Abort: If the user cancels
        """
        ...


class CLIInteractionHandler:
    """Numbered-menu selection on the terminal.

    Names are listed with 0-based numbers. Input that is not a number, or is
    out of range, is rejected and the prompt is shown again.
    """

    prompt = ">> target No."

    def select_target(self, names: list[str]) -> str:
        if not names:
            raise NoTargetsError("No VMs available to select")

        for i, name in enumerate(names):
            click.echo(f"{i:2}:{name}")

        while True:
            try:
                choice_str = click.prompt(self.prompt, type=str, show_default=False)
                choice_num = int(choice_str.strip())

                if 0 <= choice_num < len(names):
                    return names[choice_num]
                click.secho(
                    f"Please enter a number between 0 and {len(names) - 1}",
                    fg="red",
                    err=True,
                )
            except ValueError:
                click.secho("Please enter a valid number", fg="red", err=True)
            except (KeyboardInterrupt, EOFError, click.Abort):
                click.echo()
                raise click.Abort() from None


class MockInteractionHandler:
    """Interaction handler with pre-programmed answers for tests.

    Each response is an index into the offered names. Every call is recorded
    in ``interactions`` as the list of names that was offered.
    """

    def __init__(self, responses: list[int] | None = None):
        self.responses = list(responses or [])
        self.interactions: list[list[str]] = []

    def select_target(self, names: list[str]) -> str:
        if not names:
            raise NoTargetsError("No VMs available to select")
        self.interactions.append(list(names))
        if not self.responses:
            raise RuntimeError("MockInteractionHandler ran out of responses")
        return names[self.responses.pop(0)]


__all__ = ["CLIInteractionHandler", "InteractionHandler", "MockInteractionHandler"]
