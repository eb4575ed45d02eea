"""
Shared test fixtures and configuration for vbox CLI tests.

This module provides common fixtures used across all test types:
- A clean environment (no VBOXCTL_* variables leaking in)
- A fake VBoxManage that answers subprocess.run calls in-process
"""

import subprocess
from unittest.mock import patch

import pytest

# ============================================================================
# ENVIRONMENT FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def clean_vboxctl_env(monkeypatch):
    """Remove VBOXCTL_* variables so tests never pick up the user's setup."""
    for name in ("VBOXCTL_TOOL", "VBOXCTL_VERBOSE", "VBOXCTL_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    # Keep Rich output plain so rendered lines can be compared directly
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)


# ============================================================================
# VBOXMANAGE MOCKING FIXTURES
# ============================================================================


class FakeVBoxManage:
    """Stand-in for subprocess.run that behaves like a tiny VBoxManage.

    Understands ``list vms``, ``list runningvms``, ``startvm``,
    ``controlvm ... poweroff`` and ``help`` (which exits 1, like the real
    tool). Anything else echoes its arguments. Every argv is recorded in
    ``calls``.
    """

    def __init__(self, vms: dict[str, str], running: set[str] | None = None):
        self.vms = dict(vms)
        self.running = set(running or ())
        self.calls: list[list[str]] = []

    def __call__(self, argv, **kwargs):
        self.calls.append(list(argv))
        args = list(argv[1:])
        returncode = 0

        if args[:2] == ["list", "vms"]:
            stdout = self._listing(self.vms)
        elif args[:2] == ["list", "runningvms"]:
            stdout = self._listing({k: v for k, v in self.vms.items() if k in self.running})
        elif args[:1] == ["startvm"]:
            self.running.add(args[1])
            stdout = f'Waiting for VM "{args[1]}" to power on...\n'
        elif args[:1] == ["controlvm"] and args[2:] == ["poweroff"]:
            self.running.discard(args[1])
            stdout = "0%...10%...100%\n"
        elif args[:1] == ["help"]:
            stdout = "Oracle VM VirtualBox Command Line Management Interface\n"
            returncode = 1
        else:
            stdout = " ".join(args) + "\n"

        return subprocess.CompletedProcess(argv, returncode, stdout=stdout.encode())

    @staticmethod
    def _listing(vms: dict[str, str]) -> str:
        return "".join(f'"{name}" {uuid}\n' for name, uuid in vms.items())

    def calls_for(self, verb: str) -> list[list[str]]:
        return [call[1:] for call in self.calls if call[1] == verb]


@pytest.fixture
def sample_vms():
    """Three registered VMs, one with a space in its name."""
    return {
        "dev-box": "{b53046d9-9f2c-41ef-945b-806a8bc6a032}",
        "Ubuntu Server": "{0f1e2d3c-4b5a-6978-8796-a5b4c3d2e1f0}",
        "win10": "{11111111-2222-3333-4444-555555555555}",
    }


@pytest.fixture
def fake_vboxmanage(sample_vms):
    """Patch subprocess.run in the runner with a FakeVBoxManage.

    ``Ubuntu Server`` starts out running.
    """
    fake = FakeVBoxManage(sample_vms, running={"Ubuntu Server"})
    with patch("vboxctl.tool_runner.subprocess.run", side_effect=fake):
        yield fake
