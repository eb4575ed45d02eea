"""vboxctl - VirtualBox operation tool

Philosophy:
- Ruthless simplicity
- Relay VBoxManage output verbatim
- Fail fast with helpful guidance

The vbox CLI wraps VBoxManage with a few convenience commands for listing,
starting, stopping and restarting virtual machines.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
