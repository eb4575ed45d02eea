"""Parser for ``VBoxManage list vms`` style output.

Each line names one VM followed by its UUID:

    "Ubuntu Server" {b53046d9-9f2c-41ef-945b-806a8bc6a032}

The identifier is kept as an opaque string. The name is delimited by the
opening quote and the last quote on the line, so names containing spaces
survive intact.
"""

import logging
from typing import NamedTuple

from vboxctl.errors import VMListingParseError

logger = logging.getLogger(__name__)


class VMEntry(NamedTuple):
    """One VM as reported by VBoxManage."""

    name: str
    identifier: str


def parse_vm_entry(line: str) -> VMEntry:
    """Parse a single listing line.

    Args:
        line: One line of ``VBoxManage list`` output

    Returns:
        VMEntry with the name and identifier

    Raises:
        VMListingParseError: If the line has no identifier or an unterminated name
    """
    text = line.strip()

    if text.startswith('"'):
        closing = text.rfind('"')
        if closing == 0:
            raise VMListingParseError(f"Unterminated VM name in listing line: {line!r}", line)
        name = text[1:closing]
        identifier = text[closing + 1 :].strip()
    else:
        parts = text.rsplit(None, 1)
        if len(parts) != 2:
            raise VMListingParseError(f"Missing VM identifier in listing line: {line!r}", line)
        name, identifier = parts

    if not identifier:
        raise VMListingParseError(f"Missing VM identifier in listing line: {line!r}", line)

    return VMEntry(name=name, identifier=identifier)


def parse_vm_listing(text: str, strict: bool = False) -> dict[str, str]:
    """Convert listing output into a name -> identifier mapping.

    Blank lines are ignored. If a name appears twice the later identifier
    wins. Malformed lines are skipped with a warning unless ``strict`` is set.

    Args:
        text: Raw listing output
        strict: Raise on the first malformed line instead of skipping it

    Returns:
        Mapping of VM name to identifier in the order VBoxManage reported them

    Raises:
        VMListingParseError: If strict and a line is malformed
    """
    vms: dict[str, str] = {}

    for line in text.splitlines():
        if not line.strip():
            continue
        try:
            entry = parse_vm_entry(line)
        except VMListingParseError as e:
            if strict:
                raise
            logger.warning(f"Skipping malformed listing line: {e.line!r}")
            continue
        vms[entry.name] = entry.identifier

    return vms


__all__ = ["VMEntry", "parse_vm_entry", "parse_vm_listing"]
