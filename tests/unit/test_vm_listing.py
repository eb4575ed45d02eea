"""Tests for VBoxManage listing parser."""

import logging

import pytest

from vboxctl.errors import VMListingParseError
from vboxctl.vm_listing import VMEntry, parse_vm_entry, parse_vm_listing


class TestParseVMEntry:
    """Test parsing of a single listing line."""

    def test_quoted_name(self):
        entry = parse_vm_entry('"NX" {b53046d9-9f2c-41ef-945b-806a8bc6a032}')
        assert entry == VMEntry("NX", "{b53046d9-9f2c-41ef-945b-806a8bc6a032}")

    def test_name_with_spaces_is_kept_intact(self):
        entry = parse_vm_entry('"Ubuntu 22.04 Server" {abc-123}')
        assert entry.name == "Ubuntu 22.04 Server"
        assert entry.identifier == "{abc-123}"

    def test_name_with_embedded_quote(self):
        entry = parse_vm_entry('"Bob\'s "lab" box" {abc-123}')
        assert entry.name == 'Bob\'s "lab" box'
        assert entry.identifier == "{abc-123}"

    def test_trailing_carriage_return(self):
        assert parse_vm_entry('"VM1" {abc}\r') == VMEntry("VM1", "{abc}")

    def test_unquoted_name(self):
        assert parse_vm_entry("VM1 {abc}") == VMEntry("VM1", "{abc}")

    @pytest.mark.parametrize(
        "line",
        [
            "VM1",
            '"VM1"',
            '"VM1" ',
            '"VM1 {abc}',
        ],
    )
    def test_malformed_lines_raise(self, line):
        with pytest.raises(VMListingParseError) as exc_info:
            parse_vm_entry(line)
        assert exc_info.value.line == line


class TestParseVMListing:
    """Test parsing of complete listing output."""

    def test_two_vms(self):
        text = '"VM1" {abc-123}\n"VM2" {def-456}\n'
        assert parse_vm_listing(text) == {"VM1": "{abc-123}", "VM2": "{def-456}"}

    def test_empty_input(self):
        assert parse_vm_listing("") == {}

    def test_blank_lines_skipped(self):
        text = '\n"VM1" {abc}\n\n   \n"VM2" {def}\n\n'
        assert parse_vm_listing(text) == {"VM1": "{abc}", "VM2": "{def}"}

    def test_duplicate_name_later_wins(self):
        assert parse_vm_listing('"VM1" {abc}\n"VM1" {xyz}\n') == {"VM1": "{xyz}"}

    def test_windows_line_endings(self):
        text = '"VM1" {abc}\r\n"VM2" {def}\r\n'
        assert parse_vm_listing(text) == {"VM1": "{abc}", "VM2": "{def}"}

    def test_preserves_reported_order(self):
        text = '"zeta" {1}\n"alpha" {2}\n"mid" {3}\n'
        assert list(parse_vm_listing(text)) == ["zeta", "alpha", "mid"]

    def test_names_with_spaces(self):
        text = '"My VM" {abc}\n"My Other VM" {def}\n'
        assert parse_vm_listing(text) == {"My VM": "{abc}", "My Other VM": "{def}"}

    def test_malformed_line_skipped_with_warning(self, caplog):
        text = '"VM1" {abc}\ngarbage\n"VM2" {def}\n'

        with caplog.at_level(logging.WARNING, logger="vboxctl.vm_listing"):
            vms = parse_vm_listing(text)

        assert vms == {"VM1": "{abc}", "VM2": "{def}"}
        assert "garbage" in caplog.text

    def test_malformed_line_does_not_corrupt_neighbours(self):
        text = '"VM1" {abc}\n"broken\n"VM2" {def}\n'
        assert parse_vm_listing(text) == {"VM1": "{abc}", "VM2": "{def}"}

    def test_strict_raises_on_malformed_line(self):
        with pytest.raises(VMListingParseError, match="garbage"):
            parse_vm_listing('"VM1" {abc}\ngarbage\n', strict=True)
