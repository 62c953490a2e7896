"""Tests for CLI Ensure utility class."""

import pytest

from passopt.cli.ensure import Ensure


class TestEnsureInvariant:
    """Tests for Ensure.invariant method."""

    def test_passes_when_true(self) -> None:
        Ensure.invariant(True, "Should not fail")

    def test_exits_when_false(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            Ensure.invariant(False, "Broken")
        assert exc_info.value.code == 1

    def test_error_message_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ensure.invariant writes the message with an Error prefix to stderr."""
        with pytest.raises(SystemExit):
            Ensure.invariant(False, "Custom error message")

        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "Custom error message" in captured.err
        assert captured.out == ""
