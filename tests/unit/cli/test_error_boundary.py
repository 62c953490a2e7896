"""Tests for cli_error_boundary."""

import pytest

from passopt.cli.error_boundary import cli_error_boundary


@pytest.mark.parametrize(
    "error",
    [FileNotFoundError("Config not found at x.toml"), ValueError("bad value")],
)
def test_known_errors_exit_cleanly(
    error: Exception, capsys: pytest.CaptureFixture[str]
) -> None:
    @cli_error_boundary
    def command() -> None:
        raise error

    with pytest.raises(SystemExit) as exc_info:
        command()

    assert exc_info.value.code == 1
    assert capsys.readouterr().err == f"Error: {error}\n"


def test_other_errors_propagate() -> None:
    @cli_error_boundary
    def command() -> None:
        raise RuntimeError("unexpected")

    with pytest.raises(RuntimeError, match="unexpected"):
        command()


def test_returns_result() -> None:
    @cli_error_boundary
    def command(value: int) -> int:
        return value * 2

    assert command(21) == 42
