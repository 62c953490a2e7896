"""CLI error handling utilities with styled output.

Errors use a red "Error:" prefix on stderr for visual consistency, then exit.
"""

import click


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            click.echo(click.style("Error: ", fg="red") + error_message, err=True)
            raise SystemExit(1)
