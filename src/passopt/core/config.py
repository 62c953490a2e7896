"""Configuration loaded from environment variables and an optional TOML file.

Environment:
- PASSOPT_DEBUG: "1" or "true" enables debug logging
- PASSOPT_ENTRY_POINT_GROUP: entry point group scanned for passes
- PASSOPT_CONFIG: path to a TOML file, e.g. ``allowed_passes = ["dse"]``
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from passopt.core.pass_registry import DEFAULT_ENTRY_POINT_GROUP


@dataclass(frozen=True)
class PassOptConfig:
    """Immutable configuration, loaded once at CLI entry point."""

    debug: bool
    entry_point_group: str
    allowed_passes: tuple[str, ...] | None

    @staticmethod
    def from_env() -> "PassOptConfig":
        """Load configuration from environment variables.

        Raises:
            FileNotFoundError: If PASSOPT_CONFIG names a missing file
            ValueError: If the TOML file is malformed
        """
        config_path = os.environ.get("PASSOPT_CONFIG")
        allowed = load_allowed_passes(Path(config_path)) if config_path else None
        return PassOptConfig(
            debug=os.environ.get("PASSOPT_DEBUG", "false").lower() in ("1", "true"),
            entry_point_group=os.environ.get(
                "PASSOPT_ENTRY_POINT_GROUP", DEFAULT_ENTRY_POINT_GROUP
            ),
            allowed_passes=allowed,
        )


def load_allowed_passes(config_path: Path) -> tuple[str, ...] | None:
    """Read the ``allowed_passes`` list from a TOML file.

    Returns None when the file does not set ``allowed_passes``.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the file is not valid TOML or the value is not a list of strings
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found at {config_path}")

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    allowed = data.get("allowed_passes")
    if allowed is None:
        return None
    if not isinstance(allowed, list) or not all(isinstance(item, str) for item in allowed):
        raise ValueError(f"'allowed_passes' in {config_path} must be a list of strings")
    return tuple(allowed)
