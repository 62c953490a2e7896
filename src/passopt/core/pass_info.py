"""Pass descriptor models."""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class PassInfo:
    """Immutable description of a registered pass.

    The argument is the token users select the pass by on the command line.
    A pass with no argument, or with no constructor, is never offered as an
    option value.
    """

    name: str  # Human-readable name shown in help output
    argument: str | None  # Command-line token, e.g. "mem2reg"
    normal_ctor: Callable[[], object] | None = None

    @property
    def is_constructible(self) -> bool:
        """Whether the pass can be instantiated from the command line."""
        return self.normal_ctor is not None


@dataclass(frozen=True)
class PassEntry:
    """Selectable option value backed by a registered pass."""

    argument: str
    info: PassInfo
    help: str
