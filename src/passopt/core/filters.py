"""Eligibility predicates deciding which passes become option values.

A filter is any callable taking a PassInfo and returning a bool. The base
rule in ``is_selectable`` always applies; a refinement can only narrow it.
"""

from collections.abc import Callable, Iterable

from passopt.core.pass_info import PassInfo

PassFilter = Callable[[PassInfo], bool]


def is_selectable(info: PassInfo) -> bool:
    """Base rule: the pass has a non-empty argument and a constructor."""
    return bool(info.argument) and info.is_constructible


def accept_all(info: PassInfo) -> bool:
    """Refinement that narrows nothing."""
    return True


def make_admission(refinement: PassFilter = accept_all) -> PassFilter:
    """Combine the base rule with ``refinement``."""

    def admit(info: PassInfo) -> bool:
        return is_selectable(info) and refinement(info)

    return admit


class PassArgFilter:
    """Refinement admitting only passes whose argument is in an allow-list.

    The allow-list is either an iterable of arguments or a single
    whitespace-delimited string such as ``"-anders_aa -dse"``. A leading
    dash on an entry is ignored. Membership is exact: "opt" does not match
    an allow-list containing "optimize".
    """

    def __init__(self, arguments: str | Iterable[str]) -> None:
        if isinstance(arguments, str):
            arguments = arguments.split()
        self._arguments = frozenset(arg.lstrip("-") for arg in arguments if arg.strip("-"))

    @property
    def arguments(self) -> frozenset[str]:
        return self._arguments

    def __call__(self, info: PassInfo) -> bool:
        return info.argument is not None and info.argument in self._arguments

    def __repr__(self) -> str:
        return f"PassArgFilter({sorted(self._arguments)!r})"
