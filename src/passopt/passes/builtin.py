"""Bundled pass descriptors.

These carry no transformation logic; constructing one yields a BuiltinPass
record naming the pass.
"""

from dataclasses import dataclass
from functools import partial

from passopt.core.pass_info import PassInfo
from passopt.core.pass_registry import PassRegistry


@dataclass(frozen=True)
class BuiltinPass:
    argument: str


def _builtin(argument: str, name: str) -> PassInfo:
    return PassInfo(name=name, argument=argument, normal_ctor=partial(BuiltinPass, argument))


BUILTIN_PASSES: tuple[PassInfo, ...] = (
    _builtin("mem2reg", "Promote Memory to Register"),
    _builtin("dce", "Dead Code Elimination"),
    _builtin("adce", "Aggressive Dead Code Elimination"),
    _builtin("dse", "Dead Store Elimination"),
    _builtin("anders_aa", "Andersen's Interprocedural Alias Analysis"),
    _builtin("inline", "Function Integration/Inlining"),
    # Analysis only, never selectable
    PassInfo(name="Dominator Tree Construction", argument="domtree", normal_ctor=None),
)


def register_builtin_passes(registry: PassRegistry) -> None:
    for info in BUILTIN_PASSES:
        registry.register(info)
