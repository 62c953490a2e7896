"""Pass registration and listener notification.

The registry is an explicit object handed to whichever component needs
notifications. Listeners that subscribe late still see every pass: subscribing
replays the registration history before forwarding live registrations.
"""

import importlib.metadata
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from passopt.core.pass_info import PassInfo

logger = logging.getLogger(__name__)

DEFAULT_ENTRY_POINT_GROUP = "passopt.passes"


class PassRegistrationListener(ABC):
    """Receives a callback for every pass known to a registry."""

    @abstractmethod
    def pass_registered(self, info: PassInfo) -> None:
        """Called once for each pass registered after subscribing."""
        ...

    def pass_enumerate(self, info: PassInfo) -> None:
        """Called once for each pass replayed from history.

        Defaults to treating replayed passes like live registrations.
        """
        self.pass_registered(info)


class PassRegistry:
    """In-memory registry of pass descriptors, in registration order."""

    def __init__(self) -> None:
        self._passes: list[PassInfo] = []
        self._listeners: list[PassRegistrationListener] = []

    @property
    def passes(self) -> tuple[PassInfo, ...]:
        """Snapshot of every registered pass."""
        return tuple(self._passes)

    def register(self, info: PassInfo) -> PassInfo:
        """Record a pass and forward it to every subscribed listener."""
        logger.debug("Registering pass: argument=%s, name=%s", info.argument, info.name)
        self._passes.append(info)
        for listener in list(self._listeners):
            listener.pass_registered(info)
        return info

    def enumerate_passes(self, listener: PassRegistrationListener) -> None:
        """Replay every currently known pass to ``listener``."""
        for info in tuple(self._passes):
            listener.pass_enumerate(info)

    def subscribe(self, listener: PassRegistrationListener) -> None:
        """Replay history to ``listener``, then forward future registrations.

        The listener is added before the replay snapshot is taken, so a pass
        registered during the replay is delivered exactly once, live.
        """
        history = tuple(self._passes)
        self._listeners.append(listener)
        logger.debug("Listener subscribed, replaying %d passes", len(history))
        for info in history:
            listener.pass_enumerate(info)

    def register_pass(self, argument: str, name: str) -> Callable[[type], type]:
        """Class decorator registering ``cls`` as a constructible pass.

        Example:
            @registry.register_pass("dce", "Dead Code Elimination")
            class DeadCodeElimination: ...
        """

        def _wrap(cls: type) -> type:
            self.register(PassInfo(name=name, argument=argument, normal_ctor=cls))
            return cls

        return _wrap

    def load_entry_points(self, group: str = DEFAULT_ENTRY_POINT_GROUP) -> int:
        """Register passes published by installed packages.

        Each entry point in ``group`` must resolve to a PassInfo, or to a
        zero-argument callable returning an iterable of PassInfo.

        Returns:
            Number of passes registered

        Raises:
            ValueError: If an entry point resolves to anything else
        """
        count = 0
        for entry_point in importlib.metadata.entry_points(group=group):
            loaded = entry_point.load()
            for info in _coerce_entry_point(entry_point.name, loaded):
                self.register(info)
                count += 1
        logger.debug("Loaded %d passes from entry point group %s", count, group)
        return count


def _coerce_entry_point(name: str, loaded: object) -> Iterable[PassInfo]:
    if isinstance(loaded, PassInfo):
        return [loaded]
    if callable(loaded):
        produced = list(loaded())
        for item in produced:
            if not isinstance(item, PassInfo):
                raise ValueError(
                    f"Entry point '{name}' produced {type(item).__name__}, expected PassInfo"
                )
        return produced
    raise ValueError(
        f"Entry point '{name}' must be a PassInfo or a callable returning PassInfo objects"
    )
