"""Click parameter type whose values are the passes in a PassRegistry.

PassNameParser listens to a registry and turns every eligible pass into a
selectable option value. The option it is attached to may be created before,
during or after passes register; attaching replays the registry history, so
the set of values is the same in every case.
"""

import logging

import click
from click.shell_completion import CompletionItem

from passopt.cli.ensure import Ensure
from passopt.core.filters import PassFilter, accept_all, make_admission
from passopt.core.pass_info import PassEntry, PassInfo
from passopt.core.pass_registry import PassRegistrationListener, PassRegistry

logger = logging.getLogger(__name__)

DEFAULT_VALUES_HEADING = "Available passes"


class PassNameParser(click.ParamType, PassRegistrationListener):
    """Maps pass arguments to their PassInfo for a single option.

    Entries are kept in registration order. Help output is sorted by argument
    at render time only; parsing and iteration never see the sorted order.
    """

    name = "pass"

    def __init__(self, registry: PassRegistry, pass_filter: PassFilter = accept_all) -> None:
        self._registry = registry
        self._pass_filter = pass_filter
        self._admit = make_admission(pass_filter)
        self._option: click.Option | None = None
        self._entries: list[PassEntry] = []

    @property
    def option(self) -> click.Option | None:
        return self._option

    @property
    def entries(self) -> tuple[PassEntry, ...]:
        """Entries in registration order."""
        return tuple(self._entries)

    def attach(self, option: click.Option) -> None:
        """Bind to ``option`` and subscribe to the registry.

        Subscribing replays every pass registered so far.

        Raises:
            ValueError: If already attached to a different option
        """
        if self._option is option:
            return
        if self._option is not None:
            raise ValueError(
                f"PassNameParser is already attached to option '{self._option.name}'"
            )
        self._option = option
        logger.debug("Attaching pass parser to option %s", option.name)
        self._registry.subscribe(self)

    def find_entry(self, argument: str) -> PassEntry | None:
        for entry in self._entries:
            if entry.argument == argument:
                return entry
        return None

    def pass_registered(self, info: PassInfo) -> None:
        if self._option is None:
            logger.debug("No option attached, dropping pass %s", info.argument)
            return
        if not self._admit(info):
            logger.debug("Pass not eligible: argument=%r, name=%s", info.argument, info.name)
            return

        assert info.argument is not None
        existing = self.find_entry(info.argument)
        existing_name = existing.info.name if existing is not None else None
        Ensure.invariant(
            existing is None,
            f"Two passes with the same argument (-{info.argument}) attempted to be registered: "
            f"'{existing_name}' and '{info.name}'",
        )
        self.add_literal_value(info.argument, info, info.name)

    def add_literal_value(self, argument: str, info: PassInfo, help: str) -> None:
        """Append a selectable value."""
        self._entries.append(PassEntry(argument=argument, info=info, help=help))

    def convert(
        self, value: object, param: click.Parameter | None, ctx: click.Context | None
    ) -> PassInfo:
        if isinstance(value, PassInfo):
            return value

        entry = self.find_entry(str(value))
        if entry is None:
            choices = ", ".join(sorted(e.argument for e in self._entries))
            self.fail(f"{value!r} is not a registered pass. Choose from: {choices}", param, ctx)
        return entry.info

    def shell_complete(
        self, ctx: click.Context, param: click.Parameter, incomplete: str
    ) -> list[CompletionItem]:
        return [
            CompletionItem(entry.argument, help=entry.help)
            for entry in self.sorted_entries()
            if entry.argument.startswith(incomplete)
        ]

    def sorted_entries(self) -> list[PassEntry]:
        """Copy of the entries ordered by argument."""
        return sorted(self._entries, key=lambda entry: entry.argument)

    def format_help(self, option: click.Option, formatter: click.HelpFormatter) -> None:
        """Write the option's values to ``formatter``, sorted by argument."""
        self.format_values(option, formatter, self.sorted_entries())

    def format_values(
        self,
        option: click.Option,
        formatter: click.HelpFormatter,
        entries: list[PassEntry],
    ) -> None:
        """Default renderer: one definition-list section per option."""
        heading = getattr(option, "values_heading", None) or DEFAULT_VALUES_HEADING
        rows = [(entry.argument, entry.help) for entry in entries]

        with formatter.section(heading):
            if rows:
                formatter.write_dl(rows)

    def render_help(self, option: click.Option, width: int) -> str:
        """Render the sorted value table to a string."""
        formatter = click.HelpFormatter(width=width)
        self.format_help(option, formatter)
        return formatter.getvalue()


class PassOption(click.Option):
    """Option whose values are supplied by a PassNameParser.

    Constructing the option attaches its parser. Defaults to ``multiple=True``
    so the option collects an ordered pass list.
    """

    def __init__(
        self,
        param_decls: list[str] | None = None,
        values_heading: str | None = None,
        **attrs: object,
    ) -> None:
        attrs.setdefault("multiple", True)
        super().__init__(param_decls, **attrs)  # type: ignore[arg-type]
        self.values_heading = values_heading or DEFAULT_VALUES_HEADING
        if isinstance(self.type, PassNameParser):
            self.type.attach(self)


def pass_list_option(
    *param_decls: str,
    registry: PassRegistry,
    pass_filter: PassFilter = accept_all,
    **attrs: object,
):
    """Decorator adding a PassOption backed by ``registry`` to a command."""
    return click.option(
        *param_decls,
        cls=PassOption,
        type=PassNameParser(registry, pass_filter),
        **attrs,
    )
