import logging

import click

from passopt import __version__
from passopt.cli.error_boundary import cli_error_boundary
from passopt.cli.help_formatter import PassListCommand
from passopt.cli.pass_name_parser import pass_list_option
from passopt.core.config import PassOptConfig
from passopt.core.filters import PassArgFilter, PassFilter, accept_all
from passopt.core.pass_info import PassInfo
from passopt.core.pass_registry import PassRegistry
from passopt.passes.builtin import register_builtin_passes

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def create_cli(registry: PassRegistry, pass_filter: PassFilter = accept_all) -> click.Command:
    """Build the passopt command with a pass list option bound to ``registry``."""

    @click.command(cls=PassListCommand, context_settings=CONTEXT_SETTINGS)
    @click.version_option(version=__version__, prog_name="passopt")
    @pass_list_option(
        "-p",
        "--pass",
        "passes",
        registry=registry,
        pass_filter=pass_filter,
        values_heading="Optimizations available",
        help="Pass to run, by argument. May be repeated.",
    )
    def cli(passes: tuple[PassInfo, ...]) -> None:
        """Select registered passes by argument, in command-line order."""
        if not passes:
            click.echo("No passes selected.")
            return
        for info in passes:
            click.echo(f"{info.argument}: {info.name}")

    return cli


def build_registry(config: PassOptConfig) -> PassRegistry:
    """Registry holding the bundled passes plus those published by entry points."""
    registry = PassRegistry()
    register_builtin_passes(registry)
    registry.load_entry_points(config.entry_point_group)
    return registry


@cli_error_boundary
def load_cli() -> click.Command:
    """Load configuration and passes, then build the command."""
    config = PassOptConfig.from_env()
    if config.debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    logger.debug(
        "Config: entry_point_group=%s, allowed_passes=%s",
        config.entry_point_group,
        config.allowed_passes,
    )

    pass_filter: PassFilter = accept_all
    if config.allowed_passes is not None:
        pass_filter = PassArgFilter(config.allowed_passes)
    return create_cli(build_registry(config), pass_filter)


def main() -> None:
    """CLI entry point used by the `passopt` console script."""
    load_cli()()
