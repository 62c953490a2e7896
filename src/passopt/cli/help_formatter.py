"""Custom Click help formatter listing pass option values."""

import click

from passopt.cli.pass_name_parser import PassNameParser, PassOption


class PassListCommand(click.Command):
    """Click Command that appends each pass option's values to its help.

    The values are rendered after the regular options section, one section
    per pass option, sorted by pass argument.
    """

    def format_options(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format options, then the pass tables."""
        super().format_options(ctx, formatter)

        for param in self.get_params(ctx):
            if isinstance(param, PassOption) and isinstance(param.type, PassNameParser):
                param.type.format_help(param, formatter)
