"""CLI entry point for opencommit.

Running `oco` without a subcommand runs the commit command, so
`oco -y --no-verify` is the same as `oco commit -y --no-verify`.
"""

import typer
from typer.core import TyperGroup

from opencommit.cli.config import config_app
from opencommit.cli.main import commit_command

DEFAULT_COMMAND = "commit"


class DefaultCommandGroup(TyperGroup):
    """Command group that falls back to the commit command."""

    def parse_args(self, ctx, args):
        if not args or (args[0] not in self.commands and args[0] not in ctx.help_option_names):
            args = [DEFAULT_COMMAND] + list(args)
        return super().parse_args(ctx, args)


# Main application
app = typer.Typer(
    name="oco",
    cls=DefaultCommandGroup,
    help="opencommit: AI-generated commit messages for your staged changes",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add the default command; unknown options are passed through to git commit
app.command(
    DEFAULT_COMMAND,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)(commit_command)


__all__ = [
    "app",
    "config_app",
    "commit_command",
    "DefaultCommandGroup",
]
