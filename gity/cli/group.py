"""Command group that forwards unknown commands to git."""

import typer
from typer.core import TyperGroup

from gity.cli.tools import GIT_PASSTHROUGH_COMMAND


class GitFallbackGroup(TyperGroup):
    """TyperGroup resolving unknown command names to the git passthrough."""

    def resolve_command(self, ctx: typer.Context, args: list[str]):
        cmd_name = args[0] if args else None
        if (
            cmd_name
            and not cmd_name.startswith("-")
            and self.get_command(ctx, cmd_name) is None
        ):
            # Hand the whole argument list, command name included, to git
            return GIT_PASSTHROUGH_COMMAND, self.get_command(ctx, GIT_PASSTHROUGH_COMMAND), args
        return super().resolve_command(ctx, args)
