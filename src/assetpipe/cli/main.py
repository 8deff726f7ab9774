"""assetpipe CLI main entry point with global options."""

from pathlib import Path

import click

from ..context import AssetContext
from ..log import setup_logging


@click.group(invoke_without_command=True)
@click.option(
    "--package",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to package.json (overrides $ASSETPIPE_PACKAGE)",
)
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Project root that relative paths resolve against (default: CWD)",
)
@click.option(
    "--log-level",
    default=None,
    help="Log level, e.g. INFO or DEBUG (overrides $ASSETPIPE_LOG_LEVEL)",
)
@click.version_option(package_name="assetpipe")
@click.pass_context
def cli(ctx, package, root, log_level):
    """assetpipe - minify, combine and banner CSS assets."""
    setup_logging(log_level)
    ctx.ensure_object(AssetContext)
    ctx.obj.package = package
    ctx.obj.root = root

    # Bare `assetpipe` runs the default pipeline
    if ctx.invoked_subcommand is None:
        ctx.invoke(build)


# Register commands at module level so tests can import cli with commands attached
from .commands.build import build
from .commands.watch import watch

cli.add_command(build)
cli.add_command(watch)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
