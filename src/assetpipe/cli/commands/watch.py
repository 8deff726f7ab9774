"""Watch command - rebuild whenever sources change."""

import sys

import click

from ...context import pass_context
from ...home import today
from ...models import BuildError
from ...pipeline import run_default
from ...watcher import watch as watch_loop
from ..helpers import echo_error, echo_result


@click.command()
@pass_context
def watch(ctx):
    """Build once, then rebuild on every change to the watched files.

    Runs until interrupted (Ctrl+C). A failed build is reported and the
    watcher keeps going.
    """
    try:
        config = ctx.config()
    except BuildError as e:
        echo_error(e)
        sys.exit(1)

    def build():
        echo_result(ctx, run_default(config, today()))

    click.echo(f"Watching {', '.join(config.watch.files)} (Ctrl+C to stop)")
    watch_loop(
        config,
        build,
        on_change=lambda names: click.echo(f"Changed: {names}"),
        on_error=echo_error,
    )
