"""Build command - run the pipeline once."""

import sys

import click

from ...context import pass_context
from ...home import today
from ...models import STEP_NAMES, BuildError
from ...pipeline import run_default
from ..helpers import echo_error, echo_result


@click.command()
@click.option(
    "--only",
    type=click.Choice(STEP_NAMES),
    multiple=True,
    help="Run only the named step(s); repeatable. Order stays fixed.",
)
@click.option(
    "--date",
    "build_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Date written into the banner (default: today).",
)
@pass_context
def build(ctx, only, build_date):
    """Minify, combine and add the banner.

    Examples:
        assetpipe build                      # full pipeline
        assetpipe build --only minify        # per-file minification only
        assetpipe build --date 2024-01-01    # reproducible banner date
    """
    when = build_date.date() if build_date else today()
    try:
        result = run_default(ctx.config(), when, only=only or None)
    except BuildError as e:
        echo_error(e)
        sys.exit(1)
    echo_result(ctx, result)
