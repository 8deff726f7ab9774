"""CLI helper utilities shared across commands."""

import click

from ..context import AssetContext
from ..models import BuildError
from ..pipeline import BuildResult


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    return f"{size / 1024:.2f} kB"


def echo_result(ctx: AssetContext, result: BuildResult) -> None:
    """Print one line per written file, then a summary."""
    for report in result.files:
        name = ctx.display(report.path)
        if report.source_size is not None:
            click.echo(
                f"File {name} created: "
                f"{format_size(report.source_size)} → {format_size(report.size)}"
            )
        else:
            click.echo(f"File {name} created: {format_size(report.size)}")
    click.echo(f"Done: {', '.join(result.steps) or 'nothing to do'}")


def echo_error(error: BuildError) -> None:
    click.echo(f"Error: {error}", err=True)
