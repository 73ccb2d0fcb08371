from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from klineplot.errors import KlinePlotError
from klineplot.render import describe_chart, render_chart

app = typer.Typer(
    add_completion=False,
    help="Render kline (box) charts described in YAML to SVG.",
)


def _fail(exc: KlinePlotError) -> None:
    typer.echo(f"ERROR {exc.code}: {exc.message}", err=True)
    typer.echo(f"HINT: {exc.hint}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


@app.command("render")
def render(
    chart: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Chart YAML file.",
    ),
    output_svg: Path = typer.Argument(
        ...,
        dir_okay=False,
        help="Output SVG path.",
    ),
    highlight: int | None = typer.Option(
        None,
        "--highlight",
        help="Zero-based index of the box to draw as hovered, with rulers and text.",
    ),
    style: Path | None = typer.Option(
        None,
        "--style",
        dir_okay=False,
        help="Optional style YAML replacing config/chart_style.v1.yaml.",
    ),
) -> None:
    """Render a chart file to SVG."""
    try:
        result = render_chart(chart, output_svg, highlight=highlight, style_path=style)
    except KlinePlotError as exc:
        _fail(exc)
    typer.echo(json.dumps(result, indent=2, sort_keys=True))


@app.command()
def describe(
    chart: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Chart YAML file.",
    ),
    style: Path | None = typer.Option(
        None,
        "--style",
        dir_okay=False,
        help="Optional style YAML replacing config/chart_style.v1.yaml.",
    ),
) -> None:
    """Print the hover text of every box."""
    try:
        descriptions = describe_chart(chart, style_path=style)
    except KlinePlotError as exc:
        _fail(exc)
    typer.echo("\n\n".join(descriptions))
