"""Command-line support: a click parameter type and the prettydur tool."""

import json
import logging

import click
from rich.console import Console
from rich.table import Table

from prettydur.config import Settings
from prettydur.duration import Duration
from prettydur.errors import DurationError

logger = logging.getLogger(__name__)


class DurationParamType(click.ParamType):
    """Click parameter type accepting duration text such as "1h 30m".

    Parse failures are reported as a regular click usage error that carries
    the parser's message.
    """

    name = "duration"

    def convert(self, value, param, ctx) -> Duration:
        if isinstance(value, Duration):
            return value
        try:
            return Duration.parse(value)
        except DurationError as e:
            self.fail(str(e), param, ctx)


DURATION = DurationParamType()


def _render(duration: Duration, settings: Settings) -> dict:
    return {
        "nanos": duration.as_nanos(),
        "exact": duration.format_exact(),
        "human": duration.format_human(spelled=settings.spelled, precision=settings.precision),
    }


@click.group()
@click.option("--precision", type=click.IntRange(min=0), help="Fractional digits in human output")
@click.option("--spelled/--compact", default=None, help="Spell out unit names")
@click.pass_context
def cli(ctx: click.Context, precision: int | None, spelled: bool | None):
    """Parse and format human readable durations."""
    settings = Settings()
    overrides = {}
    if precision is not None:
        overrides["precision"] = precision
    if spelled is not None:
        overrides["spelled"] = spelled
    if overrides:
        settings = settings.model_copy(update=overrides)

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname).1s %(asctime)s %(filename)s:%(lineno)d - %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler()],
    )
    ctx.obj = settings


@cli.command("parse")
@click.argument("durations", nargs=-1, required=True, type=DURATION)
@click.option("--json", "as_json", is_flag=True, help="Print one JSON object per duration")
@click.pass_obj
def parse_command(settings: Settings, durations: tuple[Duration, ...], as_json: bool):
    """Parse each DURATION and show its value in every form."""
    rows = [_render(duration, settings) for duration in durations]
    logger.debug(f"Parsed {len(rows)} durations")

    if as_json:
        for row in rows:
            click.echo(json.dumps(row))
        return

    table = Table(title="Durations")
    table.add_column("nanoseconds", justify="right", style="dim")
    table.add_column("exact", style="cyan")
    table.add_column("human", style="green")
    for row in rows:
        table.add_row(str(row["nanos"]), row["exact"], row["human"])
    Console().print(table)


@cli.command("format")
@click.argument("nanos", type=click.IntRange(min=0))
@click.option("--exact", is_flag=True, help="Print the lossless form instead")
@click.pass_obj
def format_command(settings: Settings, nanos: int, exact: bool):
    """Render a raw nanosecond count as duration text."""
    duration = Duration.from_nanos(nanos)
    if exact:
        click.echo(duration.format_exact())
    else:
        click.echo(duration.format_human(spelled=settings.spelled, precision=settings.precision))


@cli.command("sum")
@click.argument("durations", nargs=-1, required=True, type=DURATION)
def sum_command(durations: tuple[Duration, ...]):
    """Add up several durations and print the exact total."""
    total = sum(durations, Duration.zero())
    logger.info(f"Summed {len(durations)} durations to {total.as_nanos()}ns")
    click.echo(total.format_exact())


def main():
    cli(standalone_mode=True)


if __name__ == "__main__":
    main()
