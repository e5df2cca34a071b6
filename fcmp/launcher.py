import logging
from importlib import metadata
from pathlib import Path

import click

from fcmp.config import OUTPUT_FORMATS, config
from fcmp.core.compare import compare_files
from fcmp.logger import with_logging
from fcmp.utils.format import OutputFormat, human_join, plural, render
from fcmp.utils.helper import platformdir

log = logging.getLogger(__name__)

SETTING_KEYS: tuple[str, ...] = ("ignore_case", "output_format", "separator_width", "separator_char", "encoding")

_input_file = click.Path(exists=True, dir_okay=False, readable=True, path_type=Path)


def run_compare(first: Path, second: Path, *, ignore_case: bool, fmt: OutputFormat) -> None:
    try:
        comparison = compare_files(first, second, ignore_case=ignore_case, encoding=config.encoding)
    except OSError as exc:
        raise click.FileError(exc.filename or str(first), hint=exc.strerror) from exc

    if comparison.identical:
        log.info("No differences between %s and %s", first, second)

    click.echo(render(comparison, fmt, width=config.separator_width, fill=config.separator_char))


@click.group(invoke_without_command=True, options_metavar="[options]")
@click.version_option(
    metadata.version("fcmp"),
    "-v",
    "--version",
    package_name="fcmp",
    prog_name="fcmp",
    message=click.style("%(prog)s", fg="yellow") + click.style(" %(version)s", fg="bright_cyan"),
)
@click.option("--first", "-f", type=_input_file, help="First file to compare")
@click.option("--second", "-s", type=_input_file, help="Second file to compare")
@click.option("--ignore-case", "-i", is_flag=True, help="Compare lines case-insensitively")
@click.option("--render-html", "-r", is_flag=True, help="Render the report as an HTML table")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Report format (defaults to the configured output_format)",
)
@click.option("--debug", "-d", is_flag=True, help="Set log level to debug")
@click.pass_context
def main(
    ctx: click.Context,
    first: Path | None,
    second: Path | None,
    ignore_case: bool,
    render_html: bool,
    output_format: str | None,
    debug: bool,
) -> None:
    """Compare the lines of two files, ignoring their relative order"""
    if ctx.invoked_subcommand is not None:
        return

    if first is None or second is None:
        missing = [name for name, value in (("--first", first), ("--second", second)) if value is None]
        msg = f"Missing {'option' if len(missing) == 1 else 'options'} {human_join(missing, conjunction='and')}."
        raise click.UsageError(msg, ctx=ctx)

    if render_html and output_format not in (None, OutputFormat.HTML):
        click.echo(click.style(f"--render-html overrides --format {output_format}", fg="yellow"), err=True)

    fmt = OutputFormat.HTML if render_html else OutputFormat((output_format or config.output_format).lower())

    log_level = logging.DEBUG if debug else logging.WARNING
    with with_logging(log_level=log_level):
        if debug:
            log.debug("****** Running in DEBUG mode ******")
        run_compare(first, second, ignore_case=ignore_case or config.ignore_case, fmt=fmt)


@main.command(name="help")
@click.pass_context
def fcmp_help(ctx: click.Context) -> None:
    """Show this message and exit."""
    if ctx.parent is not None:
        click.echo(ctx.parent.get_help())


@main.command(name="config")
def show_config() -> None:
    """Show the config directory and the settings in effect"""
    click.echo(f"config directory: {platformdir.user_config_path}")
    click.echo(f"log file: {platformdir.user_log_path / 'fcmp.log'}")
    click.echo(click.style(f"{plural(len(SETTING_KEYS)):setting}:", bold=True))
    for key in SETTING_KEYS:
        click.echo(f"  {key} = {config.get(key)!r}")


if __name__ == "__main__":
    main()
