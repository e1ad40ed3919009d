import logging

import typer

from stringer import __version__, api, config
from stringer.cli import output
from stringer.cli.errors import error_feedback
from stringer.format import describe, to_dict
from stringer.models import DigitMode

logger = logging.getLogger(__name__)

app = typer.Typer(invoke_without_command=True, no_args_is_help=False)


def _version_callback(value: bool):
    if value:
        typer.echo(f"stringer {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="[stringer] %(message)s", force=True)


@app.callback(invoke_without_command=True)
def common_options_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Print version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Reverse or inspect a string."""
    _configure_logging(verbose)
    output.init_context(ctx, json_output)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


def _prompt(message: str, ctx: typer.Context) -> None:
    if not output.echo_json({"error": message}, ctx):
        typer.echo(message)


@app.command()
@error_feedback
def reverse(
    ctx: typer.Context,
    text: str = typer.Argument(None, metavar="STRING", help="The string to reverse."),
):
    """Reverses a string."""
    if text is None:
        _prompt("Please provide a string to reverse", ctx)
        return

    result = api.reverse(text)
    if output.echo_json({"input": text, "output": result}, ctx):
        return
    typer.echo(result)


@app.command()
@error_feedback
def inspect(
    ctx: typer.Context,
    text: str = typer.Argument(None, metavar="STRING", help="The string to inspect."),
    only_digits: bool = typer.Option(
        False, "--digits", "-d", help="Only count digits instead of all characters."
    ),
    digit_set: DigitMode = typer.Option(
        None,
        "--digit-set",
        case_sensitive=False,
        help="Which characters count as digits. Defaults to $STRINGER_DIGITS, then unicode.",
    ),
):
    """Inspects a string and counts its characters or digits."""
    if text is None:
        _prompt("Please provide a string to inspect", ctx)
        return

    digits = config.digit_mode(digit_set) if only_digits else DigitMode.UNICODE
    logger.debug(f"digit set: {digits.value}")
    result = api.inspect(text, only_digits=only_digits, digits=digits)
    if output.echo_json(to_dict(text, result), ctx):
        return
    typer.echo(describe(text, result))


def main() -> None:
    """Entry point for stringer command."""
    app()
