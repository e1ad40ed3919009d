"""CLI error handling: report failures on stderr instead of tracebacks."""

from functools import wraps

import typer
from click.exceptions import Exit

from stringer.errors import StringerError


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting.

    Domain errors and bad input are echoed to stderr, then the command exits 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except StringerError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e
        except (ValueError, TypeError) as e:
            typer.echo(f"Invalid input: {e}", err=True)
            raise typer.Exit(1) from e
        except Exception as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper
