"""CLI error handling: wrap commands to report errors instead of tracebacks."""

from functools import wraps

import typer
from click.exceptions import Exit

from clawion.errors import ClawionError, PermissionDenied, ValidationFailure


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting.

    Domain errors are echoed as-is; anything else is prefixed by its kind.
    Every failure ends in exit code 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except (PermissionDenied, ValidationFailure) as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(1) from e
        except ClawionError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e
        except (ValueError, KeyError, TypeError) as e:
            typer.echo(f"Invalid input: {e}", err=True)
            raise typer.Exit(1) from e
        except OSError as e:
            typer.echo(f"File error: {e}", err=True)
            raise typer.Exit(1) from e
        except Exception as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper


def fail(message: str) -> None:
    """Report a usage-level failure on stderr and exit 1."""
    typer.echo(message, err=True)
    raise typer.Exit(1)
