"""Output formatting for pathlex commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer

from pathlex.environment import Environment
from pathlex.exceptions import ConfigValidationError
from pathlex.exceptions import ConfigVersionError
from pathlex.exceptions import PathError
from pathlex.exceptions import PathlexError
from pathlex.lexical.clean import clean
from pathlex.models import LexicalPath


def print_path(
    path: LexicalPath, env: Environment | None = None, tilde: bool = False
) -> None:
    """Print a path to stdout.

    Args:
        path: Path to print
        env: Environment providing the home directory for tilde display
        tilde: If True, show paths under the home directory as ~/...
    """
    if tilde and env is not None:
        typer.echo(_display_path(path, env))
    else:
        typer.echo(path.render())


def print_components(path: LexicalPath) -> None:
    """Print one component per line."""
    for component in path.components:
        typer.echo(component.text)


def print_info(fields: dict[str, str | None]) -> None:
    """Print name/value pairs, with a dim dash for missing values."""
    width = max(len(key) for key in fields)
    for key, value in fields.items():
        label = f"{key + ':':<{width + 1}}"
        if value is None:
            typer.echo(f"{label} " + typer.style("-", fg=typer.colors.BRIGHT_BLACK))
        else:
            typer.echo(f"{label} {value}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    typer.secho(f"✗ {message}", fg=typer.colors.RED, bold=True, err=True)


@contextmanager
def report_errors() -> Iterator[None]:
    """Turn pathlex and OS errors into a message and exit code 1."""
    try:
        yield
    except PathError as e:
        print_error(str(e))
        raise typer.Exit(1) from None
    except (ConfigValidationError, ConfigVersionError) as e:
        print_error(f"Config error: {e}")
        raise typer.Exit(1) from None
    except PathlexError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1) from None
    except PermissionError as e:
        print_error(f"Permission denied: {e}")
        raise typer.Exit(1) from None
    except OSError as e:
        print_error(f"Filesystem error: {e}")
        raise typer.Exit(1) from None


def _display_path(path: LexicalPath, env: Environment) -> str:
    """Format path for display, using ~ for home directory.

    Args:
        path: Path to format
        env: Environment providing the home directory

    Returns:
        String representation with ~ substitution if applicable
    """
    try:
        home = clean(env.home())
    except PathlexError:
        # No home directory, return as-is
        return path.render()

    size = len(home.components)
    if not home.is_absolute() or path.components[:size] != home.components:
        return path.render()

    rest = LexicalPath(path.components[size:])
    if rest.is_empty():
        return "~"
    return f"~/{rest.render()}"
