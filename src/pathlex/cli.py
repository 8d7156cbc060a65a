"""Command-line interface for pathlex."""

from pathlib import Path
from typing import Annotated

import typer

from pathlex import __version__
from pathlex import lexical
from pathlex import operations
from pathlex.config import Settings
from pathlex.environment import SystemEnvironment
from pathlex.exceptions import PathError
from pathlex.log import configure_logging
from pathlex.models import LexicalPath
from pathlex.output import print_components
from pathlex.output import print_info
from pathlex.output import print_path
from pathlex.output import report_errors

app = typer.Typer(help="Lexical path resolution")

PathArgument = Annotated[str, typer.Argument(help="Path to process")]
BaseArgument = Annotated[str, typer.Argument(help="Path to resolve against")]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pathlex {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log resolution steps to stderr")
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(help="Config file (default: user config directory)"),
    ] = None,
) -> None:
    """Lexical path resolution."""
    with report_errors():
        settings = Settings.load(config)
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else Settings()


@app.command("clean")
def clean_command(path: PathArgument) -> None:
    """Print the shortest lexically equivalent form of PATH."""
    print_path(lexical.clean(path))


@app.command("expand")
def expand_command(path: PathArgument) -> None:
    """Expand ~ and $VARIABLES in PATH."""
    with report_errors():
        print_path(operations.expand(path, SystemEnvironment()))


@app.command("abs")
def abs_command(
    ctx: typer.Context,
    path: PathArgument,
    tilde: Annotated[
        bool, typer.Option("--tilde", help="Show paths under $HOME as ~/...")
    ] = False,
) -> None:
    """Resolve PATH to a clean absolute path."""
    env = SystemEnvironment()
    with report_errors():
        resolved = operations.abs_path(path, env, _settings(ctx).schemes)
        print_path(resolved, env, tilde=tilde)


@app.command("abs-from")
def abs_from_command(
    ctx: typer.Context, path: PathArgument, base: BaseArgument
) -> None:
    """Resolve PATH relative to the file BASE."""
    env = SystemEnvironment()
    with report_errors():
        print_path(operations.abs_from(path, base, env, _settings(ctx).schemes))


@app.command("relative")
def relative_command(
    ctx: typer.Context, path: PathArgument, base: BaseArgument
) -> None:
    """Express PATH relative to the file BASE."""
    env = SystemEnvironment()
    with report_errors():
        print_path(operations.relative_from(path, base, env, _settings(ctx).schemes))


@app.command("mash")
def mash_command(
    directory: Annotated[str, typer.Argument(help="Directory to join onto")],
    path: PathArgument,
) -> None:
    """Join PATH onto DIRECTORY, ignoring a leading / on PATH."""
    print_path(lexical.mash(directory, path))


@app.command("trim")
def trim_command(
    path: PathArgument,
    first: Annotated[
        bool, typer.Option("--first", help="Drop the first component")
    ] = False,
    last: Annotated[
        bool, typer.Option("--last", help="Drop the last component")
    ] = False,
    prefix: Annotated[
        str | None, typer.Option(help="Drop this text from the start")
    ] = None,
    suffix: Annotated[
        str | None, typer.Option(help="Drop this text from the end")
    ] = None,
    ext: Annotated[bool, typer.Option("--ext", help="Drop the extension")] = False,
) -> None:
    """Trim one part off PATH."""
    chosen = [first, last, prefix is not None, suffix is not None, ext]
    if chosen.count(True) != 1:
        raise typer.BadParameter(
            "choose exactly one of --first, --last, --prefix, --suffix, --ext"
        )

    if first:
        result = lexical.trim_first(path)
    elif last:
        result = lexical.trim_last(path)
    elif prefix is not None:
        result = lexical.trim_prefix(path, prefix)
    elif suffix is not None:
        result = lexical.trim_suffix(path, suffix)
    else:
        result = lexical.trim_ext(path)
    print_path(result)


@app.command("split")
def split_command(path: PathArgument) -> None:
    """Print the components of PATH, one per line."""
    print_components(LexicalPath.parse(path))


@app.command("info")
def info_command(path: PathArgument) -> None:
    """Show the base name, directory, extension and name of PATH."""

    def attempt(func) -> str | None:
        try:
            return str(func(path))
        except PathError:
            return None

    print_info(
        {
            "base": attempt(lexical.base),
            "dir": attempt(lexical.dirname),
            "ext": attempt(lexical.ext),
            "name": attempt(lexical.name),
        }
    )


def main() -> None:
    """Main entry point for the pathlex CLI."""
    app()


if __name__ == "__main__":
    main()
