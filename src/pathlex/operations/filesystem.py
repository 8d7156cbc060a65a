"""Read-only filesystem queries on resolved paths.

Every query resolves its argument with abs_path() first, so ``~``,
variables and relative paths are accepted. Nothing here modifies the
filesystem.
"""

from pathlib import Path

from pathlex.environment import Environment
from pathlex.lexical.clean import clean
from pathlex.models import LexicalPath
from pathlex.models import PathLike
from pathlex.operations.absolute import abs_path


def resolve_dir(path: LexicalPath | PathLike, env: Environment | None = None) -> Path:
    """Resolve path and check it is an existing directory.

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If path is not a directory
    """
    directory = Path(abs_path(path, env))

    if not directory.exists():
        raise FileNotFoundError(f"Directory does not exist: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {directory}")

    return directory


def exists(path: LexicalPath | PathLike, env: Environment | None = None) -> bool:
    return Path(abs_path(path, env)).exists()


def is_dir(path: LexicalPath | PathLike, env: Environment | None = None) -> bool:
    return Path(abs_path(path, env)).is_dir()


def is_file(path: LexicalPath | PathLike, env: Environment | None = None) -> bool:
    return Path(abs_path(path, env)).is_file()


def is_symlink(path: LexicalPath | PathLike, env: Environment | None = None) -> bool:
    return Path(abs_path(path, env)).is_symlink()


def readlink(
    path: LexicalPath | PathLike, env: Environment | None = None
) -> LexicalPath:
    """Return the target of a symlink exactly as stored (possibly relative).

    Raises:
        OSError: If path is not a symlink (from Path.readlink)
    """
    return LexicalPath.parse(str(Path(abs_path(path, env)).readlink()))


def paths(
    path: LexicalPath | PathLike, env: Environment | None = None
) -> list[LexicalPath]:
    """List the entries of a directory, not recursively.

    Returns:
        Sorted absolute paths of every child of path
    """
    directory = resolve_dir(path, env)
    return sorted((clean(str(child)) for child in directory.iterdir()), key=str)


def dirs(
    path: LexicalPath | PathLike, env: Environment | None = None
) -> list[LexicalPath]:
    """List the subdirectories of a directory, not recursively."""
    directory = resolve_dir(path, env)
    return sorted(
        (clean(str(child)) for child in directory.iterdir() if child.is_dir()),
        key=str,
    )


def files(
    path: LexicalPath | PathLike, env: Environment | None = None
) -> list[LexicalPath]:
    """List the non-directory entries of a directory, not recursively."""
    directory = resolve_dir(path, env)
    return sorted(
        (clean(str(child)) for child in directory.iterdir() if not child.is_dir()),
        key=str,
    )


def all_files(
    path: LexicalPath | PathLike, env: Environment | None = None
) -> list[LexicalPath]:
    """List every file below a directory.

    Symlinks to directories are listed like files and never traversed.

    Returns:
        Sorted absolute paths. Sorted for deterministic output.
    """
    directory = resolve_dir(path, env)
    found = []
    # walk() reports symlinked directories as files and does not follow them
    for dirpath, dirnames, filenames in directory.walk():
        for filename in filenames:
            found.append(clean(str(dirpath / filename)))

    return sorted(found, key=str)
