"""Name, directory and extension helpers."""

from pathlex.exceptions import ExtensionNotFoundError
from pathlex.exceptions import FileNameNotFoundError
from pathlex.exceptions import ParentNotFoundError
from pathlex.lexical.join import raw_text
from pathlex.lexical.join import split_extension
from pathlex.lexical.join import trim_ext
from pathlex.models import LexicalPath
from pathlex.models import Normal
from pathlex.models import PathLike
from pathlex.models import RootDir


def base(path: LexicalPath | PathLike) -> str:
    """Return the final named segment of path.

    Raises:
        FileNameNotFoundError: If path does not end in a named segment
    """
    lexical = LexicalPath.of(path)
    if lexical.is_empty() or not isinstance(lexical.components[-1], Normal):
        raise FileNameNotFoundError(path)
    return lexical.components[-1].name


def dirname(path: LexicalPath | PathLike) -> LexicalPath:
    """Return path without its last component.

    Raises:
        ParentNotFoundError: If path is empty or is the root
    """
    lexical = LexicalPath.of(path)
    if lexical.is_empty() or lexical.components == (RootDir(),):
        raise ParentNotFoundError(path)
    return LexicalPath(lexical.components[:-1])


def ext(path: LexicalPath | PathLike) -> str:
    """Return the extension of the final segment, without the dot.

    Raises:
        ExtensionNotFoundError: If the final segment has no extension
    """
    lexical = LexicalPath.of(path)
    if not lexical.is_empty() and isinstance(lexical.components[-1], Normal):
        _, extension = split_extension(lexical.components[-1].name)
        if extension is not None:
            return extension
    raise ExtensionNotFoundError(path)


def name(path: LexicalPath | PathLike) -> str:
    """Return the final segment without its extension."""
    return base(trim_ext(path))


def concat(path: LexicalPath | PathLike, value: str) -> LexicalPath:
    """Append value to the string form of path (``foo`` + ``.rs``)."""
    return LexicalPath.parse(f"{raw_text(path)}{value}")


def has(path: LexicalPath | PathLike, value: str) -> bool:
    return value in raw_text(path)


def has_prefix(path: LexicalPath | PathLike, value: str) -> bool:
    return raw_text(path).startswith(value)


def has_suffix(path: LexicalPath | PathLike, value: str) -> bool:
    return raw_text(path).endswith(value)
