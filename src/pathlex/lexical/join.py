"""Path joining and trimming operations."""

import os

from pathlex.models import LexicalPath
from pathlex.models import Normal
from pathlex.models import PathLike
from pathlex.models import RootDir


def raw_text(path: LexicalPath | PathLike) -> str:
    """Return the string form used by the string-based helpers.

    Strings keep their exact spelling (trailing separators included);
    LexicalPath values are rendered, an empty one as the empty string.
    """
    if isinstance(path, LexicalPath):
        return "" if path.is_empty() else path.render()
    return os.fspath(path)


def split_extension(name: str) -> tuple[str, str | None]:
    """Split a file name into stem and extension.

    A leading dot is part of the stem, so ``.bashrc`` has no extension.
    ``foo.`` has an empty extension.
    """
    index = name.rfind(".")
    if index <= 0:
        return name, None
    return name[:index], name[index + 1 :]


def mash(
    directory: LexicalPath | PathLike, base: LexicalPath | PathLike
) -> LexicalPath:
    """Join base onto directory, stripping base's root first.

    Unlike os.path.join an absolute base does not replace directory:
    ``mash("/foo", "/bar")`` is ``/foo/bar``.
    """
    head = LexicalPath.of(directory).components
    tail = tuple(
        c for c in LexicalPath.of(base).components if not isinstance(c, RootDir)
    )
    return LexicalPath.from_components(head + tail)


def trim_first(path: LexicalPath | PathLike) -> LexicalPath:
    """Drop the first component. The root alone trims to an empty path."""
    return LexicalPath(LexicalPath.of(path).components[1:])


def trim_last(path: LexicalPath | PathLike) -> LexicalPath:
    """Drop the last component. The root alone trims to an empty path."""
    return LexicalPath(LexicalPath.of(path).components[:-1])


def trim_prefix(path: LexicalPath | PathLike, prefix: str) -> LexicalPath:
    """Remove prefix from the string form of path if it is present."""
    text = raw_text(path)
    if text.startswith(prefix):
        return LexicalPath.parse(text[len(prefix) :])
    return LexicalPath.parse(text)


def trim_suffix(path: LexicalPath | PathLike, suffix: str) -> LexicalPath:
    """Remove suffix from the string form of path if it is present."""
    text = raw_text(path)
    if suffix and text.endswith(suffix):
        return LexicalPath.parse(text[: -len(suffix)])
    return LexicalPath.parse(text)


def trim_ext(path: LexicalPath | PathLike) -> LexicalPath:
    """Remove the extension of the final segment, if it has one."""
    lexical = LexicalPath.of(path)
    if lexical.is_empty() or not isinstance(lexical.components[-1], Normal):
        return lexical

    _, extension = split_extension(lexical.components[-1].name)
    if extension is None:
        return lexical
    return trim_suffix(path, f".{extension}")
