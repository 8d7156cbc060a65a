"""Absolute path resolution."""

from collections.abc import Collection

from loguru import logger

from pathlex.environment import Environment
from pathlex.environment import default_environment
from pathlex.exceptions import EmptyPathError
from pathlex.lexical.clean import clean
from pathlex.lexical.join import mash
from pathlex.lexical.join import raw_text
from pathlex.lexical.names import dirname
from pathlex.models import CurDir
from pathlex.models import LexicalPath
from pathlex.models import ParentDir
from pathlex.models import PathLike
from pathlex.operations.expand import expand_text

DEFAULT_SCHEMES = ("file", "ftp", "http", "https")


def abs_path(
    path: LexicalPath | PathLike,
    env: Environment | None = None,
    schemes: Collection[str] = DEFAULT_SCHEMES,
) -> LexicalPath:
    """Resolve path to a clean absolute path.

    Steps: reject empty input, expand ~ and variables, strip a URI scheme,
    clean, then resolve anything still relative against the current
    working directory. Leading ``..`` elements walk the working directory
    up one level each.

    Args:
        path: Path to resolve
        env: Collaborators to consult (default: the running process)
        schemes: URI schemes whose ``scheme://`` prefix is stripped

    Returns:
        Clean absolute path

    Raises:
        EmptyPathError: If path is empty
        MultipleHomeSymbolsError: If path contains more than one ~
        InvalidExpansionError: If an expansion is malformed
        HomeNotFoundError: If ~ is used and the home directory is unknown
        VariableNotFoundError: If a referenced variable is not set
        ParentNotFoundError: If ``..`` walks above the root
    """
    text = raw_text(path)
    if not text:
        raise EmptyPathError()
    if env is None:
        env = default_environment()

    cleaned = clean(strip_scheme(expand_text(text, env), schemes))
    if cleaned.is_absolute():
        return cleaned

    anchor = clean(env.cwd())
    remaining = list(cleaned.components)
    while remaining:
        component = remaining[0]
        if isinstance(component, CurDir):
            remaining.pop(0)
        elif isinstance(component, ParentDir):
            anchor = dirname(anchor)
            remaining.pop(0)
        else:
            break

    resolved = mash(anchor, LexicalPath(tuple(remaining)))
    logger.debug("Resolved {!r} to {}", text, resolved)
    return resolved


def trim_protocol(
    path: LexicalPath | PathLike, schemes: Collection[str] = DEFAULT_SCHEMES
) -> LexicalPath:
    """Strip a leading ``scheme://`` from path.

    ``file:///foo`` becomes ``/foo`` and ``HTTPS://Foo`` becomes ``Foo``.
    Text that merely contains ``//`` (``foo//bar``, ``ntp:://foo``) is
    left alone.
    """
    return LexicalPath.parse(strip_scheme(raw_text(path), schemes))


def strip_scheme(text: str, schemes: Collection[str] = DEFAULT_SCHEMES) -> str:
    """String form of trim_protocol()."""
    index = text.find("//")
    if index < 0:
        return text

    prefix = text[:index].lower()
    known = {f"{scheme.lower()}:" for scheme in schemes}
    if prefix in known:
        return text[index + 2 :]
    return text
