"""Component access operations."""

from pathlex.exceptions import ComponentNotFoundError
from pathlex.models import Component
from pathlex.models import LexicalPath
from pathlex.models import PathLike


def first(path: LexicalPath | PathLike) -> Component:
    """Return the first component of path.

    Raises:
        ComponentNotFoundError: If path has no components
    """
    lexical = LexicalPath.of(path)
    if lexical.is_empty():
        raise ComponentNotFoundError(path)
    return lexical.components[0]


def last(path: LexicalPath | PathLike) -> Component:
    """Return the last component of path.

    Raises:
        ComponentNotFoundError: If path has no components
    """
    lexical = LexicalPath.of(path)
    if lexical.is_empty():
        raise ComponentNotFoundError(path)
    return lexical.components[-1]
