"""Lexical path cleaning."""

from pathlex.models import Component
from pathlex.models import CurDir
from pathlex.models import LexicalPath
from pathlex.models import Normal
from pathlex.models import ParentDir
from pathlex.models import PathLike


def clean(path: LexicalPath | PathLike) -> LexicalPath:
    """Return the shortest path lexically equivalent to path.

    Purely lexical: symlinks are not resolved and the filesystem is never
    consulted. Rules applied left to right:

    1. Repeated separators collapse (handled by parsing).
    2. ``.`` elements are dropped.
    3. An inner ``..`` cancels the named segment before it.
    4. A ``..`` directly after the root is dropped.
    5. ``..`` elements leading a relative path are kept.
    6. A trailing separator is dropped unless the path is the root.

    An empty result becomes ``.``.
    """
    depth = 0
    previous: Component | None = None
    cleaned: list[Component] = []

    for component in LexicalPath.of(path).components:
        if isinstance(component, CurDir):
            continue

        if (
            isinstance(component, ParentDir)
            and depth > 0
            and not isinstance(previous, ParentDir)
        ):
            if isinstance(previous, Normal):
                depth -= 1
                cleaned.pop()
                previous = cleaned[-1] if cleaned else None
            # Anything else here is the root: nothing above it
            continue

        depth += 1
        cleaned.append(component)
        previous = component

    if not cleaned:
        cleaned.append(CurDir())

    return LexicalPath(tuple(cleaned))


def is_clean(path: LexicalPath | PathLike) -> bool:
    """Check whether path is already in its clean form."""
    lexical = LexicalPath.of(path)
    return clean(lexical) == lexical

