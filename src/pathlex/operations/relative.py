"""Conversion between absolute and relative paths."""

from collections.abc import Collection
from itertools import zip_longest

from loguru import logger

from pathlex.environment import Environment
from pathlex.exceptions import EmptyPathError
from pathlex.exceptions import ParentNotFoundError
from pathlex.lexical.clean import clean
from pathlex.lexical.join import mash
from pathlex.lexical.join import trim_last
from pathlex.models import Component
from pathlex.models import CurDir
from pathlex.models import LexicalPath
from pathlex.models import Normal
from pathlex.models import ParentDir
from pathlex.models import PathLike
from pathlex.models import RootDir
from pathlex.operations.absolute import DEFAULT_SCHEMES
from pathlex.operations.absolute import abs_path


def relative_from(
    path: LexicalPath | PathLike,
    base: LexicalPath | PathLike,
    env: Environment | None = None,
    schemes: Collection[str] = DEFAULT_SCHEMES,
) -> LexicalPath:
    """Express path relative to base.

    Both arguments are resolved with abs_path() first. The base's last
    component is treated as a file, so ``foo/bar1`` relative to
    ``foo/bar2`` is ``bar1``.

    Args:
        path: Path to relativize
        base: Path to relativize against
        env: Collaborators to consult (default: the running process)
        schemes: URI schemes whose prefix abs_path() strips

    Returns:
        The relative path, or the resolved path itself when both resolve to
        the same location or when base contains a ``..`` that makes the
        result ambiguous.
    """
    target = abs_path(path, env, schemes)
    anchor = abs_path(base, env, schemes)
    if target == anchor:
        return target

    target_parts = iter(target.components)
    anchor_parts = iter(anchor.components)
    result: list[Component] = []

    for ours, theirs in zip_longest(target_parts, anchor_parts):
        if ours is None:
            # Target ran out first: climb out of what is left of base
            result.append(ParentDir())
        elif theirs is None:
            result.append(ours)
            result.extend(target_parts)
            break
        elif not result and ours == theirs:
            continue
        elif isinstance(theirs, CurDir):
            result.append(ours)
        elif isinstance(theirs, ParentDir):
            logger.debug(
                "Cannot relativize {} against ambiguous base {}", target, anchor
            )
            return target
        else:
            result.extend(ParentDir() for _ in anchor_parts)
            result.append(ours)
            result.extend(target_parts)
            break

    return LexicalPath(tuple(result))


def abs_from(
    path: LexicalPath | PathLike,
    base: LexicalPath | PathLike,
    env: Environment | None = None,
    schemes: Collection[str] = DEFAULT_SCHEMES,
) -> LexicalPath:
    """Resolve a relative path against the file base.

    The base is resolved with abs_path() and its last component dropped,
    as base names a file rather than a directory. Each leading ``..`` in
    path trims one more component off the base.

    Args:
        path: Path to resolve
        base: File the path is relative to
        env: Collaborators to consult (default: the running process)
        schemes: URI schemes whose prefix abs_path() strips

    Returns:
        Clean absolute path, or path unchanged if it is already absolute or
        equal to the resolved base

    Raises:
        EmptyPathError: If base is empty, or path has no named segment
        ParentNotFoundError: If the leading ``..`` elements climb above the root
    """
    anchor = abs_path(base, env, schemes)
    lexical = LexicalPath.of(path)
    if lexical.is_absolute() or lexical == anchor:
        return lexical

    directory = trim_last(anchor) if len(anchor) > 1 else anchor
    remaining = list(lexical.components)
    while remaining:
        component = remaining.pop(0)
        if isinstance(component, ParentDir):
            if directory.components in ((), (RootDir(),)):
                raise ParentNotFoundError(path)
            directory = trim_last(directory)
        elif isinstance(component, Normal):
            return clean(mash(directory, LexicalPath((component, *remaining))))

    raise EmptyPathError(path)
