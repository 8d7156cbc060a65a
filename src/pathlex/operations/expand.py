"""Home directory and environment variable expansion."""

import re

from loguru import logger

from pathlex.environment import Environment
from pathlex.environment import default_environment
from pathlex.exceptions import InvalidExpansionError
from pathlex.exceptions import MultipleHomeSymbolsError
from pathlex.lexical.join import raw_text
from pathlex.models import SEPARATOR
from pathlex.models import LexicalPath
from pathlex.models import PathLike

HOME_SYMBOL = "~"
VARIABLE_SYMBOL = "$"
VARIABLE_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def expand(
    path: LexicalPath | PathLike, env: Environment | None = None
) -> LexicalPath:
    """Expand a leading ~ and any $NAME / ${NAME} segments in path.

    Args:
        path: Path to expand
        env: Source of the home directory and variables (default: the
            running process)

    Returns:
        The expanded path. An empty path expands to an empty path.

    Raises:
        MultipleHomeSymbolsError: If path contains more than one ~
        InvalidExpansionError: If ~ is not a leading ``~`` or ``~/``, or a
            variable reference is malformed
        HomeNotFoundError: If the home directory is needed but unknown
        VariableNotFoundError: If a referenced variable is not set
    """
    return LexicalPath.parse(expand_text(raw_text(path), env))


def expand_text(text: str, env: Environment | None = None) -> str:
    """String form of expand(), leaving separators exactly as written.

    The Absolutizer needs the raw text afterwards so a ``scheme://`` prefix
    is still recognisable.
    """
    if env is None:
        env = default_environment()

    expanded = _expand_variables(_expand_home(text, env), env)
    if expanded != text:
        logger.debug("Expanded {!r} to {!r}", text, expanded)
    return expanded


def _expand_home(text: str, env: Environment) -> str:
    count = text.count(HOME_SYMBOL)
    if count == 0:
        return text
    if count > 1:
        raise MultipleHomeSymbolsError(text)
    if text == HOME_SYMBOL:
        return env.home()
    if not text.startswith(HOME_SYMBOL + SEPARATOR):
        raise InvalidExpansionError(text)
    return env.home() + SEPARATOR + text[2:]


def _expand_variables(text: str, env: Environment) -> str:
    # Single pass: substituted values are never expanded again
    segments = text.split(SEPARATOR)
    for index, segment in enumerate(segments):
        if segment.startswith(VARIABLE_SYMBOL):
            segments[index] = env.getenv(_variable_name(segment, text))
    return SEPARATOR.join(segments)


def _variable_name(segment: str, text: str) -> str:
    """Extract NAME from a ``$NAME`` or ``${NAME}`` segment."""
    if segment.startswith("${"):
        if not segment.endswith("}"):
            raise InvalidExpansionError(text)
        name = segment[2:-1]
    else:
        name = segment[1:]

    if not VARIABLE_NAME.fullmatch(name):
        raise InvalidExpansionError(text)
    return name
