"""Search path list parsing."""

from pathlex.environment import Environment
from pathlex.environment import default_environment
from pathlex.lexical.clean import clean
from pathlex.models import LexicalPath

LIST_SEPARATOR = ":"


def parse_paths(value: str, env: Environment | None = None) -> list[LexicalPath]:
    """Split a ``:``-separated list such as $PATH or $XDG_DATA_DIRS.

    Following unix shell semantics an empty element means the current
    working directory.
    """
    if env is None:
        env = default_environment()

    paths = []
    for element in value.split(LIST_SEPARATOR):
        if element:
            paths.append(LexicalPath.parse(element))
        else:
            paths.append(clean(env.cwd()))
    return paths
