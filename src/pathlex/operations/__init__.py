"""Resolution operations that consult the environment."""

from pathlex.operations.absolute import DEFAULT_SCHEMES
from pathlex.operations.absolute import abs_path
from pathlex.operations.absolute import trim_protocol
from pathlex.operations.expand import expand
from pathlex.operations.filesystem import all_files
from pathlex.operations.filesystem import dirs
from pathlex.operations.filesystem import exists
from pathlex.operations.filesystem import files
from pathlex.operations.filesystem import is_dir
from pathlex.operations.filesystem import is_file
from pathlex.operations.filesystem import is_symlink
from pathlex.operations.filesystem import paths
from pathlex.operations.filesystem import readlink
from pathlex.operations.relative import abs_from
from pathlex.operations.relative import relative_from
from pathlex.operations.search_paths import parse_paths

__all__ = [
    "DEFAULT_SCHEMES",
    "abs_from",
    "abs_path",
    "all_files",
    "dirs",
    "exists",
    "expand",
    "files",
    "is_dir",
    "is_file",
    "is_symlink",
    "parse_paths",
    "paths",
    "readlink",
    "relative_from",
    "trim_protocol",
]
