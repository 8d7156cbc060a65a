"""Lexical path resolution: clean, expand, absolutize and relativize paths."""

from loguru import logger

from pathlex.environment import Environment
from pathlex.environment import StaticEnvironment
from pathlex.environment import SystemEnvironment
from pathlex.lexical import base
from pathlex.lexical import clean
from pathlex.lexical import concat
from pathlex.lexical import dirname
from pathlex.lexical import ext
from pathlex.lexical import first
from pathlex.lexical import has
from pathlex.lexical import has_prefix
from pathlex.lexical import has_suffix
from pathlex.lexical import last
from pathlex.lexical import mash
from pathlex.lexical import name
from pathlex.lexical import trim_ext
from pathlex.lexical import trim_first
from pathlex.lexical import trim_last
from pathlex.lexical import trim_prefix
from pathlex.lexical import trim_suffix
from pathlex.models import CurDir
from pathlex.models import LexicalPath
from pathlex.models import Normal
from pathlex.models import ParentDir
from pathlex.models import RootDir
from pathlex.operations import abs_from
from pathlex.operations import abs_path
from pathlex.operations import expand
from pathlex.operations import parse_paths
from pathlex.operations import relative_from
from pathlex.operations import trim_protocol

__version__ = "0.1.0"

logger.disable("pathlex")

__all__ = [
    "CurDir",
    "Environment",
    "LexicalPath",
    "Normal",
    "ParentDir",
    "RootDir",
    "StaticEnvironment",
    "SystemEnvironment",
    "abs_from",
    "abs_path",
    "base",
    "clean",
    "concat",
    "dirname",
    "expand",
    "ext",
    "first",
    "has",
    "has_prefix",
    "has_suffix",
    "last",
    "mash",
    "name",
    "parse_paths",
    "relative_from",
    "trim_ext",
    "trim_first",
    "trim_last",
    "trim_prefix",
    "trim_protocol",
    "trim_suffix",
]
