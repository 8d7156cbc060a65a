"""Pure lexical path operations."""

from pathlex.lexical.clean import clean
from pathlex.lexical.clean import is_clean
from pathlex.lexical.components import first
from pathlex.lexical.components import last
from pathlex.lexical.join import mash
from pathlex.lexical.join import trim_ext
from pathlex.lexical.join import trim_first
from pathlex.lexical.join import trim_last
from pathlex.lexical.join import trim_prefix
from pathlex.lexical.join import trim_suffix
from pathlex.lexical.names import base
from pathlex.lexical.names import concat
from pathlex.lexical.names import dirname
from pathlex.lexical.names import ext
from pathlex.lexical.names import has
from pathlex.lexical.names import has_prefix
from pathlex.lexical.names import has_suffix
from pathlex.lexical.names import name

__all__ = [
    "base",
    "clean",
    "concat",
    "dirname",
    "ext",
    "first",
    "has",
    "has_prefix",
    "has_suffix",
    "is_clean",
    "last",
    "mash",
    "name",
    "trim_ext",
    "trim_first",
    "trim_last",
    "trim_prefix",
    "trim_suffix",
]
