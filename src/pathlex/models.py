"""Data models for pathlex."""

import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

SEPARATOR = "/"
CURRENT_DIR = "."
PARENT_DIR = ".."


@dataclass(frozen=True)
class Component:
    """One atomic unit of a path."""

    @property
    def text(self) -> str:
        """Native string form of this component."""
        raise NotImplementedError


@dataclass(frozen=True)
class RootDir(Component):
    """The platform separator at position 0 of an absolute path."""

    @property
    def text(self) -> str:
        return SEPARATOR


@dataclass(frozen=True)
class CurDir(Component):
    """The current directory symbol."""

    @property
    def text(self) -> str:
        return CURRENT_DIR


@dataclass(frozen=True)
class ParentDir(Component):
    """The parent directory symbol."""

    @property
    def text(self) -> str:
        return PARENT_DIR


@dataclass(frozen=True)
class Normal(Component):
    """A named segment."""

    name: str

    def __post_init__(self) -> None:
        if not self.name or SEPARATOR in self.name:
            raise ValueError(f"Invalid path segment: {self.name!r}")

    @property
    def text(self) -> str:
        return self.name


PathLike = str | os.PathLike[str]


@dataclass(frozen=True)
class LexicalPath:
    """An immutable, ordered sequence of path components.

    The value never touches the filesystem. ``RootDir`` may only appear as
    the first component; a path is absolute iff it starts with one.
    """

    components: tuple[Component, ...] = ()

    def __post_init__(self) -> None:
        for index, component in enumerate(self.components):
            if isinstance(component, RootDir) and index > 0:
                raise ValueError("RootDir may only be the first component")

    @classmethod
    def parse(cls, text: str) -> Self:
        """Split a native path string into components.

        Consecutive separators collapse into one boundary and a trailing
        separator is ignored. A ``.`` is only kept when it leads a relative
        path, so ``./a`` keeps it while ``a/./b`` and ``/.`` do not.
        """
        components: list[Component] = []
        if text.startswith(SEPARATOR):
            components.append(RootDir())

        for part in text.split(SEPARATOR):
            if not part:
                continue
            if part == CURRENT_DIR:
                if not components:
                    components.append(CurDir())
            elif part == PARENT_DIR:
                components.append(ParentDir())
            else:
                components.append(Normal(part))

        return cls(tuple(components))

    @classmethod
    def of(cls, path: "LexicalPath | PathLike") -> Self:
        """Coerce a string, os.PathLike or LexicalPath into a LexicalPath."""
        if isinstance(path, cls):
            return path
        return cls.parse(os.fspath(path))

    @classmethod
    def from_components(cls, components: Iterable[Component]) -> Self:
        """Build a path from components.

        Any CurDir or RootDir that is not the first component is dropped,
        which is what concatenating two component sequences needs.
        """
        kept: list[Component] = []
        for component in components:
            if isinstance(component, CurDir) and kept:
                continue
            if isinstance(component, RootDir) and kept:
                continue
            kept.append(component)
        return cls(tuple(kept))

    def render(self) -> str:
        """Join components with exactly one separator."""
        if not self.components:
            return CURRENT_DIR
        if isinstance(self.components[0], RootDir):
            return SEPARATOR + SEPARATOR.join(c.text for c in self.components[1:])
        return SEPARATOR.join(c.text for c in self.components)

    def is_absolute(self) -> bool:
        return bool(self.components) and isinstance(self.components[0], RootDir)

    def is_empty(self) -> bool:
        return not self.components

    def __str__(self) -> str:
        return self.render()

    def __fspath__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self):
        return iter(self.components)
