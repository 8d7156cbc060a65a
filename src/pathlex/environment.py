"""Collaborators consulted by the resolution engine.

The engine never reads process-wide state directly. Everything it needs
from the outside world (current directory, home directory, environment
variables) comes through an ``Environment``, so resolution can run against
the real process or against fixed values.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from typing import Protocol

from pathlex.exceptions import HomeNotFoundError
from pathlex.exceptions import VariableNotFoundError


class Environment(Protocol):
    """Capabilities the engine needs from its surroundings."""

    def cwd(self) -> str:
        """Absolute current working directory.

        Raises:
            OSError: If the OS cannot report one (e.g. it was deleted)
        """
        ...

    def home(self) -> str:
        """Home directory of the current user.

        Raises:
            HomeNotFoundError: If it cannot be determined
        """
        ...

    def getenv(self, name: str) -> str:
        """Value of an environment variable.

        Raises:
            VariableNotFoundError: If the variable is not set
        """
        ...


class SystemEnvironment:
    """Environment backed by the running process."""

    def cwd(self) -> str:
        return os.getcwd()

    def home(self) -> str:
        home = os.environ.get("HOME")
        if not home:
            raise HomeNotFoundError("HOME is not set")
        return home

    def getenv(self, name: str) -> str:
        try:
            return os.environ[name]
        except KeyError:
            raise VariableNotFoundError(name) from None


@dataclass(frozen=True)
class StaticEnvironment:
    """Environment backed by fixed values.

    Useful for hermetic resolution and as a test double. A ``None`` home
    behaves like an unset ``$HOME``.
    """

    working_dir: str = "/"
    home_dir: str | None = None
    variables: Mapping[str, str] = field(default_factory=dict)

    def cwd(self) -> str:
        return self.working_dir

    def home(self) -> str:
        if self.home_dir is None:
            raise HomeNotFoundError()
        return self.home_dir

    def getenv(self, name: str) -> str:
        try:
            return self.variables[name]
        except KeyError:
            raise VariableNotFoundError(name) from None


def default_environment() -> Environment:
    """Return the environment used when callers do not pass one."""
    return SystemEnvironment()
