"""Shared fixtures for pathlex tests."""

import pytest

from pathlex.environment import StaticEnvironment


@pytest.fixture
def env():
    """Hermetic environment rooted in a fake home directory."""
    return StaticEnvironment(
        working_dir="/home/user/projects/app",
        home_dir="/home/user",
        variables={
            "PROJECT": "app",
            "DATA": "/srv/data",
            "XDG_CONFIG_HOME": "/home/user/.config",
        },
    )
