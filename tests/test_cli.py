"""Tests for the pathlex command line."""

import json

import pytest
from loguru import logger
from typer.testing import CliRunner

from pathlex import __version__
from pathlex.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo the logging setup each CLI run performs."""
    yield
    logger.remove()
    logger.disable("pathlex")


@pytest.fixture
def invoke(tmp_path, monkeypatch):
    """Run the CLI from a scratch directory with a scratch config."""
    home = tmp_path / "home"
    work = home / "work"
    work.mkdir(parents=True)
    monkeypatch.chdir(work)
    monkeypatch.setenv("HOME", str(home))
    config = tmp_path / "config.json"

    def run(*args: str):
        return runner.invoke(app, ["--config", str(config), *args])

    run.home = home
    run.work = work
    run.config = config
    return run


class TestVersion:
    """Tests for --version."""

    def test_prints_version(self):
        """Test that --version prints and exits cleanly."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"pathlex {__version__}" in result.output


class TestLexicalCommands:
    """Tests for commands that need no environment."""

    def test_clean(self, invoke):
        """Test that clean prints the cleaned path."""
        result = invoke("clean", "foo//bar/../baz/")

        assert result.exit_code == 0
        assert result.output.strip() == "foo/baz"

    def test_mash(self, invoke):
        """Test that mash strips the root of the second path."""
        result = invoke("mash", "/foo", "/bar")

        assert result.output.strip() == "/foo/bar"

    def test_split(self, invoke):
        """Test that split prints one component per line."""
        result = invoke("split", "/foo/../bar")

        assert result.output.splitlines() == ["/", "foo", "..", "bar"]

    def test_trim_ext(self, invoke):
        """Test trimming an extension."""
        result = invoke("trim", "--ext", "archive.tar.gz")

        assert result.output.strip() == "archive.tar"

    def test_trim_first_and_prefix(self, invoke):
        """Test the component and string trimming options."""
        assert invoke("trim", "--first", "/foo/bar").output.strip() == "foo/bar"
        assert invoke("trim", "--prefix", "/foo", "/foo/bar").output.strip() == (
            "/bar"
        )

    def test_trim_requires_exactly_one_option(self, invoke):
        """Test that trim refuses zero or several options."""
        assert invoke("trim", "/foo").exit_code != 0
        assert invoke("trim", "--first", "--last", "/foo").exit_code != 0

    def test_info(self, invoke):
        """Test that info shows each part, with a dash when missing."""
        result = invoke("info", "/srv/app.tar.gz")

        assert result.exit_code == 0
        assert "base: app.tar.gz" in result.output
        assert "dir:  /srv" in result.output
        assert "ext:  gz" in result.output
        assert "name: app.tar" in result.output

        result = invoke("info", "/")
        assert "ext:  -" in result.output


class TestResolutionCommands:
    """Tests for commands that consult the environment."""

    def test_abs_relative_path(self, invoke):
        """Test that abs resolves against the working directory."""
        result = invoke("abs", "../notes")

        assert result.exit_code == 0
        assert result.output.strip() == str(invoke.home / "notes")

    def test_abs_tilde_display(self, invoke):
        """Test that --tilde shows home-relative results with ~."""
        result = invoke("abs", "--tilde", "notes")

        assert result.output.strip() == "~/work/notes"

    def test_abs_error(self, invoke):
        """Test that path errors exit with 1 and a message."""
        result = invoke("abs", "~/foo~")

        assert result.exit_code == 1
        assert "multiple home symbols" in result.output

    def test_expand(self, invoke, monkeypatch):
        """Test that expand substitutes variables."""
        monkeypatch.setenv("PATHLEX_PROJECT", "demo")

        result = invoke("expand", "/srv/$PATHLEX_PROJECT")

        assert result.output.strip() == "/srv/demo"

    def test_expand_missing_variable(self, invoke, monkeypatch):
        """Test that a missing variable is reported."""
        monkeypatch.delenv("PATHLEX_MISSING", raising=False)

        result = invoke("expand", "/srv/$PATHLEX_MISSING")

        assert result.exit_code == 1
        assert "PATHLEX_MISSING" in result.output

    def test_relative(self, invoke):
        """Test that relative prints the path relative to the base file."""
        result = invoke("relative", "foo1/bar1", "foo2/bar2")

        assert result.output.strip() == "../foo1/bar1"

    def test_abs_from(self, invoke):
        """Test that abs-from resolves against the base's directory."""
        result = invoke("abs-from", "../style.css", "/srv/www/html/index.html")

        assert result.output.strip() == "/srv/www/style.css"


class TestConfig:
    """Tests for --config handling."""

    def test_configured_schemes(self, invoke):
        """Test that schemes from the config file are stripped."""
        invoke.config.write_text(json.dumps({"version": 1, "schemes": ["s3"]}))

        result = invoke("abs", "s3:///bucket/key")

        assert result.output.strip() == "/bucket/key"

    def test_invalid_config(self, invoke):
        """Test that a broken config aborts with exit code 1."""
        invoke.config.write_text("{broken")

        result = invoke("clean", "foo")

        assert result.exit_code == 1
        assert "Config error" in result.output

    def test_unreadable_config(self, invoke):
        """Test that a binary config file is reported, not a traceback."""
        invoke.config.write_bytes(b"\xff\xfe\x00\x81")

        result = invoke("clean", "foo")

        assert result.exit_code == 1
        assert "Config error" in result.output

    def test_verbose_logs_resolution(self, invoke):
        """Test that --verbose writes debug logs."""
        result = runner.invoke(
            app, ["--config", str(invoke.config), "--verbose", "abs", "foo"]
        )

        assert result.exit_code == 0
        assert "Resolved" in result.output
