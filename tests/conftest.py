"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from assetpipe.cli.main import cli


@pytest.fixture(autouse=True)
def clear_assetpipe_env(monkeypatch):
    """Keep the developer's environment from leaking into tests."""
    monkeypatch.delenv("ASSETPIPE_PACKAGE", raising=False)
    monkeypatch.delenv("ASSETPIPE_LOG_LEVEL", raising=False)


@pytest.fixture
def runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project root with package.json and two stylesheets.

    Layout:
        package.json        {"name": "mypkg"}
        _assets/css/a.css   .a { color: red; }
        _assets/css/b.css   .b { color: blue; }
    """
    (tmp_path / "package.json").write_text(json.dumps({"name": "mypkg", "version": "1.0.0"}))
    src = tmp_path / "_assets" / "css"
    src.mkdir(parents=True)
    (src / "a.css").write_text(".a { color: red; }\n")
    (src / "b.css").write_text(".b { color: blue; }\n")
    return tmp_path


@pytest.fixture
def invoke(runner, project):
    """Invoke the CLI rooted at the ``project`` fixture.

    Usage:
        result = invoke(["build"])
        result = invoke(["build", "--only", "minify"])
    """

    def _invoke(args, root=None):
        return runner.invoke(cli, ["--root", str(root or project), *args])

    return _invoke
