"""Shared test fixtures for goproj.

Provides:
- projects_dir: Temporary base directory for new projects
- config: GoprojConfig pointing at projects_dir
- make_runner: Recording CommandRunner stand-in (no subprocesses)
- make_provisioner: Factory for Provisioners wired to the fakes
- cli_env: Environment isolating the CLI from the real home directory
- mock_go: pytest-subprocess fixture pre-configured for go/git commands
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from goproj.core.config import GoprojConfig
from goproj.core.provisioner import Provisioner
from goproj.core.runner import CommandFailedError


class FakeRunner:
    """Records commands and mimics their effect on the project directory.

    Args:
        fail_on: Command prefix that should fail, e.g. ("go", "mod")
    """

    def __init__(self, fail_on=None):
        self.fail_on = tuple(fail_on) if fail_on else None
        self.calls = []

    def run(self, working_dir, program, *args):
        cmd = (program,) + tuple(args)
        self.calls.append((Path(working_dir), cmd))

        if self.fail_on and cmd[:len(self.fail_on)] == self.fail_on:
            raise CommandFailedError(
                f"Command failed with exit status 1: {' '.join(cmd)}",
                program,
                returncode=1,
            )

        if cmd[:3] == ("go", "mod", "init"):
            (Path(working_dir) / "go.mod").write_bytes(f"module {cmd[3]}\n\ngo 1.22\n".encode())
        elif cmd[:2] == ("git", "init"):
            (Path(working_dir) / ".git" / "objects").mkdir(parents=True)
        elif cmd[:2] == ("go", "get"):
            (Path(working_dir) / "go.sum").write_bytes(b"")

    @property
    def commands(self):
        return [cmd for _, cmd in self.calls]


@pytest.fixture
def projects_dir(tmp_path):
    """Base directory for projects (created, empty)."""
    base = tmp_path / "projects"
    base.mkdir()
    return base


@pytest.fixture
def config(projects_dir):
    """Config rooted at the temp projects directory."""
    return GoprojConfig(projects_dir=str(projects_dir))


@pytest.fixture
def make_runner():
    """The FakeRunner class, for building runners with custom failures."""
    return FakeRunner


@pytest.fixture
def make_provisioner(config):
    """Build a Provisioner with fake collaborators.

    Returns a factory taking runner, confirm answer and a message list.
    """
    def factory(runner=None, confirm=False, messages=None):
        return Provisioner(
            config=config,
            runner=runner or FakeRunner(),
            confirm_overwrite=lambda path: confirm,
            reporter=messages.append if messages is not None else None,
        )
    return factory


@pytest.fixture
def cli_env(tmp_path, projects_dir):
    """Environment for CliRunner: temp projects dir, no user config."""
    return {
        "GOPROJ_PROJECTS_DIR": str(projects_dir),
        "GOPROJ_CONFIG": str(tmp_path / "no-config.json"),
    }


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def mock_go(fp):
    """Mock go/git commands for a project named demo.

    Pre-registers the happy path. Use `fp` directly for custom
    subprocess mocking in individual tests.
    """
    fp.register(["go", "mod", "init", "demo"])
    fp.register(["git", "init"])
    fp.register(["go", "get", "github.com/spf13/cobra"])
    return fp
