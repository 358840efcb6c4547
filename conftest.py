import pytest
from click.testing import CliRunner

from fp_todo.config import Config
from fp_todo.main import main
from fp_todo.store import ListStore


@pytest.fixture
def config(tmp_path):
    return Config(environ={"XDG_DATA_HOME": str(tmp_path)})


@pytest.fixture
def store(config):
    return ListStore(config)


@pytest.fixture
def todo(tmp_path):
    """Invoke the CLI against an isolated data directory"""
    runner = CliRunner()
    env = {"XDG_DATA_HOME": str(tmp_path), "HOME": str(tmp_path / "home")}

    def run(*args):
        return runner.invoke(main, list(args), env=env)

    return run
