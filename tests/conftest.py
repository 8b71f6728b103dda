import pytest

from mdtodo.lib import config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point the config directory at a temp dir so ~/.mdtodo is never read.

    Yields the config directory; tests that need settings write config.yaml
    into it and call config.clear_cache().
    """
    home = tmp_path / ".mdtodo"
    monkeypatch.setenv("MDTODO_HOME", str(home))
    monkeypatch.delenv("MDTODO_FILE", raising=False)
    config.clear_cache()

    yield home

    config.clear_cache()


@pytest.fixture
def todo_file(tmp_path):
    return tmp_path / "todo.md"
