"""Shared fixtures for the chatlayout tests."""
import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.output import DummyOutput

from chatlayout import config


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    """Keep log files out of the home directory."""
    logs = tmp_path / "logs"
    monkeypatch.setattr(config, "LOGS_DIR", logs)
    return logs


@pytest.fixture
def terminal():
    """Send prompt_toolkit output to a dummy terminal."""
    with create_app_session(output=DummyOutput()) as session:
        yield session
