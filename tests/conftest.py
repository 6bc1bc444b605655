from datetime import date

import pytest

from checklist.config import ENV_VAR, Config
from checklist.models import Task


@pytest.fixture
def checklist_file(tmp_path):
    """Backing file path inside tmp_path. Not created until written."""
    return tmp_path / "checklist.csv"


@pytest.fixture
def config(checklist_file):
    return Config(file_path=checklist_file)


@pytest.fixture
def checklist_env(monkeypatch, checklist_file):
    """Point CHECKLIST_FILE at the per-test backing file."""
    monkeypatch.setenv(ENV_VAR, str(checklist_file))
    return checklist_file


@pytest.fixture
def sample_tasks():
    return [
        Task("buy-milk", date(2024, 1, 10)),
        Task("water-plants", date(2024, 1, 1), interval=7),
        Task("file taxes", date(2024, 4, 15), checked=True),
    ]
