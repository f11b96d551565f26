# file: tests/conftest.py

import asyncio
import pytest
from unittest.mock import MagicMock, patch

from cmdsaga.commands.base_command import command


@pytest.fixture
def temp_config_dir(tmp_path):
    """Creates a temporary directory for config files."""
    return tmp_path


# --- Recording Command Factory ---

class Journal:
    """Collects ("execute"|"undo", name) events in the order they happen."""
    def __init__(self):
        self.events = []

    def names(self, kind):
        return [name for event, name in self.events if event == kind]


@pytest.fixture
def journal():
    return Journal()


@pytest.fixture
def make_step(journal):
    """
    Returns a factory for undoable commands that record into the journal.
    delay controls completion order; fail makes execute raise that error.
    """
    def factory(name, value=None, delay=0.0, fail=None, undoable=True):
        async def execute():
            journal.events.append(("execute", name))
            await asyncio.sleep(delay)
            if fail is not None:
                raise fail
            return name if value is None else value

        async def undo(result):
            journal.events.append(("undo", name))

        return command(execute, undo if undoable else None, name=name)
    return factory


# --- Global Mock for psutil.Process ---
# MemoryLogFilter uses a mock process during tests instead of the real one.
class MockProcess:
    def memory_info(self):
        return MagicMock(rss=100 * 1024 * 1024) # Default 100MB RSS

mock_psutil_process = MockProcess()

@pytest.fixture(scope="session", autouse=True)
def mock_psutil_process_globally():
    """Globally patches psutil.Process for all tests."""
    with patch('psutil.Process', return_value=mock_psutil_process):
        yield
