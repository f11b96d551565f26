# file: tests/test_logger.py

import logging
import pytest
from unittest.mock import MagicMock
from cmdsaga.utils.logger import setup_logging, MemoryLogFilter
from pathlib import Path

@pytest.fixture
def mock_config_loader(tmp_path: Path):
    loader = MagicMock()
    loader.get_config.return_value = {
        "logging": {"level": "DEBUG", "log_to_file": True, "log_file": "test.log"}
    }
    loader.get_data_dir.return_value = tmp_path
    return loader

# Fixture to ensure logging is reset for each test
@pytest.fixture(autouse=True)
def reset_logging_handlers():
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    root_logger.handlers = []
    yield
    for handler in root_logger.handlers:
        if handler not in original_handlers:
            handler.close()
    root_logger.handlers = original_handlers
    root_logger.setLevel(original_level)

def test_memory_log_filter_injects_memory_info():
    """Test that MemoryLogFilter correctly injects memory RSS into log records."""
    # psutil.Process is globally mocked by conftest.py to report 100MB
    log_filter = MemoryLogFilter()
    record = logging.LogRecord("name", logging.INFO, "file", 1, "msg", (), None)

    assert log_filter.filter(record) is True
    assert record.mem_rss_mb == 100.0  # type: ignore[attr-defined]

def test_setup_logging_installs_console_and_file_handlers(mock_config_loader, tmp_path):
    setup_logging(mock_config_loader)

    root_logger = logging.getLogger()
    app_handlers = [
        h for h in root_logger.handlers
        if h.get_name() in ["cmdsaga_console_handler", "cmdsaga_file_handler"]
    ]

    assert len(app_handlers) == 2
    for handler in app_handlers:
        assert any(isinstance(f, MemoryLogFilter) for f in handler.filters)
    assert root_logger.level == logging.DEBUG
    assert (tmp_path / "logs" / "test.log").exists()

def test_setup_logging_without_file_handler(mock_config_loader, tmp_path):
    mock_config_loader.get_config.return_value = {"logging": {"level": "WARNING"}}

    setup_logging(mock_config_loader)

    names = [h.get_name() for h in logging.getLogger().handlers if (h.get_name() or "").startswith("cmdsaga")]
    assert names == ["cmdsaga_console_handler"]
    assert not (tmp_path / "logs").exists()

def test_setup_logging_is_idempotent(mock_config_loader):
    setup_logging(mock_config_loader)
    setup_logging(mock_config_loader)

    names = [h.get_name() for h in logging.getLogger().handlers if (h.get_name() or "").startswith("cmdsaga")]
    assert sorted(names) == ["cmdsaga_console_handler", "cmdsaga_file_handler"]

def test_setup_logging_format_includes_memory(mock_config_loader, caplog):
    caplog.set_level(logging.DEBUG)
    setup_logging(mock_config_loader)

    console = next(h for h in logging.getLogger().handlers if h.get_name() == "cmdsaga_console_handler")
    caplog.handler.setFormatter(console.formatter)
    caplog.handler.addFilter(MemoryLogFilter())

    logging.getLogger("test_logger").debug("This is a test log message.")

    assert "[100.0MB]" in caplog.text
    assert "This is a test log message." in caplog.text
