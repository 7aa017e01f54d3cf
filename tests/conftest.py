import logging

import pytest

from taxi_fare.drive_record import DriveRecord, parse_drive_record


@pytest.fixture(autouse=True)
def clean_logging_env(monkeypatch):
    """Keep LOG_* variables from the host shell out of settings tests."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after setup_logging calls."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def make_records():
    """Factory parsing raw drive log lines into records."""

    def _make_records(lines: list[str]) -> list[DriveRecord]:
        return [parse_drive_record(line) for line in lines]

    return _make_records
