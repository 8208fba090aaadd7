"""Tests for the history refresh scheduler."""
import logging
from unittest.mock import MagicMock

from marketplace_backend.infrastructure.scheduler import refresh_histories, setup_scheduler


def test_scheduler_registers_daily_refresh():
    service = MagicMock()
    scheduler = setup_scheduler(service, hour=3)

    job = scheduler.get_job("refresh_histories")
    assert job is not None
    assert job.args == (service,)
    assert "hour='3'" in str(job.trigger)


def test_refresh_histories_calls_service():
    service = MagicMock()
    service.refresh.return_value = 15

    refresh_histories(service)

    service.refresh.assert_called_once()


def test_refresh_histories_logs_errors(caplog):
    service = MagicMock()
    service.refresh.side_effect = RuntimeError("boom")

    with caplog.at_level(logging.ERROR, logger="marketplace_backend.infrastructure.scheduler"):
        refresh_histories(service)

    service.refresh.assert_called_once()
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "boom" in errors[0].getMessage()
