"""Pytest configuration for the cancellation test suite."""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterator

import pytest

from currents_cancel.base.http import close_all_clients
from currents_cancel.base.timeouts import reset_timeout_config
from currents_cancel.tests.utils import API_URL, GITHUB_RUN_ATTEMPT, GITHUB_RUN_ID, RecordingReporter


@pytest.fixture(autouse=True)
def clean_http_pool() -> Iterator[None]:
    """Start and end every test with an empty client pool and timeout cache."""
    close_all_clients()
    reset_timeout_config()
    yield
    close_all_clients()
    reset_timeout_config()


@pytest.fixture()
def no_sleep(monkeypatch: pytest.MonkeyPatch) -> list:
    """Replace ``time.sleep`` and collect the requested delays."""
    delays: list = []
    monkeypatch.setattr(time, "sleep", delays.append)
    return delays


@pytest.fixture()
def action_env() -> Dict[str, str]:
    return {
        "INPUT_CURRENTS-API-URL": API_URL,
        "INPUT_BEARER-TOKEN": "bearer-token",
        "INPUT_GITHUB-RUN-ID": GITHUB_RUN_ID,
        "INPUT_GITHUB-RUN-ATTEMPT": GITHUB_RUN_ATTEMPT,
    }


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture(autouse=True)
def reset_currents_logger() -> Iterator[None]:
    """Drop the managed console handler so no test writes to a stale stream."""
    yield
    base = logging.getLogger("currents")
    for handler in list(base.handlers):
        base.removeHandler(handler)
    base.setLevel(logging.NOTSET)
    base.propagate = True
