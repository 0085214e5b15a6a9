from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from loguru import logger as loguru_logger

import spotify_catalog
from spotify_catalog.utils import LoggingOptions, configure_logging, get_logger

HOST_SCRIPT = """
from loguru import logger
received = []
logger.add(lambda message: received.append(message), level="INFO")
import spotify_catalog
logger.info("host message")
print("HOST_SINK_RECEIVED", len(received))
"""


@pytest.fixture
def restore_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    loguru_logger.remove()
    loguru_logger.add(sys.stderr)


def test_import_keeps_host_loguru_sinks() -> None:
    src_dir = Path(spotify_catalog.__file__).resolve().parents[1]
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [str(src_dir), env.get("PYTHONPATH")])
    )

    completed = subprocess.run(
        [sys.executable, "-c", HOST_SCRIPT],
        capture_output=True,
        text=True,
        env=env,
        check=True,
    )

    assert "HOST_SINK_RECEIVED 1" in completed.stdout


def test_get_logger_does_not_install_sinks() -> None:
    received: list[str] = []
    sink_id = loguru_logger.add(received.append, level="INFO")
    try:
        get_logger("spotify_catalog.tests")
        loguru_logger.info("host message")
    finally:
        loguru_logger.remove(sink_id)

    assert len(received) == 1
    assert "host message" in received[0]


def test_configure_logging_routes_events_to_loguru(restore_logging: None) -> None:
    path = configure_logging(LoggingOptions(level="INFO", log_to_file=False))
    received: list[str] = []
    loguru_logger.add(received.append, level="INFO", format="{message} {extra}")

    get_logger("spotify_catalog.tests").warning("Token issued", expires_in=3600)

    assert path is None
    assert len(received) == 1
    assert "Token issued" in received[0]
    assert "3600" in received[0]
