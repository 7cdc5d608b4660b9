"""Pytest configuration for the relay_providers test suite.

Adapter tests never touch the network or the process environment: config
comes from a ``MappingConfig`` and HTTP from a recording ``MockTransport``.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

import httpx
import pytest

from relay_providers.config import MappingConfig
from relay_providers.config.env import _reset_dotenv_state

from .helpers import ListHandler, RecordingTransport, completion_body


@pytest.fixture()
def sambanova_config() -> MappingConfig:
    """Store holding only the API key; every other key uses its default."""
    return MappingConfig(secrets={"SAMBANOVA_API_KEY": "sk-test"})


@pytest.fixture()
def ok_transport() -> RecordingTransport:
    """Transport answering every request with a successful completion."""
    body = completion_body(usage={"prompt_tokens": 12, "completion_tokens": 3, "total_tokens": 15})
    return RecordingTransport(lambda request: httpx.Response(200, json=body))


@pytest.fixture()
def capture_logs() -> Iterator[Callable[[str], ListHandler]]:
    """Attach list handlers to named loggers; detached at teardown."""
    attached = []

    def _attach(name: str) -> ListHandler:
        handler = ListHandler()
        logger = logging.getLogger(name)
        logger.addHandler(handler)
        attached.append((logger, handler))
        return handler

    yield _attach
    for logger, handler in attached:
        logger.removeHandler(handler)


@pytest.fixture()
def reset_dotenv() -> Iterator[None]:
    _reset_dotenv_state()
    yield
    _reset_dotenv_state()
