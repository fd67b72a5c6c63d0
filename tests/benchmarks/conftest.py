"""conftest.py for benchmarks.

The ``event_loop`` fixture is session-scoped so every benchmark shares a
single asyncio event loop and flow calls are timed without loop start-up
cost.
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def event_loop():
    """Session-scoped event loop shared by all flow benchmarks."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()
