"""Shared pytest fixtures for diconstruct tests."""

import pytest

from diconstruct.container import Container
from diconstruct.lock_mode import LockMode


@pytest.fixture()
def container() -> Container:
    """Default unlocked container."""
    return Container()


@pytest.fixture()
def container_threaded() -> Container:
    """Container guarded by a re-entrant thread lock."""
    return Container(lock_mode=LockMode.THREAD)
