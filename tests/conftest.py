"""Общие фикстуры тестов."""

import logging
import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from resource_lifecycle.counters import DEFAULT_COUNTERS


@pytest.fixture(autouse=True)
def quiet_logging():
    """Глушим трассу в выводе тестов, если тест сам её не перехватывает."""
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def fresh_counters():
    """Каждый тест начинается с обнулённых процессных счётчиков."""
    DEFAULT_COUNTERS.reset()
    yield DEFAULT_COUNTERS
    DEFAULT_COUNTERS.reset()
