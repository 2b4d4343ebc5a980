"""Shared test fixtures."""

import pytest

from durationflex import Duration


@pytest.fixture
def one_hour():
    return Duration(3600)


@pytest.fixture
def week_and_change():
    return Duration(1_208_999)
