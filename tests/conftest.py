"""Shared fixtures for dotgen tests."""

import itertools

import pytest

from dotgen.core.models import EntityFactory, RenderConfig


@pytest.fixture
def counter_ids():
    """Deterministic identifier source: gen_0, gen_1, ..."""
    counter = itertools.count()
    return lambda: f"gen_{next(counter)}"


@pytest.fixture
def factory(counter_ids):
    return EntityFactory(RenderConfig(), counter_ids)
