"""Shared fixtures: isolated settings and a small registry of test rules."""

import os

import pytest

from structcheck import Registry, get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop STRUCTCHECK_* variables and the cached Settings around every test."""
    for key in list(os.environ):
        if key.startswith("STRUCTCHECK_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def nonzero(value: int):
    if value == 0:
        return "should be nonzero"
    return None


def odd(value: int):
    if value & 1 == 0:
        return f"{value} is not odd"
    return None


def long(value: str):
    if len(value) < 5:
        return f'"{value}" is too short'
    return None


def short(value: str):
    if len(value) >= 5:
        return f'"{value}" is too long'
    return None


@pytest.fixture
def registry() -> Registry:
    return Registry({
        "nonzero": nonzero,
        "odd": odd,
        "long": long,
        "short": short,
    })
