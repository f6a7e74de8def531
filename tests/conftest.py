"""Pytest configuration and fixtures for rcon-shell tests."""

import pytest

from rconshell.grammar import ArgumentSpec, CommandRegistry, CommandSpec, build_registry
from test_helpers import SAMPLE_LISTING, FakeClient


@pytest.fixture
def sample_registry():
    """Registry built from a listing with choices, aliases, and run-on lines."""
    return build_registry(SAMPLE_LISTING)


@pytest.fixture
def time_registry():
    """Registry holding only /time with a leading choice argument."""
    return CommandRegistry(
        [
            CommandSpec(
                "/time",
                (ArgumentSpec.required_choice(["add", "query", "set"]),),
            )
        ]
    )


@pytest.fixture
def fake_client():
    return FakeClient({"/help": SAMPLE_LISTING, "/list": "There are 0 of a max of 20 players online:"})
