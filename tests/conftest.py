"""Shared pytest fixtures and test helpers for docfactory tests."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from docfactory import IsoTimeCodec


class Starbuck:
    """Entity type whose constructor populates a field."""

    def __init__(self) -> None:
        self.ammo = {"rear": 948, "front": 2344}


class Viper:
    """Slotted entity type."""

    __slots__ = ("callsign", "kills")

    def __init__(self) -> None:
        self.callsign = None
        self.kills = 0


def make_location_factory() -> SimpleNamespace:
    """A nested converter that tags values with their direction."""
    return SimpleNamespace(
        to_json=lambda value: f"myJSONlocation {value}",
        from_json=lambda value: f"myEntityLocation {value}",
    )


@pytest.fixture
def location_factory() -> SimpleNamespace:
    """Provide a direction-tagging nested converter."""
    return make_location_factory()


@pytest.fixture
def codec() -> IsoTimeCodec:
    """Provide the built-in ISO time codec."""
    return IsoTimeCodec()
