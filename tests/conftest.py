"""Pytest configuration and fixtures for megafauna tests."""

import random

import pytest

from megafauna.board import build_board
from megafauna.tiles import Tile


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def board():
    """A freshly built standard board."""
    return build_board()


@pytest.fixture
def make_biome_tile():
    """Factory for land biome tiles with sensible defaults."""

    def _make(key="B1", latitude_key="T", climax_number=3, requirements="BB", niche="Size", **kwargs):
        record = {
            "key": key,
            "latitude_key": latitude_key,
            "is_land": kwargs.pop("is_land", True),
            "is_sea": kwargs.pop("is_sea", False),
            "biome": {
                "climax_number": climax_number,
                "requirements": requirements,
                "niche": niche,
            },
        }
        record.update(kwargs)
        return Tile.from_record(record)

    return _make
