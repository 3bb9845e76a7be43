"""Shared utilities."""

from megafauna.util.rng import MissingRNGError, require_rng_param, shuffle

__all__ = [
    "MissingRNGError",
    "require_rng_param",
    "shuffle",
]
