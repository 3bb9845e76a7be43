"""RNG utilities for deterministic games.

The rules core never touches a process-wide RNG. Anything random (dealing,
shuffling stacks) takes an explicitly seeded ``random.Random`` so a game can
be replayed from its seed and tests stay deterministic.
"""

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but was not passed in.

    This indicates a bug in the caller's setup: every random operation must
    be handed the game's RNG.
    """

    pass


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Use this instead of silently creating an unseeded fallback.

    Raises:
        MissingRNGError: If rng is None
    """
    if rng is None:
        raise MissingRNGError(f"RNG required: {context}. Pass the game's RNG explicitly.")
    return rng


def shuffle(items: Sequence[T], rng: Optional[random.Random]) -> List[T]:
    """Return a shuffled copy of ``items``; the input is left untouched.

    Example:
        rng = random.Random(game_seed)
        stack = shuffle(mesozoic_tile_keys, rng)
    """
    rng = require_rng_param(rng, "shuffle")
    result = list(items)
    rng.shuffle(result)
    return result
