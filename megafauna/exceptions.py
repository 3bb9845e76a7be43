"""Megafauna exception hierarchy.

Centralised base classes so callers can catch the whole family with
``except MegafaunaError`` or narrow down to the failure they care about.
Malformed input always surfaces as one of these; nothing in the core
recovers from them.
"""


class MegafaunaError(Exception):
    """Root of all Megafauna domain exceptions."""


class GeneticsError(MegafaunaError):
    """Genome construction or DNA classification failure."""


class InvalidDNALetterError(GeneticsError, ValueError):
    """A genome spec contained a character that is not a DNA letter."""

    def __init__(self, letter: str, spec: str = ""):
        self.letter = letter
        self.spec = spec
        if spec:
            message = f"{letter!r} is not a valid DNA letter (in spec {spec!r})"
        else:
            message = f"{letter!r} is not a valid DNA letter"
        super().__init__(message)


class InvalidNicheSpecError(MegafaunaError, ValueError):
    """A niche spec was neither SIZE, a player dentition, nor a DNA letter."""

    def __init__(self, spec: str):
        self.spec = spec
        super().__init__(f"{spec!r} is not a valid niche spec")


class AnimalError(MegafaunaError, ValueError):
    """An animal was built with attributes outside the game's rules."""


class BoardError(MegafaunaError):
    """Errors querying or mutating the board."""


class InvalidLatitudeKeyError(BoardError, KeyError):
    """Lookup against a latitude key the board does not know."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"invalid latitude key: {self.key!r}"


class UnknownHabitatError(BoardError, KeyError):
    """Lookup against a habitat key the board does not know."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"unknown habitat: {self.key!r}"


class TileError(MegafaunaError):
    """Errors in tile definitions handed over by the loaders."""


class InvalidTileError(TileError, ValueError):
    """A tile is structurally inconsistent (e.g. both biome and immigrant)."""


class ContestError(MegafaunaError):
    """A contest was set up with input outside the game's rules."""


class ConfigurationError(MegafaunaError):
    """Invalid or missing configuration."""
