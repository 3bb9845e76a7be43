"""Result type for explicit success/failure handling.

The public operations of the package (``make_genome``, ``make_niche``,
``find_lowest_climax``, ``place_tile``) return a Result instead of raising,
so the caller has to look at the outcome before using it. The classes
underneath still raise; these helpers convert at the boundary.

Usage:
------
    result = make_genome("BBG")
    if result.is_ok():
        genome = result.unwrap()
    else:
        error = result.error  # an InvalidDNALetterError

    match result:
        case Ok(genome):
            ...
        case Err(error):
            ...

    genome = result.unwrap_or(EMPTY_GENOME)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Tuple, Type, TypeVar, Union

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Transformed value type
F = TypeVar("F")  # Transformed error type


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Represents a successful operation result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the success value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self.value

    @property
    def error(self) -> None:
        """Ok has no error, returns None."""
        return None

    def map(self, f: Callable[[T], U]) -> "Ok[U]":
        """Transform the success value.

        Example:
            make_genome("BB").map(lambda g: g.count_of("B"))  # Ok(2)
        """
        return Ok(f(self.value))

    def map_err(self, f: Callable[[E], F]) -> "Ok[T]":
        return self

    def and_then(self, f: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Chain another Result-returning operation."""
        return f(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """Represents a failed operation result.

    The error is the typed exception instance, not just its message, so the
    caller can still dispatch on its class or re-raise it.
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Re-raise the carried exception since Err has no success value.

        Don't call this without checking is_ok() first!
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return f()

    @property
    def value(self) -> None:
        """Err has no value, returns None."""
        return None

    def map(self, f: Callable[[T], U]) -> "Err[E]":
        return self

    def map_err(self, f: Callable[[E], F]) -> "Err[F]":
        """Transform the error."""
        return Err(f(self.error))

    def and_then(self, f: Callable[[T], "Result[U, E]"]) -> "Err[E]":
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Result is a union of Ok and Err
Result = Union[Ok[T], Err[E]]


def try_result(
    f: Callable[[], T],
    error_type: Union[Type[BaseException], Tuple[Type[BaseException], ...]] = Exception,
) -> Result[T, BaseException]:
    """Convert a potentially-raising call to a Result.

    Only ``error_type`` is captured; anything else propagates, so a bug in
    the core is never mistaken for a rejected input.

    Example:
        try_result(lambda: Genome.from_spec("BXG"), InvalidDNALetterError)
        # Err(InvalidDNALetterError("'X' is not a valid DNA letter ..."))
    """
    try:
        return Ok(f())
    except error_type as e:
        return Err(e)
