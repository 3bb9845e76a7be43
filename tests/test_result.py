"""Tests for the Result type."""

import pytest

from megafauna.exceptions import InvalidDNALetterError, MegafaunaError
from megafauna.genetics import Genome, make_genome
from megafauna.result import Err, Ok, try_result


class TestOk:
    """Tests for successful results."""

    def test_accessors(self):
        """Ok exposes its value."""
        result = Ok(5)
        assert result.is_ok() and not result.is_err()
        assert result.unwrap() == 5
        assert result.unwrap_or(0) == 5
        assert result.error is None

    def test_map_and_chain(self):
        """map and and_then apply to the value."""
        assert Ok(5).map(lambda x: x * 2) == Ok(10)
        assert Ok(5).and_then(lambda x: Err("negative") if x < 0 else Ok(x)) == Ok(5)
        assert Ok(5).map_err(str) == Ok(5)


class TestErr:
    """Tests for failed results."""

    def test_accessors(self):
        """Err exposes no value and falls back to defaults."""
        result = Err("nope")
        assert result.is_err() and not result.is_ok()
        assert result.value is None
        assert result.unwrap_or(3) == 3
        assert result.unwrap_or_else(lambda: 4) == 4

    def test_unwrap_reraises_exception(self):
        """Unwrapping an Err re-raises the carried exception."""
        error = InvalidDNALetterError("X")
        with pytest.raises(InvalidDNALetterError):
            Err(error).unwrap()

    def test_unwrap_plain_error(self):
        """Unwrapping an Err with a plain message raises ValueError."""
        with pytest.raises(ValueError):
            Err("nope").unwrap()

    def test_map_err(self):
        """map_err applies to the error and map is skipped."""
        assert Err("a").map_err(lambda e: e + "b") == Err("ab")
        assert Err("a").map(lambda x: x + 1) == Err("a")


class TestTryResult:
    """Tests for wrapping raising calls."""

    def test_captures_listed_error(self):
        """Listed error types become Err."""
        result = try_result(lambda: Genome.from_spec("X"), MegafaunaError)
        assert isinstance(result.error, InvalidDNALetterError)

    def test_other_errors_propagate(self):
        """Unlisted errors propagate."""
        with pytest.raises(ZeroDivisionError):
            try_result(lambda: 1 / 0, MegafaunaError)

    def test_pattern_matching(self):
        """Results work with match statements."""
        match make_genome("BB"):
            case Ok(genome):
                assert genome.count_of("B") == 2
            case Err(_):
                pytest.fail("expected Ok")
