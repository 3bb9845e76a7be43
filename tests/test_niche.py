"""Tests for niche parsing."""

import pytest

from megafauna.exceptions import InvalidNicheSpecError
from megafauna.niche import Niche, NicheKind, make_niche


class TestNicheFromSpec:
    """Tests for parsing niche spec strings."""

    @pytest.mark.parametrize("spec", ["Size", "SIZE", "size", "  Size "])
    def test_size(self, spec):
        """Size matches in any case, ignoring surrounding whitespace."""
        niche = Niche.from_spec(spec)
        assert niche.kind is NicheKind.SIZE
        assert niche.is_size
        assert niche.dentition is None and niche.letter is None

    @pytest.mark.parametrize("spec,expected", [("2", 2), ("3", 3), ("4", 4), ("5", 5)])
    def test_dentition(self, spec, expected):
        """Digits 2-5 name a player-color niche."""
        niche = Niche.from_spec(spec)
        assert niche.kind is NicheKind.DENTITION
        assert niche.dentition == expected

    @pytest.mark.parametrize("spec", list("BGHIPAMNS"))
    def test_dna_letter(self, spec):
        """Any single DNA letter names a DNA niche."""
        niche = Niche.from_spec(spec)
        assert niche.kind is NicheKind.DNA_LETTER
        assert niche.letter == spec

    @pytest.mark.parametrize("spec", ["i", "b", "p"])
    def test_lowercase_letter_rejected(self, spec):
        """DNA letters are matched case-sensitively."""
        with pytest.raises(InvalidNicheSpecError):
            Niche.from_spec(spec)

    @pytest.mark.parametrize(
        "spec", ["", "1", "6", "12", "X", "BB", "Sized", "-3", "²", "٣", "３"]
    )
    def test_invalid(self, spec):
        """Anything else, including non-ASCII digits, is rejected."""
        with pytest.raises(InvalidNicheSpecError):
            Niche.from_spec(spec)


class TestNicheInvariants:
    """Tests for the one-variant-only invariant."""

    def test_only_one_variant(self):
        """A niche cannot carry payload for another variant."""
        with pytest.raises(InvalidNicheSpecError):
            Niche(NicheKind.SIZE, dentition=3)
        with pytest.raises(InvalidNicheSpecError):
            Niche(NicheKind.DENTITION, dentition=3, letter="B")

    def test_dentition_out_of_range(self):
        """Only player dentitions make dentition niches."""
        with pytest.raises(InvalidNicheSpecError):
            Niche.for_dentition(1)

    def test_str(self):
        """Niches render back to their spec form."""
        assert str(Niche.size()) == "Size"
        assert str(Niche.for_dentition(4)) == "4"
        assert str(Niche.for_letter("P")) == "P"


class TestMakeNiche:
    """Tests for the Result-returning niche constructor."""

    def test_ok(self):
        """A valid spec gives Ok."""
        assert make_niche("3").unwrap() == Niche.for_dentition(3)

    def test_err(self):
        """An invalid spec gives Err carrying the typed error."""
        result = make_niche("bogus")
        assert result.is_err()
        assert isinstance(result.error, InvalidNicheSpecError)
        assert result.error.spec == "bogus"

    @pytest.mark.parametrize("spec", ["²", "٣"])
    def test_unicode_digits_give_err(self, spec):
        """Non-ASCII digits come back as Err instead of raising."""
        result = make_niche(spec)
        assert result.is_err()
        assert isinstance(result.error, InvalidNicheSpecError)
