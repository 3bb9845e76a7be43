"""Tests for herbivore contests."""

from megafauna.animals import Animal
from megafauna.contests.herbivore import HerbivoreContest, niche_bonus, resolve_herbivore_contest
from megafauna.genetics import Genome
from megafauna.niche import Niche


def animal(dentition, size, spec):
    return Animal(dentition=dentition, size=size, genome=Genome.from_spec(spec))


BB = Genome.from_spec("BB")


class TestHerbivoreContest:
    """Tests for ranking herbivores on a biome."""

    def test_suitable_animal_beats_unsuitable(self):
        """Suitability outranks everything else."""
        first = animal(2, 2, "BBG")
        second = animal(3, 2, "IIM")
        contest = HerbivoreContest([first, second], BB, Niche.size())
        assert contest.find_winner() is first
        points = [s.legacy_points for s in contest.scores()]
        assert points == [122, 23]

    def test_bigger_suitable_animal_wins_size_niche(self):
        """On a size niche the bigger animal wins."""
        first = animal(2, 2, "BBG")
        second = animal(3, 3, "BB")
        contest = HerbivoreContest([first, second], BB, Niche.size())
        assert contest.find_winner() is second
        assert [s.legacy_points for s in contest.scores()] == [133, 122]

    def test_dna_letter_niche(self):
        """Carrying the niche letter earns the bonus."""
        first = animal(3, 2, "BB")
        second = animal(2, 2, "BBI")
        contest = HerbivoreContest([first, second], BB, Niche.for_letter("I"))
        assert contest.find_winner() is second

    def test_player_color_niche(self):
        """Matching the niche dentition earns the bonus."""
        first = animal(2, 2, "BB")
        second = animal(3, 2, "BBI")
        contest = HerbivoreContest([first, second], BB, Niche.for_dentition(2))
        assert contest.find_winner() is first

    def test_dentition_breaks_niche_tie(self):
        """Higher dentition breaks a niche tie."""
        first = animal(2, 2, "BBG")
        second = animal(3, 2, "BB")
        assert resolve_herbivore_contest([first, second], BB, Niche.size()) is second

    def test_full_tie_goes_to_first_listed(self):
        """A full tie goes to the first listed animal."""
        first = animal(3, 2, "BB")
        second = animal(3, 2, "BBG")
        assert resolve_herbivore_contest([first, second], BB, Niche.size()) is first
        assert resolve_herbivore_contest([second, first], BB, Niche.size()) is second

    def test_no_suitable_animal_means_no_winner(self):
        """With nobody suitable there is no winner."""
        big = animal(5, 9, "GG")
        small = animal(2, 1, "I")
        contest = HerbivoreContest([big, small], BB, Niche.size())
        ranked = contest.scores()
        assert ranked[0].animal is big
        assert contest.find_winner() is None

    def test_empty_field(self):
        """No candidates means no winner."""
        assert resolve_herbivore_contest([], BB, Niche.size()) is None

    def test_large_size_does_not_outrank_suitability(self):
        """A large size bonus cannot beat suitability."""
        # 10 x size would pass 100 in a single-integer score
        giant = animal(5, 12, "G")
        suited = animal(2, 1, "BB")
        contest = HerbivoreContest([giant, suited], BB, Niche.size())
        assert contest.find_winner() is suited
        assert contest.scores()[1].legacy_points > contest.scores()[0].legacy_points

    def test_empty_requirements_everyone_suitable(self):
        """Empty requirements make everyone suitable."""
        first = animal(2, 1, "")
        second = animal(4, 1, "A")
        assert resolve_herbivore_contest([first, second], Genome(), Niche.size()) is second

    def test_scores_follow_live_animals(self):
        """Scores read the animals' current attributes."""
        first = animal(2, 2, "BBG")
        second = animal(3, 2, "IIM")
        contest = HerbivoreContest([first, second], BB, Niche.size())
        assert contest.find_winner() is first
        second.genome = Genome.from_spec("BB")
        second.size = 3
        assert contest.find_winner() is second


class TestNicheBonus:
    """Tests for the niche bonus of each niche kind."""

    def test_size(self):
        """Size niches award ten per size."""
        assert niche_bonus(animal(2, 4, "B"), Niche.size()) == 40

    def test_dentition(self):
        """Dentition niches award ten on a match."""
        assert niche_bonus(animal(4, 1, "B"), Niche.for_dentition(4)) == 10
        assert niche_bonus(animal(3, 1, "B"), Niche.for_dentition(4)) == 0

    def test_letter(self):
        """Letter niches award ten if the letter is present."""
        assert niche_bonus(animal(2, 1, "BMM"), Niche.for_letter("M")) == 10
        assert niche_bonus(animal(2, 1, "B"), Niche.for_letter("M")) == 0
