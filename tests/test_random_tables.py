import pytest
from hypothesis import given
from hypothesis import strategies as st

from delverkit.random_tables import RandomNumberGenerator, RandomTable


class FixedRoller:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def roll_dice(self, n, die_type):
        self.calls.append((n, die_type))
        return self.value


@pytest.mark.parametrize("seed", range(5))
def test_roll_dice_within_bounds(seed):
    rng = RandomNumberGenerator(seed)
    for _ in range(100):
        value = rng.roll_dice(3, 6)
        assert 3 <= value <= 18


def test_roll_dice_zero_dice_is_zero():
    assert RandomNumberGenerator(1).roll_dice(0, 6) == 0


def test_roll_dice_rejects_faceless_die():
    with pytest.raises(ValueError):
        RandomNumberGenerator(1).roll_dice(1, 0)


@given(st.integers(min_value=-50, max_value=50), st.integers(min_value=1, max_value=50))
def test_range_excludes_high(low, span):
    rng = RandomNumberGenerator(span)
    value = rng.range(low, low + span)
    assert low <= value < low + span


def test_range_rejects_empty():
    with pytest.raises(ValueError):
        RandomNumberGenerator(1).range(5, 5)


def test_same_seed_same_sequence():
    a = RandomNumberGenerator(42)
    b = RandomNumberGenerator(42)
    assert [a.roll_dice(1, 20) for _ in range(20)] == [b.roll_dice(1, 20) for _ in range(20)]


def test_empty_table_rolls_none():
    roller = FixedRoller(1)
    assert RandomTable().roll(roller) == "None"
    assert roller.calls == []


def test_non_positive_weights_ignored():
    table = RandomTable().add("Rat", 0).add("Ogur", -2).add("Bisat", 3)
    assert len(table) == 1
    assert table.total_weight == 3


def test_add_is_chainable():
    table = RandomTable()
    assert table.add("Rat", 1) is table


def test_roll_uses_total_weight_as_die():
    roller = FixedRoller(2)
    table = RandomTable().add("Rat", 3).add("Ogur", 5)
    table.roll(roller)
    assert roller.calls == [(1, 8)]


def test_roll_selects_first_entry():
    table = RandomTable().add("Rat", 3).add("Ogur", 5)
    assert table.roll(FixedRoller(2)) == "Rat"


def test_roll_selects_second_entry():
    table = RandomTable().add("Rat", 3).add("Ogur", 5)
    assert table.roll(FixedRoller(5)) == "Ogur"


def test_lowest_roll_gives_none():
    table = RandomTable().add("Rat", 3).add("Ogur", 5)
    assert table.roll(FixedRoller(1)) == "None"


@pytest.mark.parametrize("seed", range(10))
def test_roll_returns_known_name(seed):
    table = RandomTable().add("Rat", 4).add("Ogur", 2).add("Bisat", 7)
    rng = RandomNumberGenerator(seed)
    for _ in range(50):
        assert table.roll(rng) in {"Rat", "Ogur", "Bisat", "None"}