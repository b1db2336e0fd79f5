"""Dice rolling and weighted random tables."""

from __future__ import annotations

import random
from typing import NamedTuple, Protocol


class RandomNumberGenerator:
    """A seedable source of dice rolls and integer ranges."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def roll_dice(self, n: int, die_type: int) -> int:
        """Roll ``n`` dice with ``die_type`` faces and return the sum."""
        if die_type < 1:
            raise ValueError(f"a die needs at least one face, got {die_type}")
        return sum(self._random.randint(1, die_type) for _ in range(n))

    def range(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high)``."""
        if high <= low:
            raise ValueError(f"empty range [{low}, {high})")
        return self._random.randrange(low, high)


class _DiceRoller(Protocol):
    def roll_dice(self, n: int, die_type: int) -> int: ...


class _Entry(NamedTuple):
    name: str
    weight: int


class RandomTable:
    """A table of names picked at random in proportion to their weights."""

    NONE = "None"

    def __init__(self) -> None:
        self._entries: list[_Entry] = []
        self._total_weight = 0

    @property
    def total_weight(self) -> int:
        return self._total_weight

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, name: str, weight: int) -> RandomTable:
        """Add an entry; entries without positive weight are ignored."""
        if weight > 0:
            self._total_weight += weight
            self._entries.append(_Entry(name, weight))
        return self

    def roll(self, rng: _DiceRoller) -> str:
        """Pick a name; returns ``"None"`` when nothing is chosen."""
        if self._total_weight == 0:
            return self.NONE
        roll = rng.roll_dice(1, self._total_weight) - 1
        entries = iter(self._entries)
        while roll > 0:
            entry = next(entries)
            if roll < entry.weight:
                return entry.name
            roll -= entry.weight
        return self.NONE