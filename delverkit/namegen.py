"""Random name generation from syllables."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from delverkit.strings import capitalize

ARTEFACT_SYLLABLES: tuple[str, ...] = (
    "gi", "reh", "han", "do", "mee", "sak", "ein", "pol", "maat", "hen", "kid",
)

OGUR_SYLLABLES: tuple[str, ...] = (
    "bo", "kud", "da", "ke", "ku", "sak", "sad", "se", "be", "je", "ju", "juk", "jad", "jak",
)
OGUR_MIN_SYLLABLES = 2
OGUR_MAX_SYLLABLES = 5

# Syllables are always drawn from this many leading entries of a list.
_PICK_SPAN = len(ARTEFACT_SYLLABLES)


class _Ranger(Protocol):
    def range(self, low: int, high: int) -> int: ...


def generate_artefact_name(rng: _Ranger) -> str:
    """Generate a name for an artefact."""
    return generate_name(rng, ARTEFACT_SYLLABLES, 2, 7)


def generate_ogur_name(rng: _Ranger) -> str:
    """Generate a name for an ogur-like creature."""
    return generate_name(rng, OGUR_SYLLABLES, OGUR_MIN_SYLLABLES, OGUR_MAX_SYLLABLES)


def generate_name(
    rng: _Ranger, syllables: Sequence[str], min_syllables: int, max_syllables: int
) -> str:
    """Join between ``min_syllables`` and ``max_syllables - 1`` random syllables."""
    count = rng.range(min_syllables, max_syllables)
    name = "".join(syllables[rng.range(0, _PICK_SPAN)] for _ in range(count))
    return capitalize(name)