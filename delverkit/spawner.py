"""Choosing where monsters, items and props appear on a level."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import NamedTuple, Protocol

from delverkit.rawmaster import RawMaster, get_spawn_table_for_depth
from delverkit.rect import Rect

MAX_MONSTERS = 4


class Spawn(NamedTuple):
    """A template id to be spawned at a map position."""

    position: tuple[int, int]
    name: str


SpawnList = list[Spawn]


class _DiceRoller(Protocol):
    def roll_dice(self, n: int, die_type: int) -> int: ...


def spawn_region(
    raws: RawMaster,
    rng: _DiceRoller,
    area: Iterable[tuple[int, int]],
    map_depth: int,
) -> SpawnList:
    """Pick distinct positions in ``area`` and roll a template for each.

    The number of spawns grows with depth and never exceeds the size of
    the area. Positions with nothing rolled carry the name ``"None"``.
    """
    table = get_spawn_table_for_depth(raws, map_depth)
    candidates = list(area)
    count = min(
        len(candidates),
        rng.roll_dice(1, MAX_MONSTERS + 3) + (map_depth - 1) - 3,
    )
    spawns: SpawnList = []
    for _ in range(max(count, 0)):
        if len(candidates) == 1:
            idx = 0
        else:
            idx = rng.roll_dice(1, len(candidates)) - 1
        position = candidates.pop(idx)
        spawns.append(Spawn(position, table.roll(rng)))
    return spawns


def spawn_room(
    raws: RawMaster,
    rng: _DiceRoller,
    room: Rect,
    is_floor: Callable[[int, int], bool],
    map_depth: int,
) -> SpawnList:
    """Spawn inside the interior of ``room`` on tiles that are floor."""
    interior = (
        (x, y)
        for y in range(room.y1 + 1, room.y2)
        for x in range(room.x1 + 1, room.x2)
        if is_floor(x, y)
    )
    return spawn_region(raws, rng, interior, map_depth)