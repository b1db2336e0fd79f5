"""Indexed access to raw templates, spawn tables and dice notation."""

from __future__ import annotations

import enum
import logging
import re
from typing import NamedTuple

from delverkit.random_tables import RandomTable
from delverkit.raws import Item, Mob, Prop, Raws

logger = logging.getLogger(__name__)

MELEE_SLOT = "Melee"

_DICE_RE = re.compile(r"(\d+)d(\d+)([+\-]\d+)?")


class TemplateKind(enum.Enum):
    """The kind of template a key refers to."""

    ITEM = "item"
    MOB = "mob"
    PROP = "prop"


class DiceSpec(NamedTuple):
    """Dice notation such as ``2d6+3``."""

    n_dice: int
    die_type: int
    bonus: int


class RawMaster:
    """Holds loaded raw templates and looks them up by id."""

    def __init__(self, raws: Raws | None = None) -> None:
        self.raws = Raws(items=[], mobs=[], props=[], spawn_table=[])
        self._items: dict[str, Item] = {}
        self._mobs: dict[str, Mob] = {}
        self._props: dict[str, Prop] = {}
        if raws is not None:
            self.load(raws)

    def load(self, raws: Raws) -> None:
        """Replace the current templates with ``raws`` and rebuild the indices."""
        self.raws = raws
        self._items = {}
        self._mobs = {}
        self._props = {}
        item_ids: set[str] = set()
        for item in raws.items:
            if item.id in item_ids:
                logger.warning("duplicate item type in raw file [%s]", item.id)
            item_ids.add(item.id)
            self._items[item.id] = item
        for mob in raws.mobs:
            if mob.id in item_ids:
                logger.warning("duplicate mob type in raw file [%s]", mob.id)
            self._mobs[mob.id] = mob
        for prop in raws.props:
            if prop.id in item_ids:
                logger.warning("duplicate prop type in raw file [%s]", prop.id)
            self._props[prop.id] = prop

    def template_kind(self, key: str) -> TemplateKind | None:
        """Return which kind of template ``key`` names; items win over mobs over props."""
        if key in self._items:
            return TemplateKind.ITEM
        if key in self._mobs:
            return TemplateKind.MOB
        if key in self._props:
            return TemplateKind.PROP
        return None

    def item(self, key: str) -> Item | None:
        """Return the item template with this id, if any."""
        return self._items.get(key)

    def mob(self, key: str) -> Mob | None:
        """Return the mob template with this id, if any."""
        return self._mobs.get(key)

    def prop(self, key: str) -> Prop | None:
        """Return the prop template with this id, if any."""
        return self._props.get(key)


def get_spawn_table_for_depth(raws: RawMaster, depth: int) -> RandomTable:
    """Build the weighted spawn table for entries available at ``depth``."""
    table = RandomTable()
    for entry in raws.raws.spawn_table:
        if entry.min_depth <= depth <= entry.max_depth:
            weight = entry.weight
            if entry.add_map_depth_to_weight is not None:
                weight += depth
            table.add(entry.id, weight)
    return table


def parse_dice_string(dice: str) -> DiceSpec:
    """Parse dice notation; missing parts default to ``1d4+0``."""
    n_dice, die_type, bonus = 1, 4, 0
    for match in _DICE_RE.finditer(dice):
        n_dice = int(match.group(1))
        die_type = int(match.group(2))
        if match.group(3) is not None:
            bonus = int(match.group(3))
    return DiceSpec(n_dice, die_type, bonus)


def find_slot_for_equippable_item(tag: str, raws: RawMaster) -> str:
    """Return the equipment slot an item goes in."""
    item = raws.item(tag)
    if item is None:
        raise KeyError(f"tried to equip item that doesn't exist: {tag!r}")
    if item.weapon is not None:
        return MELEE_SLOT
    if item.wearable is not None:
        return item.wearable.slot
    raise ValueError(f"trying to equip {tag!r}, but it has no slot")