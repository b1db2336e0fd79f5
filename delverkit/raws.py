"""Typed templates for items, mobs, props and spawn tables read from JSON."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any, TypeVar

T = TypeVar("T")


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object, got {type(data).__name__}")
    return data


def _get(data: Mapping[str, Any], key: str, convert: Callable[[Any], T]) -> T:
    value = data.get(key)
    if value is None:
        raise ValueError(f"missing field {key!r}")
    try:
        return convert(value)
    except ValueError as exc:
        raise ValueError(f"invalid field {key!r}: {exc}") from exc


def _opt(data: Mapping[str, Any], key: str, convert: Callable[[Any], T]) -> T | None:
    if data.get(key) is None:
        return None
    return _get(data, key, convert)


def _int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {value!r}")
    return value


def _float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    return float(value)


def _str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


def _bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


def _list_of(convert: Callable[[Any], T]) -> Callable[[Any], list[T]]:
    def inner(value: Any) -> list[T]:
        if not isinstance(value, list):
            raise ValueError(f"expected a list, got {type(value).__name__}")
        return [convert(element) for element in value]

    return inner


def _dict_of(convert: Callable[[Any], T]) -> Callable[[Any], dict[str, T]]:
    def inner(value: Any) -> dict[str, T]:
        mapping = _mapping(value, "value")
        return {_str(key): convert(element) for key, element in mapping.items()}

    return inner


@dataclass(frozen=True)
class Renderable:
    glyph: str
    fg: str
    bg: str
    order: int

    @classmethod
    def from_dict(cls, data: Any) -> Renderable:
        data = _mapping(data, "renderable")
        return cls(
            glyph=_get(data, "glyph", _str),
            fg=_get(data, "fg", _str),
            bg=_get(data, "bg", _str),
            order=_get(data, "order", _int),
        )


@dataclass(frozen=True)
class Consumable:
    effects: dict[str, str]

    @classmethod
    def from_dict(cls, data: Any) -> Consumable:
        data = _mapping(data, "consumable")
        return cls(effects=_get(data, "effects", _dict_of(_str)))


@dataclass(frozen=True)
class Weapon:
    range: str
    attribute: str
    base_damage: str
    hit_bonus: int

    @classmethod
    def from_dict(cls, data: Any) -> Weapon:
        data = _mapping(data, "weapon")
        return cls(
            range=_get(data, "range", _str),
            attribute=_get(data, "attribute", _str),
            base_damage=_get(data, "base_damage", _str),
            hit_bonus=_get(data, "hit_bonus", _int),
        )


@dataclass(frozen=True)
class Wearable:
    slot: str
    armor_class: float

    @classmethod
    def from_dict(cls, data: Any) -> Wearable:
        data = _mapping(data, "wearable")
        return cls(
            slot=_get(data, "slot", _str),
            armor_class=_get(data, "armor_class", _float),
        )


@dataclass(frozen=True)
class Artefact:
    effects: dict[str, str]

    @classmethod
    def from_dict(cls, data: Any) -> Artefact:
        data = _mapping(data, "artefact")
        return cls(effects=_get(data, "effects", _dict_of(_str)))


@dataclass(frozen=True)
class Item:
    id: str
    name: str
    renderable: Renderable | None = None
    consumable: Consumable | None = None
    weapon: Weapon | None = None
    wearable: Wearable | None = None
    artefact: Artefact | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Item:
        data = _mapping(data, "item")
        return cls(
            id=_get(data, "id", _str),
            name=_get(data, "name", _str),
            renderable=_opt(data, "renderable", Renderable.from_dict),
            consumable=_opt(data, "consumable", Consumable.from_dict),
            weapon=_opt(data, "weapon", Weapon.from_dict),
            wearable=_opt(data, "wearable", Wearable.from_dict),
            artefact=_opt(data, "artefact", Artefact.from_dict),
        )


@dataclass(frozen=True)
class NaturalAttack:
    name: str
    hit_bonus: int
    damage: str

    @classmethod
    def from_dict(cls, data: Any) -> NaturalAttack:
        data = _mapping(data, "natural attack")
        return cls(
            name=_get(data, "name", _str),
            hit_bonus=_get(data, "hit_bonus", _int),
            damage=_get(data, "damage", _str),
        )


@dataclass(frozen=True)
class MobNatural:
    armor_class: int | None = None
    attacks: list[NaturalAttack] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> MobNatural:
        data = _mapping(data, "natural")
        return cls(
            armor_class=_opt(data, "armor_class", _int),
            attacks=_opt(data, "attacks", _list_of(NaturalAttack.from_dict)),
        )


@dataclass(frozen=True)
class MobAttributes:
    might: int | None = None
    fitness: int | None = None
    quickness: int | None = None
    intelligence: int | None = None

    @classmethod
    def from_dict(cls, data: Any) -> MobAttributes:
        data = _mapping(data, "attributes")
        return cls(
            might=_opt(data, "might", _int),
            fitness=_opt(data, "fitness", _int),
            quickness=_opt(data, "quickness", _int),
            intelligence=_opt(data, "intelligence", _int),
        )


@dataclass(frozen=True)
class Mob:
    id: str
    name: str
    blocks_tile: bool
    vision_range: int
    ai: str
    attributes: MobAttributes
    renderable: Renderable | None = None
    quips: list[str] | None = None
    skills: dict[str, int] | None = None
    level: int | None = None
    hp: int | None = None
    mana: int | None = None
    equipped: list[str] | None = None
    natural: MobNatural | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Mob:
        data = _mapping(data, "mob")
        return cls(
            id=_get(data, "id", _str),
            name=_get(data, "name", _str),
            blocks_tile=_get(data, "blocks_tile", _bool),
            vision_range=_get(data, "vision_range", _int),
            ai=_get(data, "ai", _str),
            attributes=_get(data, "attributes", MobAttributes.from_dict),
            renderable=_opt(data, "renderable", Renderable.from_dict),
            quips=_opt(data, "quips", _list_of(_str)),
            skills=_opt(data, "skills", _dict_of(_int)),
            level=_opt(data, "level", _int),
            hp=_opt(data, "hp", _int),
            mana=_opt(data, "mana", _int),
            equipped=_opt(data, "equipped", _list_of(_str)),
            natural=_opt(data, "natural", MobNatural.from_dict),
        )


@dataclass(frozen=True)
class EntryTrigger:
    effects: dict[str, str]

    @classmethod
    def from_dict(cls, data: Any) -> EntryTrigger:
        data = _mapping(data, "entry trigger")
        return cls(effects=_get(data, "effects", _dict_of(_str)))


@dataclass(frozen=True)
class Prop:
    id: str
    name: str
    renderable: Renderable | None = None
    hidden: bool | None = None
    blocks_tile: bool | None = None
    blocks_visibility: bool | None = None
    door_open: bool | None = None
    entry_trigger: EntryTrigger | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Prop:
        data = _mapping(data, "prop")
        return cls(
            id=_get(data, "id", _str),
            name=_get(data, "name", _str),
            renderable=_opt(data, "renderable", Renderable.from_dict),
            hidden=_opt(data, "hidden", _bool),
            blocks_tile=_opt(data, "blocks_tile", _bool),
            blocks_visibility=_opt(data, "blocks_visibility", _bool),
            door_open=_opt(data, "door_open", _bool),
            entry_trigger=_opt(data, "entry_trigger", EntryTrigger.from_dict),
        )


@dataclass(frozen=True)
class SpawnTableEntry:
    id: str
    weight: int
    min_depth: int
    max_depth: int
    add_map_depth_to_weight: bool | None = None

    @classmethod
    def from_dict(cls, data: Any) -> SpawnTableEntry:
        data = _mapping(data, "spawn table entry")
        return cls(
            id=_get(data, "id", _str),
            weight=_get(data, "weight", _int),
            min_depth=_get(data, "min_depth", _int),
            max_depth=_get(data, "max_depth", _int),
            add_map_depth_to_weight=_opt(data, "add_map_depth_to_weight", _bool),
        )


@dataclass(frozen=True)
class Raws:
    """The complete set of templates from one raw data file."""

    items: list[Item]
    mobs: list[Mob]
    props: list[Prop]
    spawn_table: list[SpawnTableEntry]

    @classmethod
    def from_dict(cls, data: Any) -> Raws:
        data = _mapping(data, "raws")
        return cls(
            items=_get(data, "items", _list_of(Item.from_dict)),
            mobs=_get(data, "mobs", _list_of(Mob.from_dict)),
            props=_get(data, "props", _list_of(Prop.from_dict)),
            spawn_table=_get(data, "spawn_table", _list_of(SpawnTableEntry.from_dict)),
        )

    @classmethod
    def from_json(cls, text: str) -> Raws:
        """Parse raw templates from a JSON document."""
        return cls.from_dict(json.loads(text))


def load_raws(path: str | PathLike[str]) -> Raws:
    """Read and parse a raw data file."""
    return Raws.from_json(Path(path).read_text(encoding="utf-8"))