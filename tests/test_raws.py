import json

import pytest

from delverkit.raws import (
    Item,
    Mob,
    MobAttributes,
    Prop,
    Raws,
    Renderable,
    SpawnTableEntry,
    Wearable,
    load_raws,
)

SAMPLE = {
    "items": [
        {
            "id": "HealthPotion",
            "name": "Health Potion",
            "renderable": {"glyph": "!", "fg": "#FF00FF", "bg": "#000000", "order": 2},
            "consumable": {"effects": {"provides_healing": "8"}},
        },
        {
            "id": "Dagger",
            "name": "Dagger",
            "weapon": {"range": "melee", "attribute": "Quickness", "base_damage": "1d4", "hit_bonus": 0},
        },
        {
            "id": "OldBoots",
            "name": "Old Boots",
            "wearable": {"slot": "Feet", "armor_class": 1},
            "unknown_extra": True,
        },
    ],
    "mobs": [
        {
            "id": "Rat",
            "name": "Rat",
            "blocks_tile": True,
            "vision_range": 8,
            "ai": "melee",
            "attributes": {"might": 3},
            "skills": {"Melee": 2},
            "natural": {"armor_class": 11, "attacks": [{"name": "bite", "hit_bonus": 0, "damage": "1d4"}]},
            "equipped": ["Dagger"],
        }
    ],
    "props": [
        {
            "id": "BearTrap",
            "name": "Bear Trap",
            "hidden": True,
            "entry_trigger": {"effects": {"damage": "6", "single_activation": "1"}},
        }
    ],
    "spawn_table": [
        {"id": "Rat", "weight": 10, "min_depth": 0, "max_depth": 100},
        {"id": "Dagger", "weight": 3, "min_depth": 0, "max_depth": 100, "add_map_depth_to_weight": True},
    ],
}


def test_parse_sample_counts():
    raws = Raws.from_dict(SAMPLE)
    assert [item.id for item in raws.items] == ["HealthPotion", "Dagger", "OldBoots"]
    assert [mob.id for mob in raws.mobs] == ["Rat"]
    assert [prop.id for prop in raws.props] == ["BearTrap"]
    assert [entry.id for entry in raws.spawn_table] == ["Rat", "Dagger"]


def test_item_fields():
    potion = Raws.from_dict(SAMPLE).items[0]
    assert potion.renderable == Renderable(glyph="!", fg="#FF00FF", bg="#000000", order=2)
    assert potion.consumable.effects == {"provides_healing": "8"}
    assert potion.weapon is None and potion.wearable is None and potion.artefact is None


def test_wearable_armor_class_is_float():
    boots = Item.from_dict(SAMPLE["items"][2])
    assert boots.wearable == Wearable(slot="Feet", armor_class=1.0)
    assert isinstance(boots.wearable.armor_class, float)


def test_mob_optional_fields():
    rat = Mob.from_dict(SAMPLE["mobs"][0])
    assert rat.attributes == MobAttributes(might=3)
    assert rat.level is None and rat.hp is None and rat.quips is None
    assert rat.skills == {"Melee": 2}
    assert rat.natural.attacks[0].damage == "1d4"
    assert rat.equipped == ["Dagger"]


def test_prop_trigger():
    trap = Prop.from_dict(SAMPLE["props"][0])
    assert trap.hidden is True
    assert trap.blocks_tile is None
    assert trap.entry_trigger.effects["damage"] == "6"


def test_spawn_entry_optional_flag():
    entries = [SpawnTableEntry.from_dict(e) for e in SAMPLE["spawn_table"]]
    assert entries[0].add_map_depth_to_weight is None
    assert entries[1].add_map_depth_to_weight is True


def test_missing_required_field_raises():
    with pytest.raises(ValueError, match="name"):
        Item.from_dict({"id": "Thing"})


def test_null_required_field_raises():
    with pytest.raises(ValueError, match="vision_range"):
        Mob.from_dict({**SAMPLE["mobs"][0], "vision_range": None})


def test_wrong_type_raises():
    with pytest.raises(ValueError, match="weight"):
        SpawnTableEntry.from_dict({"id": "Rat", "weight": "ten", "min_depth": 0, "max_depth": 1})


def test_bool_is_not_int():
    with pytest.raises(ValueError):
        SpawnTableEntry.from_dict({"id": "Rat", "weight": True, "min_depth": 0, "max_depth": 1})


def test_missing_section_raises():
    with pytest.raises(ValueError, match="spawn_table"):
        Raws.from_dict({"items": [], "mobs": [], "props": []})


def test_non_object_raises():
    with pytest.raises(ValueError):
        Raws.from_dict([])


def test_from_json_round_trip():
    assert Raws.from_json(json.dumps(SAMPLE)) == Raws.from_dict(SAMPLE)


def test_from_json_invalid_text():
    with pytest.raises(ValueError):
        Raws.from_json("{not json")


def test_load_raws_from_file(tmp_path):
    path = tmp_path / "spawns.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    assert load_raws(path) == Raws.from_dict(SAMPLE)