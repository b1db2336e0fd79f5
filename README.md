# delverkit

Building blocks for populating roguelike maps from data files.

- `delverkit.raws`: frozen dataclasses for item, mob, prop and spawn-table
  templates (`Item`, `Mob`, `Prop`, `SpawnTableEntry` and their parts). Each
  has a `from_dict` classmethod that checks field types and raises
  `ValueError` on missing or malformed fields. `Raws.from_json(text)` parses a
  whole document with `items`, `mobs`, `props` and `spawn_table` lists, and
  `load_raws(path)` reads one from disk.
- `delverkit.rawmaster`: `RawMaster` indexes loaded templates by id
  (`item`, `mob`, `prop`, and `template_kind`, which returns a `TemplateKind`
  or `None`; items take precedence over mobs, mobs over props). Duplicate ids
  are reported through the `logging` module. Also:
  - `get_spawn_table_for_depth(raws, depth)` builds a `RandomTable` from the
    spawn-table entries whose depth range includes `depth`, adding the depth
    to the weight of entries that set `add_map_depth_to_weight`.
  - `parse_dice_string(dice)` returns a `DiceSpec(n_dice, die_type, bonus)`;
    parts that are absent default to `1d4+0`.
  - `find_slot_for_equippable_item(tag, raws)` returns `"Melee"` for weapons
    or the wearable's slot; it raises `KeyError` for an unknown item and
    `ValueError` for an item with no slot.
- `delverkit.random_tables`: `RandomNumberGenerator` (seedable) with
  `roll_dice(n, die_type)` and `range(low, high)` (high exclusive), and
  `RandomTable` with `add(name, weight)` (non-positive weights are ignored;
  returns the table for chaining) and `roll(rng)`, which returns the string
  `"None"` when nothing is chosen.
- `delverkit.spawner`: `spawn_region(raws, rng, area, map_depth)` picks
  distinct positions from `area` and rolls a template id for each;
  `spawn_room(raws, rng, room, is_floor, map_depth)` does the same over the
  interior of a `Rect`, keeping tiles for which `is_floor(x, y)` is true. Both
  return a list of `Spawn(position, name)` tuples.
- `delverkit.namegen`: `generate_name`, `generate_artefact_name` and
  `generate_ogur_name` build capitalised names from syllables.
- `delverkit.strings`: `capitalize(s)` upper-cases the first character.
- `delverkit.rect`: `Rect` with `from_size(x, y, w, h)`, `intersect` and
  `center`.

## Install

```
pip install .
```

## Example

```python
from delverkit.raws import load_raws
from delverkit.rawmaster import RawMaster, get_spawn_table_for_depth, parse_dice_string
from delverkit.random_tables import RandomNumberGenerator
from delverkit.rect import Rect
from delverkit.spawner import spawn_room

master = RawMaster(load_raws("spawns.json"))

rng = RandomNumberGenerator(seed=42)
table = get_spawn_table_for_depth(master, 3)
print(table.roll(rng))

room = Rect.from_size(10, 10, 6, 4)
for (x, y), name in spawn_room(master, rng, room, lambda x, y: True, 3):
    print(name, "at", x, y)

print(parse_dice_string("2d8+1"))  # DiceSpec(n_dice=2, die_type=8, bonus=1)
```

## What it does not do

delverkit decides *what* goes *where*; it does not create game entities from
templates, hold a map, render anything, handle player input, or save and load
games. Spawn results are plain `(position, template id)` pairs for your own
game loop to act on.

## Tests

```
pip install .[test]
pytest
```