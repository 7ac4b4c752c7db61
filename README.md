# artifacts_sdk

A library for working with the data of an online role-playing game: items,
monsters, resources, maps, NPCs, events and tasks, together with tools to
evaluate equipment and simulate fights.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `artifacts_sdk.models`: data classes for the game's schemas
  (`ItemSchema`, `MonsterSchema`, `ResourceSchema`, `MapSchema`,
  `EventSchema`, `ActiveEventSchema`, `NpcSchema`, `NpcItem`,
  `TaskFullSchema`, `DropRateSchema`, `StatusSchema`, …) and the enums
  `FightResult`, `MapContentType`, `NpcType` and `TaskType`.
  `to_dict(obj)` and `from_dict(cls, data)` convert them to and from
  JSON-shaped mappings.
- `artifacts_sdk.effects`: `DamageType`, `EffectType` and the `HasEffects`
  mixin, which reads stats such as `health()`, `haste()`,
  `critical_strike()`, `damage_increase(damage_type)` or
  `resistance(damage_type)` from an object's effects. `ItemSchema` and
  `MonsterSchema` use it.
- `artifacts_sdk.gear`: `Slot` and `Gear`, an equipment set. `Gear`
  computes expected damage dealt to or received from a monster
  (`average_damage_against`, `average_damage_from`,
  `critless_damage_against`, `critless_damage_from`), rolls hits
  (`simulate_hits_against`, `simulate_hits_from`) and can swap its rings,
  utilities and artifacts to line up with another set (`align_to`).
  Building a `Gear` whose two utilities, or two of whose artifacts, share a
  code raises `InvalidGearError`.
- `artifacts_sdk.simulator`: `average_fight` and `random_fight`, which
  return a `Fight`; damage formulas `average_dmg`, `critless_dmg`,
  `simulate_dmg` and `simulate_hit`; and `fight_cd`, `gather_cd` and
  `time_to_rest`.
- `artifacts_sdk.item_ext`: `ItemType`, `SubType` and helpers on a single
  item: `mats`, `mats_quantity`, `recycled_quantity`, `is_craftable`,
  `is_crafted_with`, `is_crafted_from_task`, `skill_to_craft`, `is_food`,
  `item_type`, and damage comparisons against a monster.
- `artifacts_sdk.maps`: `Maps`, tiles indexed by coordinates with lookups
  by content type, content code and nearest tile, kept in step with active
  events by `refresh_from_events`; plus tile helpers such as `pretty`,
  `closest_among` and `is_tasksmaster`.
- `artifacts_sdk.items`: `Items`, the item catalogue, with crafting queries
  (`mats_of`, `mats_for`, `base_mats_of`, `crafted_with`, `unique_craft`),
  drop rates, and item sources (`sources_of`, `best_source_of`,
  `time_to_get`, `is_from_event`) described by `ItemSource` and
  `SourceKind`.
- `artifacts_sdk.server`: `Server`, the server status and the offset
  between the local clock and the server clock.
- `artifacts_sdk.errors`: `ClientError` and its subclass `ApiError`, and
  `InvalidGearError`, which is a `ValueError`.
- `artifacts_sdk.consts`: well-known item codes and game limits.

## Cached catalogues

`Items`, `Monsters`, `Resources`, `Npcs`, `NpcsItems`, `Tasks`,
`TasksRewards` and `Events` derive from `artifacts_sdk.cache.PersistedData`.
On creation each reads its JSON file under `.cache/` in the current
directory (for example `.cache/monsters.json`); when that file is missing or
unreadable it asks the API object for the data and writes the file.
`refresh_data()` reloads from the API without touching the file.

The API object is supplied by you. Each class documents the calls it makes,
for instance `api.monsters.all()` for `Monsters` or `api.server.status()`
for `Server`; each call returns model instances.

## Examples

```python
from artifacts_sdk.simulator import average_dmg, gather_cd

average_dmg(100, 0, 0, 0)   # 100.0
gather_cd(1, -10)           # 27
```

```python
from artifacts_sdk.gear import Gear
from artifacts_sdk.models import ItemSchema, MonsterSchema, SimpleEffectSchema
from artifacts_sdk.simulator import average_fight

sword = ItemSchema(
    name="Copper Sword",
    code="copper_sword",
    type="weapon",
    effect_list=[SimpleEffectSchema(code="attack_fire", value=10)],
)
monster = MonsterSchema(name="Chicken", code="chicken", level=1, hp=60, attack_water=4)

fight = average_fight(1, 0, Gear(weapon=sword), monster, False)
print(fight.result, fight.turns, fight.hp_lost)
```

```python
from types import SimpleNamespace

from artifacts_sdk.monsters import Monsters

api = SimpleNamespace(monsters=SimpleNamespace(all=lambda: [monster]))
events = SimpleNamespace(all=lambda: [])
monsters = Monsters(api, events)   # writes .cache/monsters.json if absent
monsters.highest_providing_exp(5)
```

## What it does not do

The package does not talk to the game's HTTP API itself: there is no HTTP
client, and no account, bank or character handling. The catalogues work
with whatever API object you pass in. There is no command-line tool.