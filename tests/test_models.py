import pytest

from artifacts_sdk.effects import DamageType
from artifacts_sdk.models import (
    ActiveEventSchema,
    CraftSchema,
    DropRateSchema,
    EventContentSchema,
    EventSchema,
    ItemSchema,
    MapContentSchema,
    MapContentType,
    MapSchema,
    MonsterSchema,
    NpcItem,
    NpcSchema,
    NpcType,
    SimpleEffectSchema,
    SimpleItemSchema,
    TaskFullSchema,
    TaskType,
    from_dict,
    to_dict,
)

MONSTER_JSON = {
    "name": "Ogre",
    "code": "ogre",
    "level": 20,
    "hp": 300,
    "attack_fire": 5,
    "attack_air": 11,
    "res_air": 20,
    "res_water": -5,
    "critical_strike": 9,
    "effects": [{"code": "poison", "value": 3}],
    "drops": [{"code": "ogre_eye", "rate": 12, "min_quantity": 1, "max_quantity": 2}],
}


def test_monster_from_dict_reads_nested_and_aliased_fields():
    monster = from_dict(MonsterSchema, MONSTER_JSON)
    assert monster.base_critical_strike == 9
    assert monster.poison() == 3
    assert monster.drops == [DropRateSchema("ogre_eye", 12, 1, 2)]


def test_monster_attack_and_resistance_by_type():
    monster = from_dict(MonsterSchema, MONSTER_JSON)
    assert monster.attack_damage(DamageType.FIRE) == 5
    assert monster.attack_damage(DamageType.AIR) == 11
    assert monster.attack_damage(DamageType.EARTH) == 0
    assert monster.resistance(DamageType.AIR) == 20
    assert monster.resistance(DamageType.WATER) == -5


def test_monster_round_trip_keeps_json_keys():
    monster = from_dict(MonsterSchema, MONSTER_JSON)
    data = to_dict(monster)
    assert data["effects"] == MONSTER_JSON["effects"]
    assert "effect_list" not in data
    assert from_dict(MonsterSchema, data) == monster


def test_item_effects_default_to_empty():
    item = ItemSchema(code="copper")
    assert item.effects() == []
    item.effect_list = [SimpleEffectSchema("heal", 30)]
    assert item.heal() == 30


def test_item_round_trip_with_craft():
    item = ItemSchema(
        name="Copper Dagger",
        code="copper_dagger",
        level=1,
        type="weapon",
        craft=CraftSchema(skill="weaponcrafting", level=1, items=[SimpleItemSchema("copper", 6)], quantity=1),
    )
    assert from_dict(ItemSchema, to_dict(item)) == item


def test_enums_serialise_as_values():
    map_ = MapSchema(name="Tasks", x=1, y=2, content=MapContentSchema(MapContentType.TASKS_MASTER, "monsters"))
    data = to_dict(map_)
    assert data["content"]["type"] == MapContentType.TASKS_MASTER.value
    assert from_dict(MapSchema, data) == map_
    assert str(TaskType.MONSTERS) == "monsters"


def test_from_dict_rejects_unknown_enum_value():
    with pytest.raises(ValueError):
        from_dict(NpcSchema, {"code": "x", "type": "not_a_type"})


def test_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        from_dict(NpcItem, ["code"])


def test_to_dict_rejects_non_schema():
    with pytest.raises(TypeError):
        to_dict({"code": "x"})


def test_optional_fields_stay_none():
    npc_item = from_dict(NpcItem, {"code": "apple", "npc": "farmer", "currency": "gold", "buy_price": None})
    assert npc_item.buy_price is None and npc_item.sell_price is None
    assert npc_item.npc == "farmer"


def test_event_content_code():
    event = EventSchema(name="Portal", code="portal", content=EventContentSchema(MapContentType.MONSTER, "demon"))
    assert event.content_code() == "demon"


def test_active_event_content_code_and_missing_content():
    active = ActiveEventSchema(map=MapSchema(content=MapContentSchema(MapContentType.RESOURCE, "strange_rocks")))
    assert active.content_code() == "strange_rocks"
    with pytest.raises(ValueError, match="event to have content"):
        ActiveEventSchema().content_code()


def test_task_and_npc_enum_parsing():
    task = from_dict(TaskFullSchema, {"code": "chicken", "type": "monsters", "level": 1})
    npc = from_dict(NpcSchema, {"code": "nomad", "type": "trader"})
    assert task.type is TaskType.MONSTERS
    assert npc.type is NpcType.TRADER