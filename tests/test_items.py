from types import SimpleNamespace

import pytest

from artifacts_sdk.items import Items, ItemSource, SourceKind
from artifacts_sdk.models import (
    CraftSchema,
    DropRateSchema,
    EventContentSchema,
    EventSchema,
    ItemSchema,
    MapContentType,
    MonsterSchema,
    NpcItem,
    NpcSchema,
    NpcType,
    ResourceSchema,
    SimpleEffectSchema,
    SimpleItemSchema,
)
from artifacts_sdk.monsters import Monsters
from artifacts_sdk.npcs import Npcs, NpcsItems
from artifacts_sdk.resources import Resources
from artifacts_sdk.tasks import TasksRewards


def _craft(*mats):
    return CraftSchema(
        skill="weaponcrafting",
        level=1,
        items=[SimpleItemSchema(code=c, quantity=q) for c, q in mats],
        quantity=1,
    )


def _items():
    return [
        ItemSchema(name="Copper Ore", code="copper_ore", level=1, type="resource", subtype="mining"),
        ItemSchema(
            name="Copper", code="copper", level=1, type="resource", subtype="bar",
            craft=_craft(("copper_ore", 10)),
        ),
        ItemSchema(
            name="Copper Dagger", code="copper_dagger", level=1, type="weapon",
            craft=_craft(("copper", 6)),
        ),
        ItemSchema(name="Feather", code="feather", level=1, type="resource", subtype="mob"),
        ItemSchema(name="Slime Ball", code="slime_ball", level=5, type="resource", subtype="mob"),
        ItemSchema(
            name="Fire Staff", code="fire_staff", level=10, type="weapon",
            craft=_craft(("copper", 2), ("feather", 3), ("slime_ball", 1)),
        ),
        ItemSchema(name="Jasper", code="jasper_crystal", level=1, type="resource"),
        ItemSchema(
            name="Enchanted Staff", code="enchanted_staff", level=20, type="weapon",
            craft=_craft(("fire_staff", 1), ("jasper_crystal", 2)),
        ),
        ItemSchema(
            name="Small Potion", code="small_health_potion", level=5, type="utility",
            effect_list=[SimpleEffectSchema(code="restore", value=30)],
        ),
        ItemSchema(
            name="Minor Potion", code="minor_health_potion", level=1, type="utility",
            effect_list=[SimpleEffectSchema(code="restore", value=10)],
        ),
        ItemSchema(name="Ruby", code="ruby", level=1, type="resource"),
        ItemSchema(name="Tasks Coin", code="tasks_coin", level=1, type="currency"),
        ItemSchema(name="Apple", code="apple", level=1, type="consumable"),
    ]


def _drop(code, rate, lo=1, hi=1):
    return DropRateSchema(code=code, rate=rate, min_quantity=lo, max_quantity=hi)


def _resources():
    return [
        ResourceSchema(name="Copper Rocks", code="copper_rocks", skill="mining", level=1,
                       drops=[_drop("copper_ore", 1)]),
        ResourceSchema(name="Strange Rocks", code="strange_rocks", skill="mining", level=1,
                       drops=[_drop("copper_ore", 5)]),
    ]


def _monsters():
    return [
        MonsterSchema(name="Chicken", code="chicken", level=1, hp=60, drops=[_drop("feather", 2)]),
        MonsterSchema(name="Slime", code="slime", level=5, hp=100,
                      drops=[_drop("slime_ball", 4, 1, 3)]),
        MonsterSchema(name="Gingerbread", code="gingerbread", level=10, hp=300,
                      drops=[_drop("gift", 1)]),
    ]


def _api(items=None):
    item_list = _items() if items is None else items
    return SimpleNamespace(
        items=SimpleNamespace(all=lambda: list(item_list)),
        resources=SimpleNamespace(all=_resources),
        monsters=SimpleNamespace(all=_monsters),
        npcs=SimpleNamespace(
            all=lambda: [NpcSchema(name="Fruit", code="fruit_seller", type=NpcType.MERCHANT)]
        ),
        npcs_items=SimpleNamespace(
            all=lambda: [NpcItem(code="apple", npc="fruit_seller", currency="gold", buy_price=5)]
        ),
        tasks_reward=SimpleNamespace(all=lambda: [_drop("jasper_crystal", 10)]),
    )


def _events():
    event = EventSchema(
        name="Strange",
        code="strange",
        content=EventContentSchema(type=MapContentType.RESOURCE, code="strange_rocks"),
    )
    return SimpleNamespace(all=lambda: [event])


def _build(api):
    events = _events()
    resources = Resources(api, events)
    monsters = Monsters(api, events)
    rewards = TasksRewards(api)
    npcs = Npcs(api, NpcsItems(api))
    return Items(api, resources, monsters, rewards, npcs), resources, monsters


@pytest.fixture
def env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return _build(_api())


@pytest.fixture
def items(env):
    return env[0]


def test_get_and_all(items):
    assert items.get("copper").name == "Copper"
    assert items.get("missing") is None
    assert {i.code for i in items.all()} == {i.code for i in _items()}
    assert {i.code for i in items} == {i.code for i in _items()}


def test_mats_of(items):
    assert items.mats_of("copper_dagger") == [SimpleItemSchema(code="copper", quantity=6)]
    assert items.mats_of("copper_ore") == []
    assert items.mats_of("missing") == []


def test_mats_for_scales_without_mutating(items):
    base = items.mats_of("fire_staff")
    scaled = items.mats_for("fire_staff", 3)
    assert [m.code for m in scaled] == [m.code for m in base]
    assert [m.quantity for m in scaled] == [m.quantity * 3 for m in base]
    assert items.mats_of("fire_staff") == base


def test_base_mats_of_expands_one_level(items):
    base = items.base_mats_of("copper_dagger")
    assert [m.code for m in base] == ["copper_ore"]
    expected = items.mats_of("copper")[0].quantity * items.mats_of("copper_dagger")[0].quantity
    assert base[0].quantity == expected


def test_crafted_with_and_unique_craft(items):
    assert {i.code for i in items.crafted_with("copper")} == {"copper_dagger", "fire_staff"}
    assert items.unique_craft("copper_ore").code == "copper"
    assert items.unique_craft("copper") is None


def test_crafted_with_base_mat_and_from_resource(items):
    codes = {i.code for i in items.crafted_with_base_mat("copper_ore")}
    assert codes == {"copper", "copper_dagger", "fire_staff"}
    assert {i.code for i in items.crafted_from_resource("copper_rocks")} == codes
    assert items.crafted_from_resource("missing") == []
    assert items.is_crafted_with_base_mat("copper_dagger", "copper_ore")
    assert not items.is_crafted_with_base_mat("copper", "feather")


def test_require_task_reward(items):
    assert items.require_task_reward("enchanted_staff")
    assert not items.require_task_reward("copper_dagger")


def test_mob_levels(items):
    assert items.mats_mob_max_lvl("fire_staff") == 5
    average = items.mats_mob_average_lvl("fire_staff")
    assert 1 <= average <= items.mats_mob_max_lvl("fire_staff")
    assert items.mats_mob_average_lvl("copper_dagger") == 0
    assert items.mats_mob_max_lvl("copper_dagger") == 0


def test_mats_and_recycled_quantity(items):
    total = items.mats_quantity_for("fire_staff")
    assert total == sum(m.quantity for m in items.mats_of("fire_staff"))
    recycled = items.recycled_quantity_for("fire_staff")
    assert recycled * 5 >= total > (recycled - 1) * 5
    assert items.recycled_quantity_for("copper_ore") == 0


def test_drop_rate(items):
    assert items.drop_rate("feather") == 2
    assert items.drop_rate("unknown") == 0


def test_base_mats_drop_rate(items):
    assert items.base_mats_drop_rate("copper_ore") == 0.0
    assert items.base_mats_drop_rate("copper") == float(items.drop_rate("copper_ore"))


def test_restoring_utilities(items):
    assert [i.code for i in items.restoring_utilities(5)] == ["small_health_potion"]
    assert {i.code for i in items.restoring_utilities(1)} == {
        "small_health_potion",
        "minor_health_potion",
    }


def test_best_source_of(env):
    items, resources, monsters = env
    assert items.best_source_of("gift") == ItemSource(SourceKind.MONSTER, monsters.get("gingerbread"))
    assert items.best_source_of("ruby") == ItemSource(SourceKind.CRAFT)
    assert items.best_source_of("jasper_crystal") == ItemSource(SourceKind.TASK_REWARD)
    assert items.best_source_of("copper_ore") == ItemSource(
        SourceKind.RESOURCE, resources.get("copper_rocks")
    )
    assert items.best_source_of("apple").kind is SourceKind.NPC
    assert items.best_source_of("nothing") is None


def test_sources_of(items):
    assert items.sources_of("copper") == [ItemSource(SourceKind.CRAFT)]
    assert items.sources_of("tasks_coin") == [ItemSource(SourceKind.TASK)]
    assert [s.kind for s in items.sources_of("copper_ore")] == [SourceKind.RESOURCE] * 2
    assert [s.kind for s in items.sources_of("jasper_crystal")] == [SourceKind.TASK_REWARD]


def test_time_to_get(items):
    assert items.time_to_get("copper_ore") == 20
    assert items.time_to_get("apple") == 60
    assert items.time_to_get("nothing") is None
    assert items.time_to_get("copper") == items.time_to_get("copper_ore") * 10


def test_is_from_event(items):
    assert items.is_from_event("copper_ore")
    assert items.is_from_event("apple")
    assert not items.is_from_event("feather")
    assert not items.is_from_event("nothing")


def test_cache_is_written_and_reused(env, tmp_path):
    assert (tmp_path / ".cache" / "items.json").exists()

    def failing():
        raise RuntimeError("api unavailable")

    api = _api()
    api.items = SimpleNamespace(all=failing)
    cached, _, _ = _build(api)
    assert cached.get("fire_staff") == env[0].get("fire_staff")


def test_refresh_data(env):
    items = env[0]
    extra = ItemSchema(name="New", code="new_item", level=1, type="resource")
    items._api = _api(_items() + [extra])
    items.refresh_data()
    assert items.get("new_item") == extra