import pytest

from artifacts_sdk import item_ext
from artifacts_sdk.gear import Slot
from artifacts_sdk.item_ext import ItemType, SubType
from artifacts_sdk.models import (
    CraftSchema,
    ItemSchema,
    MonsterSchema,
    SimpleEffectSchema,
    SimpleItemSchema,
)


def _item(code="sword", type_="weapon", effects=None, craft=None):
    return ItemSchema(
        name=code.title(), code=code, type=type_, effect_list=effects, craft=craft
    )


def _crafted(mats, skill="weaponcrafting"):
    return _item(
        code="crafted",
        craft=CraftSchema(skill=skill, level=1, items=mats, quantity=1),
    )


def test_from_slot_maps_paired_slots():
    assert ItemType.from_slot(Slot.RING2) is ItemType.RING
    assert ItemType.from_slot(Slot.UTILITY1) is ItemType.UTILITY
    assert ItemType.from_slot(Slot.ARTIFACT3) is ItemType.ARTIFACT
    assert ItemType.from_slot("weapon") is ItemType.WEAPON


def test_subtype_values():
    assert SubType("mob") is SubType.MOB
    assert str(SubType.PLANK) == "plank"


def test_mats_and_craftable():
    mats = [SimpleItemSchema("copper", 6), SimpleItemSchema("feather", 2)]
    item = _crafted(mats)
    assert item_ext.is_craftable(item)
    assert item_ext.mats(item) == mats
    assert item_ext.is_crafted_with(item, "copper")
    assert not item_ext.is_crafted_with(item, "iron")
    assert item_ext.mats_quantity(item) == sum(m.quantity for m in mats)


def test_mats_returns_copies():
    item = _crafted([SimpleItemSchema("copper", 6)])
    item_ext.mats(item)[0].quantity = 99
    assert item_ext.mats(item)[0].quantity == 6


def test_uncraftable_item():
    item = _item()
    assert not item_ext.is_craftable(item)
    assert item_ext.mats(item) == []
    assert item_ext.skill_to_craft(item) is None
    assert item_ext.recycled_quantity(item) == 0


@pytest.mark.parametrize("quantity", [1, 4, 5, 6, 10, 11])
def test_recycled_quantity_is_fifth_rounded_up(quantity):
    item = _crafted([SimpleItemSchema("copper", quantity)])
    recycled = item_ext.recycled_quantity(item)
    assert recycled * 5 >= quantity
    assert (recycled - 1) * 5 < quantity


def test_skill_to_craft():
    assert item_ext.skill_to_craft(_crafted([], skill="mining")) == "mining"


def test_is_crafted_from_task():
    assert item_ext.is_crafted_from_task(_crafted([SimpleItemSchema("jasper_crystal", 1)]))
    assert not item_ext.is_crafted_from_task(_crafted([SimpleItemSchema("copper", 1)]))


def test_attack_damage_against():
    item = _item(effects=[SimpleEffectSchema("attack_fire", 10)])
    assert item_ext.attack_damage_against(item, MonsterSchema()) == pytest.approx(10.0)
    immune = MonsterSchema(res_fire=100)
    assert item_ext.attack_damage_against(item, immune) == pytest.approx(0.0)


def test_damage_increase_against_with():
    weapon = _item(effects=[SimpleEffectSchema("attack_fire", 10)])
    plain = _item(code="boots", type_="boots")
    assert item_ext.damage_increase_against_with(plain, MonsterSchema(), weapon) == pytest.approx(0.0)
    boosting = _item(code="ring", type_="ring", effects=[SimpleEffectSchema("dmg", 50)])
    assert item_ext.damage_increase_against_with(
        boosting, MonsterSchema(), weapon
    ) == pytest.approx(5.0)


def test_damage_reduction_against():
    monster = MonsterSchema(attack_fire=20)
    assert item_ext.damage_reduction_against(_item(), monster) == pytest.approx(0.0)
    armor = _item(type_="body_armor", effects=[SimpleEffectSchema("res_fire", 100)])
    assert item_ext.damage_reduction_against(armor, monster) == pytest.approx(20.0)


def test_food_and_consumable():
    food = _item(code="apple", type_="consumable", effects=[SimpleEffectSchema("heal", 30)])
    potion = _item(code="potion", type_="consumable")
    assert item_ext.is_consumable(food)
    assert item_ext.is_food(food)
    assert item_ext.is_consumable(potion)
    assert not item_ext.is_food(potion)
    assert not item_ext.is_food(_item())


def test_item_type():
    assert item_ext.item_type(_item(type_="leg_armor")) is ItemType.LEG_ARMOR
    assert item_ext.is_of_type(_item(type_="ring"), ItemType.RING)
    assert not item_ext.is_of_type(_item(type_="ring"), "amulet")
    with pytest.raises(ValueError):
        item_ext.item_type(_item(type_="spaceship"))