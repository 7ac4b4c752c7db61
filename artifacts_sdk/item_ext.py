"""Item categories and helpers computed from a single item schema."""

from dataclasses import replace
from enum import Enum

from .consts import TASKS_REWARDS_SPECIFICS
from .effects import DamageType
from .gear import Slot
from .simulator import average_dmg


class ItemType(Enum):
    """Item types as reported by the API."""

    CONSUMABLE = "consumable"
    BODY_ARMOR = "body_armor"
    WEAPON = "weapon"
    RESOURCE = "resource"
    LEG_ARMOR = "leg_armor"
    HELMET = "helmet"
    BOOTS = "boots"
    SHIELD = "shield"
    AMULET = "amulet"
    RING = "ring"
    ARTIFACT = "artifact"
    CURRENCY = "currency"
    UTILITY = "utility"
    BAG = "bag"
    RUNE = "rune"

    def __str__(self):
        return self.value

    @classmethod
    def from_slot(cls, slot):
        """Type of item that fits in ``slot``."""
        return _SLOT_TYPES[Slot(slot)]


_SLOT_TYPES = {
    Slot.WEAPON: ItemType.WEAPON,
    Slot.SHIELD: ItemType.SHIELD,
    Slot.HELMET: ItemType.HELMET,
    Slot.BODY_ARMOR: ItemType.BODY_ARMOR,
    Slot.LEG_ARMOR: ItemType.LEG_ARMOR,
    Slot.BOOTS: ItemType.BOOTS,
    Slot.RING1: ItemType.RING,
    Slot.RING2: ItemType.RING,
    Slot.AMULET: ItemType.AMULET,
    Slot.ARTIFACT1: ItemType.ARTIFACT,
    Slot.ARTIFACT2: ItemType.ARTIFACT,
    Slot.ARTIFACT3: ItemType.ARTIFACT,
    Slot.UTILITY1: ItemType.UTILITY,
    Slot.UTILITY2: ItemType.UTILITY,
    Slot.BAG: ItemType.BAG,
    Slot.RUNE: ItemType.RUNE,
}


class SubType(Enum):
    """Item subtypes as reported by the API."""

    MINING = "mining"
    WOODCUTTING = "woodcutting"
    FISHING = "fishing"
    FOOD = "food"
    BAR = "bar"
    PLANK = "plank"
    MOB = "mob"

    def __str__(self):
        return self.value


def craft_schema(item):
    """Crafting recipe of ``item``, or None."""
    return item.craft


def is_craftable(item):
    return craft_schema(item) is not None


def mats(item):
    """Copies of the materials needed to craft ``item`` once."""
    craft = craft_schema(item)
    if craft is None or craft.items is None:
        return []
    return [replace(m) for m in craft.items]


def is_crafted_with(item, code):
    """Whether ``code`` is a direct material of ``item``."""
    return any(m.code == code for m in mats(item))


def mats_quantity(item):
    """Total quantity of materials needed to craft ``item``."""
    return sum(m.quantity for m in mats(item))


def recycled_quantity(item):
    """Quantity of materials obtained back when recycling ``item``."""
    return -(-mats_quantity(item) // 5)


def skill_to_craft(item):
    """Skill code used to craft ``item``, or None."""
    craft = craft_schema(item)
    return None if craft is None else craft.skill


def is_crafted_from_task(item):
    """Whether ``item`` needs a task-reward material."""
    return any(is_crafted_with(item, code) for code in TASKS_REWARDS_SPECIFICS)


def attack_damage_against(item, monster):
    """Average damage ``item`` deals to ``monster`` on its own."""
    return sum(
        average_dmg(item.attack_damage(t), 0, item.critical_strike(), monster.resistance(t))
        for t in DamageType
    )


def damage_increase_against_with(item, monster, weapon):
    """Extra average damage ``item`` adds to ``weapon`` against ``monster``."""
    boosted = sum(
        average_dmg(
            weapon.attack_damage(t),
            item.damage_increase(t),
            item.critical_strike(),
            monster.resistance(t),
        )
        for t in DamageType
    )
    plain = sum(
        average_dmg(weapon.attack_damage(t), 0, item.critical_strike(), monster.resistance(t))
        for t in DamageType
    )
    return boosted - plain


def damage_reduction_against(item, monster):
    """Average damage from ``monster`` that ``item`` prevents."""
    unprotected = sum(
        average_dmg(monster.attack_damage(t), 0, monster.critical_strike(), 0)
        for t in DamageType
    )
    protected = sum(
        average_dmg(
            monster.attack_damage(t), 0, monster.critical_strike(), item.resistance(t)
        )
        for t in DamageType
    )
    return unprotected - protected


def is_of_type(item, item_type):
    return item.type == ItemType(item_type).value


def is_consumable(item):
    return is_of_type(item, ItemType.CONSUMABLE)


def is_food(item):
    return is_consumable(item) and item.heal() > 0


def item_type(item):
    """Type of ``item``; raises ValueError for an unknown type."""
    return ItemType(item.type)