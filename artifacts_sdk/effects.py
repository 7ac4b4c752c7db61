"""Damage types, effect codes and the effect lookups shared by items, monsters and gear."""

from abc import ABC, abstractmethod
from enum import Enum


def _code(value):
    return value.value if isinstance(value, Enum) else str(value)


class DamageType(Enum):
    """Elemental damage types, in the order the game iterates them."""

    AIR = "air"
    EARTH = "earth"
    FIRE = "fire"
    WATER = "water"

    def __str__(self):
        return self.value


class EffectType(Enum):
    """Known effect codes."""

    CRITICAL_STRIKE = "critical_strike"
    BURN = "burn"
    POISON = "poison"
    HASTE = "haste"
    PROSPECTING = "prospecting"
    WISDOM = "wisdom"
    RESTORE = "restore"
    HP = "hp"
    BOOST_HP = "boost_hp"
    HEAL = "heal"
    HEALING = "healing"
    LIFESTEAL = "lifesteal"
    INVENTORY_SPACE = "inventory_space"

    ATTACK_FIRE = "attack_fire"
    ATTACK_EARTH = "attack_earth"
    ATTACK_WATER = "attack_water"
    ATTACK_AIR = "attack_air"

    DMG = "dmg"
    DMG_FIRE = "dmg_fire"
    DMG_EARTH = "dmg_earth"
    DMG_WATER = "dmg_water"
    DMG_AIR = "dmg_air"

    BOOST_DMG_FIRE = "boost_dmg_fire"
    BOOST_DMG_EARTH = "boost_dmg_earth"
    BOOST_DMG_WATER = "boost_dmg_water"
    BOOST_DMG_AIR = "boost_dmg_air"
    RES_DMG_FIRE = "res_dmg_fire"
    RES_DMG_EARTH = "res_dmg_earth"
    RES_DMG_WATER = "res_dmg_water"
    RES_DMG_AIR = "res_dmg_air"

    MINING = "mining"
    WOODCUTTING = "woodcutting"
    FISHING = "fishing"
    ALCHEMY = "alchemy"

    RECONSTITUTION = "reconstitution"
    CORRUPTED = "corrupted"

    def __str__(self):
        return self.value


class HasEffects(ABC):
    """Mixin deriving combat and skill stats from a list of effects."""

    @abstractmethod
    def effects(self):
        """Return the effects carried by this object."""

    def effect_value(self, effect):
        """Value of the first effect with the given code, or 0."""
        code = _code(effect)
        return next((e.value for e in self.effects() if e.code == code), 0)

    def health(self):
        hp = self.effect_value("hp")
        return self.effect_value("boost_hp") if hp < 1 else hp

    def heal(self):
        return self.effect_value("heal")

    def restore(self):
        return self.effect_value("restore")

    def haste(self):
        return self.effect_value("haste")

    def attack_damage(self, damage_type):
        return self.effect_value(f"attack_{_code(damage_type)}")

    def damage_increase(self, damage_type):
        name = _code(damage_type)
        return (
            self.effect_value(f"dmg_{name}")
            + self.effect_value(f"boost_dmg_{name}")
            + self.effect_value("dmg")
        )

    def critical_strike(self):
        return self.effect_value("critical_strike")

    def poison(self):
        return self.effect_value("poison")

    def lifesteal(self):
        return self.effect_value("lifesteal")

    def resistance(self, damage_type):
        return self.effect_value(f"res_{_code(damage_type)}")

    def wisdom(self):
        return self.effect_value("wisdom")

    def prospecting(self):
        return self.effect_value("prospecting")

    def skill_cooldown_reduction(self, skill):
        return self.effect_value(_code(skill))

    def inventory_space(self):
        return self.effect_value("inventory_space")