"""Fight, damage and cooldown estimates."""

import math
import random
from dataclasses import dataclass

from .effects import DamageType
from .models import FightResult

BASE_HP = 115
MAX_TURN = 100
HP_PER_LEVEL = 5
CRIT_MULTIPLIER = 1.5


@dataclass
class Fight:
    """Outcome of a simulated fight."""

    turns: int
    hp: int
    monster_hp: int
    hp_lost: int
    result: FightResult
    cd: int


@dataclass
class Hit:
    """A single elemental hit."""

    damage_type: DamageType
    damage: int
    is_crit: bool


def _round(value):
    """Round half away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def _tdiv(a, b):
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _restore(gear):
    return sum(u.restore() for u in (gear.utility1, gear.utility2) if u is not None)


def _fight(turns, hp, starting_hp, monster_hp, gear):
    return Fight(
        turns=turns,
        hp=hp,
        monster_hp=monster_hp,
        hp_lost=starting_hp - hp,
        result=FightResult.LOSS if hp <= 0 or turns > MAX_TURN else FightResult.WIN,
        cd=fight_cd(gear.haste(), turns),
    )


def average_fight(level, missing_hp, gear, monster, ignore_death):
    """Simulate a fight using average damage on every turn."""
    max_hp = BASE_HP + HP_PER_LEVEL * level + gear.health()
    starting_hp = max_hp - missing_hp
    hp = starting_hp
    monster_hp = monster.hp
    turns = 1
    while True:
        if turns % 2 == 1:
            damage = gear.average_damage_against(monster)
            monster_hp -= damage
            hp += _tdiv(damage * gear.lifesteal(), 100)
            if monster_hp <= 0:
                break
            if turns > 1:
                monster_hp -= gear.poison()
        else:
            if hp < _tdiv(max_hp, 2):
                hp += _restore(gear)
            damage = gear.average_damage_from(monster)
            hp -= damage
            monster_hp += _tdiv(damage * gear.lifesteal(), 100)
            if turns > 2:
                hp -= monster.poison()
            if hp <= 0 and not ignore_death:
                break
        if turns >= MAX_TURN:
            break
        turns += 1
    return _fight(turns, hp, starting_hp, monster_hp, gear)


def random_fight(level, missing_hp, gear, monster, ignore_death):
    """Simulate a fight with randomly rolled critical hits."""
    max_hp = BASE_HP + HP_PER_LEVEL * level + gear.health()
    starting_hp = max_hp - missing_hp
    hp = starting_hp
    monster_hp = monster.hp
    turns = 1
    while True:
        if turns % 2 == 1:
            for hit in gear.simulate_hits_against(monster):
                monster_hp -= hit.damage
                if monster_hp <= 0:
                    break
                if hit.is_crit:
                    hp += _tdiv(hit.damage * gear.lifesteal(), 100)
            if turns > 1:
                monster_hp -= gear.poison()
            if monster_hp <= 0:
                break
        else:
            if hp < _tdiv(max_hp, 2):
                hp += _restore(gear)
            for hit in gear.simulate_hits_from(monster):
                hp -= hit.damage
                if hp <= 0:
                    break
                if hit.is_crit:
                    monster_hp += _tdiv(hit.damage * monster.lifesteal(), 100)
            if turns > 2:
                hp -= monster.poison()
            if hp <= 0 and not ignore_death:
                break
        if turns >= MAX_TURN:
            break
        turns += 1
    return _fight(turns, hp, starting_hp, monster_hp, gear)


def _base_dmg(attack_damage, damage_increase):
    return attack_damage + attack_damage * damage_increase * 0.01


def average_dmg(attack_damage, damage_increase, critical_strike, target_resistance):
    """Average damage of an attack against the given resistance."""
    dmg = _base_dmg(attack_damage, damage_increase)
    dmg += dmg * (critical_strike / 100.0) / 2.0
    dmg -= dmg * target_resistance * 0.01
    return dmg


def critless_dmg(attack_damage, damage_increase, target_resistance):
    """Damage of a non-critical attack against the given resistance."""
    dmg = _base_dmg(attack_damage, damage_increase)
    dmg -= dmg * target_resistance * 0.01
    return dmg


def simulate_dmg(attack_damage, damage_increase, critical_strike, target_resistance):
    """Damage of one attack with a randomly rolled critical strike."""
    dmg = _base_dmg(attack_damage, damage_increase)
    if random.randint(0, 100) <= critical_strike:
        dmg *= CRIT_MULTIPLIER
    dmg -= dmg * target_resistance * 0.01
    return dmg


def simulate_hit(attack_damage, damage_increase, critical_strike, damage_type, target_resistance):
    """Roll one hit of the given type."""
    damage = _base_dmg(attack_damage, damage_increase)
    is_crit = random.randint(0, 100) <= critical_strike
    if is_crit:
        damage *= CRIT_MULTIPLIER
    damage -= damage * target_resistance * 0.01
    return Hit(damage_type=damage_type, damage=_round(damage), is_crit=is_crit)


def time_to_rest(health):
    """Seconds of rest needed to recover ``health`` points."""
    quotient = _tdiv(health, 5)
    remainder = health - quotient * 5
    return quotient + (1 if remainder > 0 else 0)


def fight_cd(haste, turns):
    """Cooldown after a fight lasting ``turns`` turns."""
    return max(5, _round(turns * 2 - (haste * 0.01) * (turns * 2)))


def gather_cd(resource_level, cooldown_reduction):
    """Cooldown of one gathering action."""
    return int((30.0 + resource_level / 2.0) * (1.0 + cooldown_reduction / 100.0))