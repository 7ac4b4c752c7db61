"""Equipment sets and the slots they fill."""

from dataclasses import dataclass, fields
from enum import Enum

from .effects import DamageType, HasEffects
from .errors import InvalidGearError
from .models import ItemSchema, SimpleItemSchema
from .simulator import average_dmg, critless_dmg, simulate_hit


def _round(value):
    """Round half away from zero."""
    if value >= 0:
        return int(value + 0.5)
    return -int(-value + 0.5)


class Slot(Enum):
    """Equipment slots, in the order the game iterates them."""

    WEAPON = "weapon"
    SHIELD = "shield"
    HELMET = "helmet"
    BODY_ARMOR = "body_armor"
    LEG_ARMOR = "leg_armor"
    BOOTS = "boots"
    RING1 = "ring1"
    RING2 = "ring2"
    AMULET = "amulet"
    ARTIFACT1 = "artifact1"
    ARTIFACT2 = "artifact2"
    ARTIFACT3 = "artifact3"
    UTILITY1 = "utility1"
    UTILITY2 = "utility2"
    BAG = "bag"
    RUNE = "rune"

    def __str__(self):
        return self.value

    def max_quantity(self):
        """How many items of one kind the slot can hold."""
        return 100 if self in (Slot.UTILITY1, Slot.UTILITY2) else 1


_UNIQUE_PAIRS = (
    ("utility1", "utility2"),
    ("artifact1", "artifact2"),
    ("artifact2", "artifact3"),
    ("artifact1", "artifact3"),
)

_ALIGNED_PAIRS = (
    ("ring1", "ring2"),
    ("utility1", "utility2"),
    ("artifact1", "artifact2"),
    ("artifact1", "artifact3"),
    ("artifact2", "artifact3"),
)

_LABELS = (
    ("weapon", "Weapon"),
    ("shield", "Shield"),
    ("helmet", "Helmet"),
    ("body_armor", "Body Armor"),
    ("leg_armor", "Leg Armor"),
    ("boots", "Boots"),
    ("ring1", "Ring 1"),
    ("ring2", "Ring 2"),
    ("amulet", "Amulet"),
    ("artifact1", "Artifact 1"),
    ("artifact2", "Artifact 2"),
    ("artifact3", "Artifact 3"),
    ("utility1", "Consumable 1"),
    ("utility2", "Consumable 2"),
)


@dataclass(kw_only=True)
class Gear(HasEffects):
    """A full set of equipped items.

    Raises InvalidGearError when both utilities, or two artifacts, share a code.
    """

    weapon: ItemSchema | None = None
    helmet: ItemSchema | None = None
    shield: ItemSchema | None = None
    body_armor: ItemSchema | None = None
    leg_armor: ItemSchema | None = None
    boots: ItemSchema | None = None
    amulet: ItemSchema | None = None
    ring1: ItemSchema | None = None
    ring2: ItemSchema | None = None
    utility1: ItemSchema | None = None
    utility2: ItemSchema | None = None
    artifact1: ItemSchema | None = None
    artifact2: ItemSchema | None = None
    artifact3: ItemSchema | None = None

    def __post_init__(self):
        for first, second in _UNIQUE_PAIRS:
            a, b = getattr(self, first), getattr(self, second)
            if a is not None and b is not None and a.code == b.code:
                raise InvalidGearError(f"{first} and {second} both hold '{a.code}'")

    def slot(self, slot):
        """Item equipped in ``slot``, or None."""
        slot = Slot(slot)
        if slot in (Slot.BAG, Slot.RUNE):
            return None
        return getattr(self, slot.value)

    def _equipped(self):
        return (item for item in (self.slot(s) for s in Slot) if item is not None)

    def average_damage_against(self, monster):
        return sum(
            _round(
                average_dmg(
                    self.attack_damage(t),
                    self.damage_increase(t),
                    self.critical_strike(),
                    monster.resistance(t),
                )
            )
            for t in DamageType
        )

    def average_damage_from(self, monster):
        return sum(
            _round(
                average_dmg(
                    monster.attack_damage(t),
                    0,
                    self.critical_strike(),
                    self.resistance(t),
                )
            )
            for t in DamageType
        )

    def critless_damage_against(self, monster):
        return sum(
            _round(
                critless_dmg(
                    self.attack_damage(t),
                    self.damage_increase(t),
                    monster.resistance(t),
                )
            )
            for t in DamageType
        )

    def critless_damage_from(self, monster):
        return sum(
            _round(critless_dmg(monster.attack_damage(t), 0, self.resistance(t)))
            for t in DamageType
        )

    def simulate_hits_against(self, monster):
        """One rolled hit per damage type dealt to ``monster``."""
        return [
            simulate_hit(
                self.attack_damage(t),
                self.damage_increase(t),
                self.critical_strike(),
                t,
                monster.resistance(t),
            )
            for t in DamageType
        ]

    def simulate_hits_from(self, monster):
        """Rolled hits received from ``monster``, without the harmless ones."""
        hits = (
            simulate_hit(
                monster.attack_damage(t),
                0,
                monster.critical_strike(),
                t,
                self.resistance(t),
            )
            for t in DamageType
        )
        return [hit for hit in hits if hit.damage > 0]

    def align_to(self, other):
        """Swap interchangeable slots so that shared items sit where ``other`` has them."""
        for first, second in _ALIGNED_PAIRS:
            mine_first, mine_second = getattr(self, first), getattr(self, second)
            theirs_first, theirs_second = getattr(other, first), getattr(other, second)
            if (
                mine_first is not None
                and theirs_second is not None
                and mine_first == theirs_second
            ) or (
                mine_second is not None
                and theirs_first is not None
                and mine_second == theirs_first
            ):
                setattr(self, first, mine_second)
                setattr(self, second, mine_first)

    def attack_damage(self, damage_type):
        return 0 if self.weapon is None else self.weapon.attack_damage(damage_type)

    def effect_value(self, effect):
        return sum(item.effect_value(effect) for item in self._equipped())

    def effects(self):
        return []

    def to_items(self):
        """Items and quantities that make up the ring slots of this gear."""
        result = [
            SimpleItemSchema(code=item.code, quantity=Slot(s).max_quantity())
            for s in (Slot.RING1, Slot.RING2)
            if (item := self.slot(s)) is not None
        ]
        r1, r2 = self.ring1, self.ring2
        if r1 is not None and r2 is not None:
            if r1 == r2:
                result.append(SimpleItemSchema(code=r1.code, quantity=2))
            else:
                result.append(SimpleItemSchema(code=r1.code, quantity=1))
                result.append(SimpleItemSchema(code=r2.code, quantity=1))
        elif r1 is not None or r2 is not None:
            ring = r1 if r1 is not None else r2
            result.append(SimpleItemSchema(code=ring.code, quantity=1))
        return result

    def __str__(self):
        lines = []
        for name, label in _LABELS:
            item = getattr(self, name)
            lines.append(f"{label}: {item.name if item is not None else None}\n")
        return "".join(lines)


GEAR_FIELDS = tuple(f.name for f in fields(Gear))