"""
Constants and enumerations for the resolution engine.

Defines the rule constants and the enumerations for abilities, damage types,
armor categories, equipment slots, weapon properties and roll types used
throughout the engine.
"""

from enum import Enum
from typing import Any

# Armor class of a creature wearing no body armor.
UNARMORED_AC = 10
# Highest dexterity bonus medium armor lets through.
MEDIUM_ARMOR_DEX_CAP = 2
# Natural d20 results that bypass modifiers and targets.
CRITICAL_SUCCESS = 20
CRITICAL_FAILURE = 1
# Notation of the die used by every check, attack and saving throw.
D20 = "1d20"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().replace("_", " ").capitalize()


class Ability(NiceEnum):
    """Defines the six ability scores."""

    STRENGTH = "strength"
    DEXTERITY = "dexterity"
    CONSTITUTION = "constitution"
    INTELLIGENCE = "intelligence"
    WISDOM = "wisdom"
    CHARISMA = "charisma"

    @property
    def short_name(self) -> str:
        """Returns the 3-letter abbreviation for the ability."""
        return {
            Ability.STRENGTH: "STR",
            Ability.DEXTERITY: "DEX",
            Ability.CONSTITUTION: "CON",
            Ability.INTELLIGENCE: "INT",
            Ability.WISDOM: "WIS",
            Ability.CHARISMA: "CHA",
        }.get(self, "UNK")


class DamageType(NiceEnum):
    """Defines various types of damage that can be inflicted."""

    BLUDGEONING = "bludgeoning"
    PIERCING = "piercing"
    SLASHING = "slashing"
    ACID = "acid"
    COLD = "cold"
    FIRE = "fire"
    FORCE = "force"
    LIGHTNING = "lightning"
    NECROTIC = "necrotic"
    POISON = "poison"
    PSYCHIC = "psychic"
    RADIANT = "radiant"
    THUNDER = "thunder"

    @property
    def is_physical(self) -> bool:
        """Whether this is one of the three weapon damage types."""
        return self in (
            DamageType.BLUDGEONING,
            DamageType.PIERCING,
            DamageType.SLASHING,
        )


class DamageAdjustment(NiceEnum):
    """Defines the adjustments a defender can apply to incoming damage."""

    IMMUNITY = "immunity"
    RESISTANCE = "resistance"
    VULNERABILITY = "vulnerability"


class RollType(NiceEnum):
    """Defines how the two d20s of a check are combined."""

    NORMAL = "normal"
    ADVANTAGE = "advantage"
    DISADVANTAGE = "disadvantage"


class EquipmentCategory(NiceEnum):
    """Defines the kind of an equipment entry."""

    WEAPON = "weapon"
    ARMOR = "armor"
    HEADWEAR = "headwear"
    CLOAK = "cloak"
    HANDWEAR = "handwear"
    FOOTWEAR = "footwear"
    RING = "ring"
    AMULET = "amulet"


class ArmorCategory(NiceEnum):
    """Defines the category of an armor piece."""

    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"
    SHIELD = "shield"

    @property
    def is_body_armor(self) -> bool:
        """Whether pieces of this category are worn in the body slot."""
        return self != ArmorCategory.SHIELD


class WeaponProperty(NiceEnum):
    """Defines the properties a weapon can carry."""

    LIGHT = "light"
    FINESSE = "finesse"
    THROWN = "thrown"
    VERSATILE = "versatile"
    HEAVY = "heavy"
    TWO_HANDED = "two-handed"
    MELEE = "melee"
    RANGED = "ranged"


class EquipmentSlot(NiceEnum):
    """Defines the slots a character can equip items in."""

    HEAD = "head"
    CLOAK = "cloak"
    BODY = "body"
    HAND = "hand"
    FOOT = "foot"
    MELEE_MAIN_HAND = "melee_main_hand"
    MELEE_OFF_HAND = "melee_off_hand"
    RANGED_MAIN_HAND = "ranged_main_hand"
    RANGED_OFF_HAND = "ranged_off_hand"
    RING_1 = "ring_1"
    RING_2 = "ring_2"
    AMULET = "amulet"


def adapt_keys_to_enum(enum_class: Any, data: dict[Any, Any]) -> dict[Any, Any]:
    """
    Converts dictionary keys to the specified enumeration type.

    String keys are matched against member values first and member names
    second, so both ``"melee_main_hand"`` and ``"MELEE_MAIN_HAND"`` work.

    Args:
        enum_class (Any):
            The enumeration class to convert keys to.
        data (dict[Any, Any]):
            The input dictionary with keys to convert.

    Returns:
        dict[Any, Any]:
            A new dictionary with keys converted to the specified enum type.

    Raises:
        ValueError: If a string key matches neither a value nor a name.
    """
    adapted: dict[Any, Any] = {}
    for key, value in data.items():
        if isinstance(key, str):
            try:
                key = enum_class(key)
            except ValueError:
                if key not in enum_class.__members__:
                    raise
                key = enum_class[key]
        adapted[key] = value
    return adapted
