"""
Shared fixtures for the resolution engine tests.
"""

import pytest
from character.main import Character
from character.skill import Skill
from core.constants import Ability, EquipmentSlot
from items.catalog import EquipmentCatalog


class SequenceRNG:
    """A random source that replays a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        if not self.values:
            raise AssertionError(f"Unexpected draw randint({a}, {b})")
        value = self.values.pop(0)
        assert a <= value <= b, f"{value} outside [{a}, {b}]"
        self.calls.append((a, b))
        return value


@pytest.fixture
def sequence_rng():
    """Factory for random sources that return the given values in order."""
    return SequenceRNG


@pytest.fixture
def catalog():
    return EquipmentCatalog.from_data(
        [
            {
                "index": "longsword",
                "name": "Longsword",
                "category": "weapon",
                "weapon_category": "martial",
                "weapon_family": "sword",
                "damage_one_handed": {"dice": "1d8", "type": "slashing"},
                "damage_two_handed": {"dice": "1d10", "type": "slashing"},
                "properties": ["versatile"],
            },
            {
                "index": "dagger",
                "name": "Dagger",
                "category": "weapon",
                "weapon_family": "dagger",
                "damage_one_handed": {"dice": "1d4", "type": "piercing"},
                "properties": ["light", "finesse", "thrown"],
            },
            {
                "index": "greataxe",
                "name": "Greataxe",
                "category": "weapon",
                "weapon_category": "martial",
                "weapon_family": "axe",
                "damage_two_handed": {"dice": "1d12", "type": "slashing"},
                "properties": ["heavy", "two-handed"],
            },
            {
                "index": "flame-tongue",
                "name": "Flame Tongue",
                "category": "weapon",
                "rarity": "rare",
                "weapon_category": "martial",
                "weapon_family": "sword",
                "damage_one_handed": {"dice": "1d6", "type": "slashing"},
                "properties": ["light", "finesse"],
                "extra_damages": [{"dice": "1d6", "type": "fire"}],
                "enchantment": 1,
            },
            {
                "index": "leather-armor",
                "name": "Leather Armor",
                "category": "armor",
                "armor_category": "light",
                "armor_class": 11,
            },
            {
                "index": "scale-mail",
                "name": "Scale Mail",
                "category": "armor",
                "armor_category": "medium",
                "armor_class": 14,
                "stealth_disadvantage": True,
            },
            {
                "index": "plate-armor",
                "name": "Plate Armor",
                "category": "armor",
                "armor_category": "heavy",
                "armor_class": 18,
                "stealth_disadvantage": True,
            },
            {
                "index": "shield",
                "name": "Shield",
                "category": "armor",
                "armor_category": "shield",
                "armor_class": 2,
            },
            {
                "index": "ring-of-warmth",
                "name": "Ring of Warmth",
                "category": "ring",
            },
        ]
    )


@pytest.fixture
def fighter():
    """Level 5 fighter with STR 16, proficient with swords, sword and board."""
    return Character(
        index="fighter",
        name="Fighter",
        level=5,
        strength=16,
        dexterity=12,
        constitution=14,
        proficient_weapons={"sword"},
        saving_throws={Ability.STRENGTH, Ability.CONSTITUTION},
        slots={
            EquipmentSlot.MELEE_MAIN_HAND: "longsword",
            EquipmentSlot.MELEE_OFF_HAND: "shield",
            EquipmentSlot.BODY: "scale-mail",
        },
    )


@pytest.fixture
def rogue():
    """Level 1 rogue with DEX 14 over STR 10, dual-wielding daggers."""
    return Character(
        index="rogue",
        name="Rogue",
        level=1,
        strength=10,
        dexterity=14,
        proficient_skills={"stealth", "perception"},
        expertise_skills={"stealth"},
        saving_throws={Ability.DEXTERITY},
        slots={
            "melee_main_hand": "dagger",
            "melee_off_hand": "dagger",
            "body": "leather-armor",
        },
    )


@pytest.fixture
def goblin():
    """An unarmored defender with AC 10."""
    return Character(index="goblin", name="Goblin")


@pytest.fixture
def stealth():
    return Skill(index="stealth", name="Stealth", ability=Ability.DEXTERITY)


@pytest.fixture
def athletics():
    return Skill(index="athletics", name="Athletics", ability=Ability.STRENGTH)
