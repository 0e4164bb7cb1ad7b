"""
Character snapshot module for the resolution engine.

Defines the read-only view of a character that the engine resolves checks,
attacks and damage against. The character-management layer owns and mutates
characters; the engine only reads them.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field, field_validator

from core.constants import Ability, DamageType, EquipmentSlot, adapt_keys_to_enum


class Character(BaseModel):
    """
    Represents a character as seen by the resolution engine.

    Attributes:
        index (str):
            Unique identifier of the character.
        name (str):
            The name of the character.
        level (int):
            The character level, from 1 to 20.
        strength, dexterity, constitution, intelligence, wisdom, charisma (int):
            The six ability scores, from 1 to 30.
        proficient_skills (set[str]):
            Skill ids the character is proficient in.
        expertise_skills (set[str]):
            Skill ids the character has expertise in.
        proficient_weapons (set[str]):
            Weapon families the character is proficient with.
        proficient_armor (set[str]):
            Armor categories the character is proficient with.
        saving_throws (set[Ability]):
            Abilities the character adds proficiency to on saving throws.
        slots (dict[EquipmentSlot, str]):
            The equipped item id of each occupied slot.
        resistances, vulnerabilities, immunities (set[DamageType]):
            The damage adjustments of the character.

    """

    index: str = Field(description="Unique identifier of the character.")
    name: str = Field(description="The name of the character.")
    level: int = Field(default=1, ge=1, le=20)

    strength: int = Field(default=10, ge=1, le=30)
    dexterity: int = Field(default=10, ge=1, le=30)
    constitution: int = Field(default=10, ge=1, le=30)
    intelligence: int = Field(default=10, ge=1, le=30)
    wisdom: int = Field(default=10, ge=1, le=30)
    charisma: int = Field(default=10, ge=1, le=30)

    proficient_skills: set[str] = Field(default_factory=set)
    expertise_skills: set[str] = Field(default_factory=set)
    proficient_weapons: set[str] = Field(default_factory=set)
    proficient_armor: set[str] = Field(default_factory=set)
    saving_throws: set[Ability] = Field(default_factory=set)

    slots: dict[EquipmentSlot, str] = Field(default_factory=dict)

    resistances: set[DamageType] = Field(default_factory=set)
    vulnerabilities: set[DamageType] = Field(default_factory=set)
    immunities: set[DamageType] = Field(default_factory=set)

    @field_validator("slots", mode="before")
    @classmethod
    def _adapt_slot_keys(cls, value: Any) -> Any:
        # Accept both slot values ("body") and names ("BODY") as keys.
        if isinstance(value, dict):
            return adapt_keys_to_enum(EquipmentSlot, value)
        return value

    def score(self, ability: Ability) -> int:
        """
        Returns the score of an ability.

        Args:
            ability (Ability): The ability to read.

        Returns:
            int: The ability score.

        """
        return _SCORE_GETTERS[ability](self)

    def equipped(self, slot: EquipmentSlot) -> str | None:
        """
        Returns the id of the item equipped in a slot.

        Args:
            slot (EquipmentSlot): The slot to read.

        Returns:
            str | None: The item id, or None if the slot is empty.

        """
        return self.slots.get(slot) or None


_SCORE_GETTERS: dict[Ability, Callable[[Character], int]] = {
    Ability.STRENGTH: lambda c: c.strength,
    Ability.DEXTERITY: lambda c: c.dexterity,
    Ability.CONSTITUTION: lambda c: c.constitution,
    Ability.INTELLIGENCE: lambda c: c.intelligence,
    Ability.WISDOM: lambda c: c.wisdom,
    Ability.CHARISMA: lambda c: c.charisma,
}
