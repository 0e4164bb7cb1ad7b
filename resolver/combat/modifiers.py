"""
Modifier aggregation module for the resolution engine.

Builds the ordered lists of named numeric modifiers a character brings to a
skill check, a saving throw or a weapon attack. Zero-valued modifiers are
never created: every builder returns None instead.
"""

import math
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from character.main import Character
from character.skill import Skill
from core.constants import Ability
from core.error_handling import require_positive
from items.weapon import Weapon


class Modifier(BaseModel):
    """A named numeric adjustment to a roll."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(
        description="Semantic tag, e.g. 'ability_strength' or 'shield_bonus'.",
    )
    index: str | None = Field(
        default=None,
        description="The id of the trait or item the modifier comes from.",
    )
    value: int = Field(
        description="The amount added to the roll.",
    )

    def __str__(self) -> str:
        return f"{self.source} {self.value:+d}"


def make_modifier(source: str, value: int, index: str | None = None) -> Modifier | None:
    """
    Creates a modifier, or nothing when the value is zero.

    Args:
        source (str): The semantic tag of the modifier.
        value (int): The amount added to the roll.
        index (str | None): The id of the trait or item it comes from.

    Returns:
        Modifier | None: The modifier, or None if the value is zero.

    """
    if value == 0:
        return None
    return Modifier(source=source, index=index, value=value)


def sum_modifiers(modifiers: Iterable[Modifier]) -> int:
    """Returns the sum of the values of a list of modifiers."""
    return sum(modifier.value for modifier in modifiers)


# ============================================================================
# BASE FORMULAS
# ============================================================================


def ability_modifier(score: int) -> int:
    """
    Calculates the D&D ability score modifier.

    Args:
        score (int): The ability score.

    Returns:
        int: ``floor((score - 10) / 2)``.

    Raises:
        InvalidScore: If the score is less than 1.

    """
    require_positive(score, "ability score")
    return (score - 10) // 2


def proficiency_bonus(level: int) -> int:
    """
    Calculates the proficiency bonus for a character level.

    Args:
        level (int): The character level.

    Returns:
        int: ``ceil(level / 4) + 1``.

    Raises:
        InvalidScore: If the level is less than 1.

    """
    require_positive(level, "level")
    return math.ceil(level / 4) + 1


# ============================================================================
# CHARACTER MODIFIERS
# ============================================================================


def ability_score_modifier(character: Character, ability: Ability) -> Modifier | None:
    """
    Returns the modifier a character gets from one of its ability scores.

    Args:
        character (Character): The character.
        ability (Ability): The ability to read.

    Returns:
        Modifier | None: The modifier, or None if it is zero.

    """
    value = ability_modifier(character.score(ability))
    return make_modifier(f"ability_{ability.value}", value, ability.value)


def skill_proficiency(character: Character, skill: Skill) -> Modifier | None:
    """
    Returns the proficiency or expertise modifier for a skill, if any.

    Expertise supersedes proficiency: a skill listed in both sets yields a
    single expertise modifier worth twice the proficiency bonus.

    Args:
        character (Character): The character.
        skill (Skill): The skill being checked.

    Returns:
        Modifier | None: The modifier, or None if not proficient.

    """
    bonus = proficiency_bonus(character.level)
    if skill.index in character.expertise_skills:
        return make_modifier(f"expertise_{skill.index}", bonus * 2, skill.index)
    if skill.index in character.proficient_skills:
        return make_modifier(f"proficiency_{skill.index}", bonus, skill.index)
    return None


def skill_check_modifiers(character: Character, skill: Skill) -> list[Modifier]:
    """
    Collects the modifiers of a skill check.

    Args:
        character (Character): The character making the check.
        skill (Skill): The skill being checked.

    Returns:
        list[Modifier]: Ability modifier then proficiency or expertise.

    """
    candidates = (
        ability_score_modifier(character, skill.ability),
        skill_proficiency(character, skill),
    )
    return [modifier for modifier in candidates if modifier]


def saving_throw_modifiers(character: Character, ability: Ability) -> list[Modifier]:
    """
    Collects the modifiers of a saving throw.

    Args:
        character (Character): The character making the saving throw.
        ability (Ability): The ability the saving throw is made with.

    Returns:
        list[Modifier]: Ability modifier then proficiency, if proficient.

    """
    modifiers: list[Modifier] = []
    ability_mod = ability_score_modifier(character, ability)
    if ability_mod:
        modifiers.append(ability_mod)
    if ability in character.saving_throws:
        proficiency = make_modifier(
            f"saving_throw_{ability.value}",
            proficiency_bonus(character.level),
            ability.value,
        )
        if proficiency:
            modifiers.append(proficiency)
    return modifiers


# ============================================================================
# WEAPON MODIFIERS
# ============================================================================


def weapon_ability(character: Character, weapon: Weapon) -> Ability:
    """
    Picks the ability an attack with a weapon is made with.

    Strength, unless the weapon is finesse and the character's Dexterity
    score is strictly higher than its Strength score.

    Args:
        character (Character): The attacker.
        weapon (Weapon): The weapon.

    Returns:
        Ability: Strength or Dexterity.

    """
    if weapon.is_finesse and character.dexterity > character.strength:
        return Ability.DEXTERITY
    return Ability.STRENGTH


def weapon_proficiency(character: Character, weapon: Weapon) -> Modifier | None:
    """Returns the proficiency modifier for a weapon family, if proficient."""
    if weapon.weapon_family not in character.proficient_weapons:
        return None
    return make_modifier(
        f"proficiency_{weapon.weapon_family}",
        proficiency_bonus(character.level),
        weapon.weapon_family,
    )


def weapon_attack_modifiers(character: Character, weapon: Weapon) -> list[Modifier]:
    """
    Collects the attack roll modifiers of a weapon attack.

    Args:
        character (Character): The attacker.
        weapon (Weapon): The weapon.

    Returns:
        list[Modifier]: Acting ability modifier then weapon proficiency.

    """
    candidates = (
        ability_score_modifier(character, weapon_ability(character, weapon)),
        weapon_proficiency(character, weapon),
    )
    return [modifier for modifier in candidates if modifier]
