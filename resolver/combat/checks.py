"""
Checks module for the resolution engine.

Ability checks and saving throws: a character's modifiers for the skill or
ability are collected and rolled against a difficulty class.
"""

from pydantic import Field

from character.main import Character
from character.skill import Skill
from core.constants import Ability, RollType
from core.dice_parser import RandomSource
from core.error_handling import require_enum_type

from .d20 import RollOutcome, roll20
from .modifiers import saving_throw_modifiers, skill_check_modifiers


class CheckResult(RollOutcome):
    """A d20 roll made for a skill check or a saving throw."""

    ability: Ability = Field(description="The ability the check is made with.")
    skill: Skill | None = Field(
        default=None,
        description="The skill checked, None for a saving throw.",
    )


def ability_check(
    character: Character,
    skill: Skill,
    difficulty_class: int,
    type: RollType | str = RollType.NORMAL,
    rng: RandomSource | None = None,
) -> CheckResult:
    """
    Rolls a skill check against a difficulty class.

    Args:
        character (Character): The character making the check.
        skill (Skill): The skill being checked.
        difficulty_class (int): The DC to meet or beat.
        type (RollType | str): Normal, advantage or disadvantage.
        rng (RandomSource | None): Random source, the default roller if None.

    Returns:
        CheckResult: The roll, with the skill it was made for.

    """
    outcome = roll20(skill_check_modifiers(character, skill), difficulty_class, type, rng)
    return CheckResult(**outcome.model_dump(), ability=skill.ability, skill=skill)


def saving_throw(
    character: Character,
    ability: Ability | str,
    difficulty_class: int,
    type: RollType | str = RollType.NORMAL,
    rng: RandomSource | None = None,
) -> CheckResult:
    """Rolls a saving throw with an ability against a difficulty class."""
    ability = require_enum_type(ability, Ability, "ability")
    outcome = roll20(saving_throw_modifiers(character, ability), difficulty_class, type, rng)
    return CheckResult(**outcome.model_dump(), ability=ability)
