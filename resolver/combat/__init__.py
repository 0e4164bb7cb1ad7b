"""
Combat resolution module for the d20 resolution engine.

This module resolves ability checks, saving throws, armor class, weapon
attacks and damage against character snapshots.
"""

from .armor_class import ArmorClassResult, armor_class
from .attack import AttackResult, main_hand_attack, off_hand_attack
from .checks import CheckResult, ability_check, saving_throw
from .d20 import RollOutcome, roll20
from .damage import (
    DamageResult,
    DamageRollResult,
    adjust_damage,
    damage_roll,
    resolve_weapon_damage,
)
from .modifiers import (
    Modifier,
    ability_modifier,
    proficiency_bonus,
    saving_throw_modifiers,
    skill_check_modifiers,
    weapon_attack_modifiers,
)
from .ruleset import Ruleset

__all__ = [
    # Import from armor_class.py
    "ArmorClassResult",
    "armor_class",
    # Import from attack.py
    "AttackResult",
    "main_hand_attack",
    "off_hand_attack",
    # Import from checks.py
    "CheckResult",
    "ability_check",
    "saving_throw",
    # Import from d20.py
    "RollOutcome",
    "roll20",
    # Import from damage.py
    "DamageResult",
    "DamageRollResult",
    "adjust_damage",
    "damage_roll",
    "resolve_weapon_damage",
    # Import from modifiers.py
    "Modifier",
    "ability_modifier",
    "proficiency_bonus",
    "saving_throw_modifiers",
    "skill_check_modifiers",
    "weapon_attack_modifiers",
    # Import from ruleset.py
    "Ruleset",
]
