"""
Core system module for the d20 resolution engine.

This module contains the fundamental components shared by the rest of the
engine, including rule constants, dice parsing and rolling, the error
taxonomy and logging.
"""

from .constants import (
    Ability,
    ArmorCategory,
    DamageAdjustment,
    DamageType,
    EquipmentCategory,
    EquipmentSlot,
    RollType,
    WeaponProperty,
)
from .dice_parser import (
    DiceRoller,
    DiceSpec,
    RandomSource,
    RollBreakdown,
    parse_dice,
    roll_and_describe,
    roll_dice,
)
from .error_handling import (
    InvalidNotation,
    InvalidOffhand,
    InvalidScore,
    MissingDamageProfile,
    NotFound,
    ResolutionError,
    WrongCategory,
)

__all__ = [
    # Import from constants.py
    "Ability",
    "ArmorCategory",
    "DamageAdjustment",
    "DamageType",
    "EquipmentCategory",
    "EquipmentSlot",
    "RollType",
    "WeaponProperty",
    # Import from dice_parser.py
    "DiceRoller",
    "DiceSpec",
    "RandomSource",
    "RollBreakdown",
    "parse_dice",
    "roll_and_describe",
    "roll_dice",
    # Import from error_handling.py
    "InvalidNotation",
    "InvalidOffhand",
    "InvalidScore",
    "MissingDamageProfile",
    "NotFound",
    "ResolutionError",
    "WrongCategory",
]
