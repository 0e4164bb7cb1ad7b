"""
Character module for the d20 resolution engine.

This module holds the read-only character snapshot and the skill entries
the engine resolves checks and attacks against.
"""

from .main import Character
from .skill import Skill

__all__ = [
    # Import from main.py
    "Character",
    # Import from skill.py
    "Skill",
]
