"""
Items module for the d20 resolution engine.

This module contains the equipment entries the engine reads (weapons and
armor) and the by-index catalog they are looked up from.
"""

from .armor import Armor
from .catalog import EquipmentCatalog, deserialize_equipment
from .equipment import Equipment
from .weapon import Damage, Weapon

__all__ = [
    "Armor",
    "Damage",
    "Equipment",
    "EquipmentCatalog",
    "Weapon",
    "deserialize_equipment",
]
