"""
Armor class module for the resolution engine.

Derives a defender's armor class from the body armor and the off-hand
shield it currently has equipped. The result is recomputed on every call
because equipment can change between calls.
"""

from pydantic import BaseModel, Field

from character.main import Character
from core.constants import Ability, EquipmentSlot, UNARMORED_AC
from core.error_handling import WrongCategory
from core.logging import log_debug, log_error
from items.armor import Armor
from items.catalog import EquipmentCatalog

from .modifiers import Modifier, ability_modifier, make_modifier, sum_modifiers


class ArmorClassResult(BaseModel):
    """The armor class of a defender, with every adjustment itemized."""

    base: int = Field(description="Unarmored AC or the body armor's rating.")
    total: int = Field(description="base + sum of the modifiers.")
    modifiers: list[Modifier] = Field(default_factory=list)


def _body_armor(character: Character, catalog: EquipmentCatalog) -> Armor | None:
    index = character.equipped(EquipmentSlot.BODY)
    if index is None:
        return None
    armor = catalog.get_armor(index)
    if armor.is_shield:
        log_error(
            "A shield cannot be worn in the body slot.",
            {"character": character.index, "armor": armor.index},
        )
        raise WrongCategory(f"Body slot holds a shield: {armor.index}")
    return armor


def _off_hand_shield(character: Character, catalog: EquipmentCatalog) -> Armor | None:
    entry = catalog.get(character.equipped(EquipmentSlot.MELEE_OFF_HAND))
    if isinstance(entry, Armor) and entry.is_shield:
        return entry
    # An off-hand weapon, or an empty hand, adds nothing.
    return None


def armor_class(character: Character, catalog: EquipmentCatalog) -> ArmorClassResult:
    """
    Computes the armor class of a character.

    Args:
        character (Character): The defender.
        catalog (EquipmentCatalog): Where equipped ids are looked up.

    Returns:
        ArmorClassResult: The base, the total and the applied modifiers.

    Raises:
        NotFound: If the body slot references an unknown id.
        WrongCategory: If the body slot holds something other than body armor.

    """
    base = UNARMORED_AC
    modifiers: list[Modifier] = []

    armor = _body_armor(character, catalog)
    if armor:
        base = armor.armor_class
        dex_mod = ability_modifier(character.dexterity)
        dex = make_modifier(
            f"ability_{Ability.DEXTERITY.value}",
            armor.dex_contribution(dex_mod),
            Ability.DEXTERITY.value,
        )
        if dex:
            modifiers.append(dex)

    shield = _off_hand_shield(character, catalog)
    if shield:
        bonus = make_modifier("shield_bonus", shield.armor_class, shield.index)
        if bonus:
            modifiers.append(bonus)

    result = ArmorClassResult(
        base=base,
        total=base + sum_modifiers(modifiers),
        modifiers=modifiers,
    )
    log_debug(
        f"Computed armor class of {character.name}",
        {
            "armor": armor.index if armor else None,
            "shield": shield.index if shield else None,
            "base": result.base,
            "total": result.total,
        },
    )
    return result
