"""
Armor module for the resolution engine.

Defines the Armor entry, covering body armor and shields.
"""

from typing import Any

from pydantic import Field

from core.constants import ArmorCategory, EquipmentCategory, MEDIUM_ARMOR_DEX_CAP

from .equipment import Equipment


class Armor(Equipment):
    """
    Represents a piece of armor that can be equipped by characters.

    Body armor (light, medium, heavy) replaces the unarmored base AC and
    interacts differently with the Dexterity modifier. Shields are worn in
    the off hand and add their rating on top of whatever the body wears.
    """

    category: EquipmentCategory = EquipmentCategory.ARMOR

    armor_category: ArmorCategory = Field(
        description="The category of armor (light, medium, heavy, shield).",
    )
    armor_class: int = Field(
        description=(
            "The base Armor Class of body armor, or the bonus granted by a shield."
        ),
        ge=0,
    )
    stealth_disadvantage: bool = Field(
        default=False,
        description="Whether wearing the armor imposes disadvantage on stealth checks.",
    )

    def model_post_init(self, _: Any) -> None:
        super().model_post_init(_)
        if self.category != EquipmentCategory.ARMOR:
            raise ValueError("Armor entries must have the 'armor' category.")

    @property
    def is_shield(self) -> bool:
        return self.armor_category == ArmorCategory.SHIELD

    def dex_contribution(self, dex_mod: int) -> int:
        """
        Returns how much of the Dexterity modifier this armor lets through.

        Light armor adds the full modifier, medium armor caps positive
        values at +2 while negative values still apply in full, and heavy
        armor ignores Dexterity. Shields never contribute Dexterity.

        Args:
            dex_mod (int): The wearer's Dexterity modifier.

        Returns:
            int: The Dexterity contribution to AC.

        """
        if self.armor_category == ArmorCategory.LIGHT:
            return dex_mod
        if self.armor_category == ArmorCategory.MEDIUM:
            return min(dex_mod, MEDIUM_ARMOR_DEX_CAP)
        return 0
