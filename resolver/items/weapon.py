"""
Weapon module for the resolution engine.

Defines the Weapon entry and its damage profiles.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from core.constants import DamageType, EquipmentCategory, WeaponProperty
from core.dice_parser import is_valid_notation

from .equipment import Equipment


class Damage(BaseModel):
    """A dice notation paired with the type of damage it deals."""

    dice: str = Field(
        description="The damage dice (e.g., '1d8').",
    )
    type: DamageType = Field(
        description="The type of damage (e.g., slashing, fire).",
    )

    @field_validator("dice")
    @classmethod
    def _check_dice(cls, value: str) -> str:
        # Remove spaces before and after '+' and '-'.
        value = value.replace(" +", "+").replace("+ ", "+")
        value = value.replace(" -", "-").replace("- ", "-")
        if not is_valid_notation(value):
            raise ValueError(
                f"Invalid dice notation '{value}'. Use format XdY or XdY+Z (e.g. 1d6+2)"
            )
        return value.strip()

    def __str__(self) -> str:
        return f"{self.dice} {self.type.value}"


class Weapon(Equipment):
    """
    Represents a weapon that can be wielded by characters.

    A weapon carries a one-handed and/or a two-handed damage profile, a set
    of properties (finesse, light, versatile...), optional extra damage
    riders and an optional enchantment bonus.
    """

    category: EquipmentCategory = EquipmentCategory.WEAPON

    weapon_category: str = Field(
        default="simple",
        description="The weapon category (simple, martial).",
    )
    weapon_family: str = Field(
        description="The weapon family used for proficiency (club, dagger, sword...).",
    )
    damage_one_handed: Damage | None = Field(
        default=None,
        description="Damage dealt when wielded in one hand.",
    )
    damage_two_handed: Damage | None = Field(
        default=None,
        description="Damage dealt when wielded in two hands.",
    )
    properties: list[WeaponProperty] = Field(
        default_factory=list,
        description="Weapon properties (finesse, light, versatile...).",
    )
    extra_damages: list[Damage] = Field(
        default_factory=list,
        description="Extra damage riders, e.g. 1d6 fire.",
    )
    enchantment: int = Field(
        default=0,
        description="Enchantment bonus added to damage (+1, +2, +3...).",
    )

    def model_post_init(self, _: Any) -> None:
        super().model_post_init(_)
        if self.category != EquipmentCategory.WEAPON:
            raise ValueError("Weapon entries must have the 'weapon' category.")
        if not self.weapon_family:
            raise ValueError("weapon_family must be a non-empty string")

    def has_property(self, prop: WeaponProperty) -> bool:
        """
        Checks whether the weapon carries a property.

        Args:
            prop (WeaponProperty): The property to look for.

        Returns:
            bool: True if the weapon has the property.

        """
        return prop in self.properties

    @property
    def is_versatile(self) -> bool:
        return self.has_property(WeaponProperty.VERSATILE)

    @property
    def is_light(self) -> bool:
        return self.has_property(WeaponProperty.LIGHT)

    @property
    def is_finesse(self) -> bool:
        return self.has_property(WeaponProperty.FINESSE)

    def damage_profile(self, two_handed: bool) -> Damage | None:
        """
        Returns the damage profile for the given wielding mode.

        Args:
            two_handed (bool): Whether the weapon is wielded in two hands.

        Returns:
            Damage | None: The profile, or None if the weapon defines none.

        """
        return self.damage_two_handed if two_handed else self.damage_one_handed
