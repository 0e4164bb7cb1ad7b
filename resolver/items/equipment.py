"""
Equipment module for the resolution engine.

Defines the fields shared by every equipment entry handed to the engine by
the content layer.
"""

from typing import Any

from pydantic import BaseModel, Field

from core.constants import EquipmentCategory


class Equipment(BaseModel):
    """
    Represents a single catalog entry that a character can equip.

    Subclasses narrow the category (weapons, armor); plain entries cover the
    remaining slots (headwear, rings, amulets...), which the engine only
    ever looks up to reject them with a category error.
    """

    index: str = Field(
        description="Unique identifier of the entry, referenced by equipment slots.",
    )
    name: str = Field(
        description="The display name of the entry.",
    )
    description: str = Field(
        default="",
        description="A brief description of the entry.",
    )
    category: EquipmentCategory = Field(
        description="The kind of equipment (weapon, armor, ring...).",
    )
    rarity: str = Field(
        default="common",
        description="The rarity of the entry (common, uncommon, rare...).",
    )
    weight: float = Field(
        default=0,
        description="Weight in kilograms.",
        ge=0,
    )
    price: int = Field(
        default=0,
        description="Price in copper coins.",
        ge=0,
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if not self.index or not self.index.strip():
            raise ValueError("index must be a non-empty string")
        if not self.name:
            raise ValueError("name must be a non-empty string")
