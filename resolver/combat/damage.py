"""
Damage module for the resolution engine.

Handles damage rolls and the immunity, resistance and vulnerability
adjustments a defender applies to them, then sums the rolled components and
flat modifiers of an attack into its total damage.
"""

from pydantic import BaseModel, Field

from character.main import Character
from core.constants import DamageAdjustment, DamageType
from core.dice_parser import RandomSource, roll_dice
from core.logging import log_debug
from items.weapon import Damage

from .modifiers import Modifier, sum_modifiers


class DamageResult(BaseModel):
    """A single rolled damage component, before and after adjustment."""

    dice: str = Field(description="The damage dice rolled (e.g., '1d8').")
    type: DamageType = Field(description="The type of damage dealt.")
    rolled: int = Field(description="The raw rolled value.")
    final: int = Field(description="The value after the defender's adjustment.")
    adjustment: DamageAdjustment | None = Field(
        default=None,
        description="The adjustment applied, if any.",
    )


class DamageRollResult(BaseModel):
    """The full damage of a hit: base, extra riders and flat modifiers."""

    base: DamageResult
    extras: list[DamageResult] = Field(default_factory=list)
    modifiers: list[Modifier] = Field(default_factory=list)
    critical: bool = False
    total: int = Field(description="base + extras + modifiers.")


def adjust_damage(defender: Character, rolled: int, damage_type: DamageType) -> tuple[int, DamageAdjustment | None]:
    """
    Applies a defender's immunity, resistance or vulnerability to a value.

    Immunity wins over everything. Otherwise resistance halves (rounding
    down) and vulnerability doubles, but a defender that is both resistant
    and vulnerable to the same type takes the rolled value unchanged.

    Args:
        defender (Character): The character taking the damage.
        rolled (int): The raw damage.
        damage_type (DamageType): The type of the damage.

    Returns:
        tuple[int, DamageAdjustment | None]:
            The adjusted damage and the adjustment applied.

    """
    if damage_type in defender.immunities:
        return 0, DamageAdjustment.IMMUNITY

    resistant = damage_type in defender.resistances
    vulnerable = damage_type in defender.vulnerabilities
    if resistant and not vulnerable:
        return rolled // 2, DamageAdjustment.RESISTANCE
    if vulnerable and not resistant:
        return rolled * 2, DamageAdjustment.VULNERABILITY
    return rolled, None


def damage_roll(
    defender: Character,
    damage: Damage,
    critical: bool = False,
    rng: RandomSource | None = None,
) -> DamageResult:
    """
    Rolls a damage component and adjusts it for the defender.

    Args:
        defender (Character): The character taking the damage.
        damage (Damage): The dice and type of the damage.
        critical (bool): Whether to roll twice the number of dice.
        rng (RandomSource | None): Random source, the default roller if None.

    Returns:
        DamageResult: The rolled and final values.

    """
    rolled = roll_dice(damage.dice, critical, rng)
    final, adjustment = adjust_damage(defender, rolled, damage.type)
    log_debug(
        f"{defender.name} takes {damage.type.value} damage",
        {
            "dice": damage.dice,
            "critical": critical,
            "rolled": rolled,
            "final": final,
            "adjustment": adjustment.value if adjustment else None,
        },
    )
    return DamageResult(
        dice=damage.dice,
        type=damage.type,
        rolled=rolled,
        final=final,
        adjustment=adjustment,
    )


def resolve_weapon_damage(
    defender: Character,
    base: Damage,
    extras: list[Damage],
    modifiers: list[Modifier],
    critical: bool = False,
    rng: RandomSource | None = None,
) -> DamageRollResult:
    """
    Rolls the damage of a hit and sums it up.

    The base and every extra component are rolled and adjusted
    independently, all doubled at the dice level on a critical, then added
    to the flat modifiers.

    Args:
        defender (Character): The character taking the damage.
        base (Damage): The weapon's damage profile.
        extras (list[Damage]): Extra damage riders.
        modifiers (list[Modifier]): Flat damage bonuses.
        critical (bool): Whether the hit is a critical hit.
        rng (RandomSource | None): Random source, the default roller if None.

    Returns:
        DamageRollResult: The components and their total.

    """
    base_result = damage_roll(defender, base, critical, rng)
    extra_results = [damage_roll(defender, extra, critical, rng) for extra in extras]
    total = (
        base_result.final
        + sum(extra.final for extra in extra_results)
        + sum_modifiers(modifiers)
    )
    return DamageRollResult(
        base=base_result,
        extras=extra_results,
        modifiers=list(modifiers),
        critical=critical,
        total=total,
    )
