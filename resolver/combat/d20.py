"""
d20 resolution module for the resolution engine.

Resolves ability checks, attack rolls and saving throws: two d20s are always
drawn, one is picked according to the roll type, natural 20 and natural 1
short-circuit, and everything else is compared against the target.
"""

from pydantic import BaseModel, Field

from core.constants import CRITICAL_FAILURE, CRITICAL_SUCCESS, D20, RollType
from core.dice_parser import RandomSource, roll_dice
from core.error_handling import require_enum_type
from core.logging import log_debug

from .modifiers import Modifier, sum_modifiers


class RollOutcome(BaseModel):
    """
    The result of a d20 roll.

    When ``critical`` is set, ``total`` and ``modifiers`` are None: a natural
    20 or a natural 1 never goes through modifier or target arithmetic.
    """

    rolls: list[int] = Field(description="The d20 values shown (1 or 2).")
    picked: int = Field(description="The d20 value the outcome is decided on.")
    total: int | None = Field(default=None, description="picked + modifiers.")
    modifiers: list[Modifier] | None = Field(
        default=None, description="The modifiers applied to the roll."
    )
    success: bool = Field(description="Whether the roll meets or beats the target.")
    critical: bool | None = Field(
        default=None, description="True on a natural 20 or a natural 1."
    )
    target: int = Field(description="The DC or AC the roll was made against.")
    type: RollType = Field(default=RollType.NORMAL)

    @property
    def is_critical_success(self) -> bool:
        return bool(self.critical) and self.picked == CRITICAL_SUCCESS

    @property
    def is_critical_failure(self) -> bool:
        return bool(self.critical) and self.picked == CRITICAL_FAILURE


def roll20(
    modifiers: list[Modifier],
    target: int,
    type: RollType = RollType.NORMAL,
    rng: RandomSource | None = None,
) -> RollOutcome:
    """
    Rolls a d20 check against a target.

    Args:
        modifiers (list[Modifier]): The bonuses and penalties to the roll.
        target (int): The DC or AC to meet or beat.
        type (RollType): Normal, advantage or disadvantage.
        rng (RandomSource | None): Random source, the default roller if None.

    Returns:
        RollOutcome: The rolls, the picked value and the outcome.

    """
    type = require_enum_type(type, RollType, "roll type")

    # Always roll two d20s, even for a normal roll.
    first = roll_dice(D20, rng=rng)
    second = roll_dice(D20, rng=rng)

    if type == RollType.ADVANTAGE:
        picked = max(first, second)
    elif type == RollType.DISADVANTAGE:
        picked = min(first, second)
    else:
        picked = first
    rolls = [first] if type == RollType.NORMAL else [first, second]

    if picked in (CRITICAL_SUCCESS, CRITICAL_FAILURE):
        outcome = RollOutcome(
            rolls=rolls,
            picked=picked,
            success=picked == CRITICAL_SUCCESS,
            critical=True,
            target=target,
            type=type,
        )
    else:
        total = picked + sum_modifiers(modifiers)
        outcome = RollOutcome(
            rolls=rolls,
            picked=picked,
            total=total,
            modifiers=list(modifiers),
            success=total >= target,
            target=target,
            type=type,
        )

    log_debug(
        "Resolved d20 roll",
        {
            "type": type.value,
            "rolls": rolls,
            "picked": picked,
            "total": outcome.total,
            "target": target,
            "success": outcome.success,
            "critical": outcome.critical,
        },
    )
    return outcome
