"""
Dice parser module for the resolution engine.

Parses dice notation such as ``"2d6+3"`` into a structured ``DiceSpec`` and
rolls it against an injectable random source, the only source of
non-determinism in the engine.
"""

import random
import re
from typing import Any, Protocol

from catchery import log_warning
from pydantic import BaseModel, ConfigDict, Field

from core.error_handling import InvalidNotation
from core.logging import log_debug

DICE_PATTERN = re.compile(r"^(\d*)d(\d+)([+-]\d+)?$", re.IGNORECASE | re.ASCII)
MODIFIER_TERM = re.compile(r"[+-]")


class RandomSource(Protocol):
    """Anything that draws uniform integers, ``random.Random`` included."""

    def randint(self, a: int, b: int) -> int: ...


class DiceSpec(BaseModel):
    """Structured form of a dice notation string."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(description="Number of dice to roll", ge=1)
    sides: int = Field(description="Number of sides on each die", ge=1)
    modifier: int = Field(default=0, description="Flat modifier added once")

    @property
    def notation(self) -> str:
        """Returns the canonical notation, e.g. ``2d6+3`` or ``1d8``."""
        if self.modifier:
            return f"{self.count}d{self.sides}{self.modifier:+d}"
        return f"{self.count}d{self.sides}"

    @property
    def min_total(self) -> int:
        """Returns the lowest possible total of a normal roll."""
        return self.count + self.modifier

    @property
    def max_total(self) -> int:
        """Returns the highest possible total of a normal roll."""
        return self.count * self.sides + self.modifier

    def __str__(self) -> str:
        return self.notation


class RollBreakdown(BaseModel):
    """Class to hold roll breakdown information."""

    value: int = Field(
        description="Total roll result",
    )
    description: str = Field(
        description="Description of the roll",
    )
    rolls: list[int] = Field(
        description="List of individual dice rolls",
        default_factory=list,
    )


class DiceRoller:
    """
    Seedable random source for dice.

    Wraps its own ``random.Random`` so that two rollers never share state,
    and a roller built with a seed replays the same sequence.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def roll_each(self, spec: DiceSpec, critical: bool = False) -> list[int]:
        """
        Rolls every die of a spec, doubling the dice on a critical.

        Args:
            spec (DiceSpec): The dice to roll.
            critical (bool): Whether to roll twice the number of dice.

        Returns:
            list[int]: The individual die results, modifier excluded.

        """
        return roll_each(spec, critical, self)


_DEFAULT_ROLLER = DiceRoller()


def parse_dice(notation: str) -> DiceSpec:
    """
    Parses a dice notation string.

    Args:
        notation (str): Notation like ``"2d6+3"``, ``"d20"`` or ``"3d4-2"``.

    Returns:
        DiceSpec: The parsed count, sides and modifier.

    Raises:
        InvalidNotation: If the notation does not match the grammar, if count
            or sides is not positive, or if more than one modifier is given.

    """
    if not isinstance(notation, str):
        log_warning(
            f"Dice notation must be a string, got {type(notation).__name__}",
            {"notation": notation},
        )
        raise InvalidNotation(f"Invalid dice notation: {notation!r}")

    expr = notation.strip()
    match = DICE_PATTERN.match(expr)
    if not match:
        reason = "malformed"
        if len(MODIFIER_TERM.findall(expr)) > 1:
            reason = "more than one modifier term"
        log_warning(
            f"Invalid dice notation: '{notation}' ({reason})",
            {"notation": notation},
        )
        raise InvalidNotation(f"Invalid dice notation: {notation!r}")

    count_str, sides_str, modifier_str = match.groups()
    count = int(count_str) if count_str else 1
    sides = int(sides_str)
    modifier = int(modifier_str) if modifier_str else 0

    if count <= 0 or sides <= 0:
        log_warning(
            f"Dice count and sides must be positive: '{notation}'",
            {"notation": notation, "count": count, "sides": sides},
        )
        raise InvalidNotation(f"Invalid dice notation: {notation!r}")

    return DiceSpec(count=count, sides=sides, modifier=modifier)


def is_valid_notation(notation: Any) -> bool:
    """
    Checks whether a value is a valid dice notation, without raising.

    Args:
        notation (Any): The value to check.

    Returns:
        bool: True if ``parse_dice`` would accept it.

    """
    if not isinstance(notation, str):
        return False
    match = DICE_PATTERN.match(notation.strip())
    if not match:
        return False
    count_str, sides_str, _ = match.groups()
    return int(count_str or "1") > 0 and int(sides_str) > 0


def roll_each(
    spec: DiceSpec,
    critical: bool = False,
    rng: RandomSource | None = None,
) -> list[int]:
    """
    Draws one uniform value in ``[1, sides]`` per die.

    Args:
        spec (DiceSpec): The dice to roll.
        critical (bool): Whether to roll twice the number of dice.
        rng (RandomSource | None): Random source, the default roller if None.

    Returns:
        list[int]: The individual die results.

    """
    source = rng if rng is not None else _DEFAULT_ROLLER
    # For criticals, double the number of dice rolled, not the modifier.
    count = spec.count * 2 if critical else spec.count
    return [source.randint(1, spec.sides) for _ in range(count)]


def roll_and_describe(
    notation: str,
    critical: bool = False,
    rng: RandomSource | None = None,
) -> RollBreakdown:
    """
    Rolls a dice notation and provides a breakdown.

    Args:
        notation (str): The dice notation to roll.
        critical (bool): Whether to roll twice the number of dice.
        rng (RandomSource | None): Random source, the default roller if None.

    Returns:
        RollBreakdown: The total, a description, and the individual dice.

    """
    spec = parse_dice(notation)
    rolls = roll_each(spec, critical, rng)
    value = sum(rolls) + spec.modifier

    count = len(rolls)
    description = f"{count}d{spec.sides}({'+'.join(map(str, rolls))})"
    if spec.modifier:
        description += f"{spec.modifier:+d}"
    description += f" → {value}"

    log_debug(
        f"Rolled {notation}",
        {"critical": critical, "rolls": rolls, "modifier": spec.modifier, "value": value},
    )
    return RollBreakdown(value=value, description=description, rolls=rolls)


def roll_dice(
    notation: str,
    critical: bool = False,
    rng: RandomSource | None = None,
) -> int:
    """
    Rolls a dice notation and returns the total.

    Args:
        notation (str): The dice notation to roll.
        critical (bool): Whether to roll twice the number of dice. The
            modifier is added once either way.
        rng (RandomSource | None): Random source, the default roller if None.

    Returns:
        int: The sum of the dice plus the modifier.

    """
    return roll_and_describe(notation, critical, rng).value
