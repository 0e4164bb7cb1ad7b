"""
Ruleset module for the resolution engine.

Bundles an equipment catalog with a random source so callers can resolve
rolls without threading both through every call.
"""

from character.main import Character
from character.skill import Skill
from core.constants import Ability, RollType
from core.dice_parser import DiceRoller, DiceSpec, RandomSource, parse_dice, roll_dice
from items.catalog import EquipmentCatalog
from items.weapon import Damage

from .armor_class import ArmorClassResult, armor_class
from .attack import AttackResult, main_hand_attack, off_hand_attack
from .checks import CheckResult, ability_check, saving_throw
from .d20 import RollOutcome, roll20
from .damage import DamageResult, damage_roll
from .modifiers import Modifier


class Ruleset:
    """
    D&D 5e resolution bound to one catalog and one random source.

    Several rulesets can coexist, each with its own catalog and its own
    source of randomness.
    """

    def __init__(
        self,
        catalog: EquipmentCatalog,
        rng: RandomSource | None = None,
        seed: int | None = None,
    ) -> None:
        """
        Initialize the ruleset.

        Args:
            catalog (EquipmentCatalog):
                The equipment entries equipped ids are looked up in.
            rng (RandomSource | None):
                The random source. A seeded DiceRoller is created if None.
            seed (int | None):
                Seed for the DiceRoller created when no rng is given.

        """
        self.catalog = catalog
        self.rng: RandomSource = rng if rng is not None else DiceRoller(seed)

    def parse(self, notation: str) -> DiceSpec:
        return parse_dice(notation)

    def roll(self, notation: str, critical: bool = False) -> int:
        return roll_dice(notation, critical, self.rng)

    def roll20(
        self,
        modifiers: list[Modifier],
        target: int,
        type: RollType | str = RollType.NORMAL,
    ) -> RollOutcome:
        return roll20(modifiers, target, type, self.rng)

    def armor_class(self, character: Character) -> ArmorClassResult:
        return armor_class(character, self.catalog)

    def damage_roll(
        self,
        defender: Character,
        damage: Damage,
        critical: bool = False,
    ) -> DamageResult:
        return damage_roll(defender, damage, critical, self.rng)

    def ability_check(
        self,
        character: Character,
        skill: Skill,
        difficulty_class: int,
        type: RollType | str = RollType.NORMAL,
    ) -> CheckResult:
        return ability_check(character, skill, difficulty_class, type, self.rng)

    def saving_throw(
        self,
        character: Character,
        ability: Ability,
        difficulty_class: int,
        type: RollType | str = RollType.NORMAL,
    ) -> CheckResult:
        return saving_throw(character, ability, difficulty_class, type, self.rng)

    def main_hand_attack(
        self,
        attacker: Character,
        defender: Character,
        type: RollType | str = RollType.NORMAL,
    ) -> AttackResult:
        return main_hand_attack(attacker, defender, self.catalog, type, self.rng)

    def off_hand_attack(
        self,
        attacker: Character,
        defender: Character,
        type: RollType | str = RollType.NORMAL,
    ) -> AttackResult:
        return off_hand_attack(attacker, defender, self.catalog, type, self.rng)
