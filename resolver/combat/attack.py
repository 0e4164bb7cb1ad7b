"""
Attack module for the resolution engine.

Resolves melee weapon attacks from the main hand and the off hand: the
weapon is looked up from the attacker's slot, the attack roll is made
against the defender's armor class and, on a hit, the damage is rolled.
"""

from pydantic import BaseModel, Field

from character.main import Character
from core.constants import CRITICAL_SUCCESS, EquipmentSlot, RollType
from core.dice_parser import RandomSource
from core.error_handling import InvalidOffhand, MissingDamageProfile
from core.logging import log_debug, log_error
from items.catalog import EquipmentCatalog
from items.weapon import Damage, Weapon

from .armor_class import armor_class
from .d20 import RollOutcome, roll20
from .damage import DamageRollResult, resolve_weapon_damage
from .modifiers import (
    Modifier,
    ability_score_modifier,
    make_modifier,
    weapon_ability,
    weapon_attack_modifiers,
)


class AttackResult(BaseModel):
    """The attack roll of an attack and, if it hit, its damage."""

    attack_roll: RollOutcome = Field(description="The d20 roll against the AC.")
    damage_roll: DamageRollResult | None = Field(
        default=None,
        description="The damage dealt, None on a miss.",
    )

    @property
    def hit(self) -> bool:
        return self.attack_roll.success


def _damage_profile(attacker: Character, weapon: Weapon) -> Damage:
    # Versatile weapons go two-handed only when nothing sits in the off hand.
    two_handed = (
        weapon.is_versatile
        and attacker.equipped(EquipmentSlot.MELEE_OFF_HAND) is None
    )
    profile = weapon.damage_profile(two_handed)
    if profile is None:
        log_error(
            f"Weapon '{weapon.index}' has no damage profile for this grip.",
            {"weapon": weapon.index, "two_handed": two_handed},
        )
        raise MissingDamageProfile(
            f"Weapon '{weapon.index}' has no "
            f"{'two' if two_handed else 'one'}-handed damage"
        )
    return profile


def _resolve_attack(
    attacker: Character,
    defender: Character,
    catalog: EquipmentCatalog,
    weapon: Weapon,
    hand: str,
    type: RollType | str,
    rng: RandomSource | None,
) -> AttackResult:
    modifiers = weapon_attack_modifiers(attacker, weapon)
    ac = armor_class(defender, catalog)
    attack_roll = roll20(modifiers, ac.total, type, rng)

    log_debug(
        f"{attacker.name} attacks {defender.name} with {weapon.name}",
        {
            "hand": hand,
            "picked": attack_roll.picked,
            "total": attack_roll.total,
            "ac": ac.total,
            "hit": attack_roll.success,
        },
    )
    if not attack_roll.success:
        return AttackResult(attack_roll=attack_roll)

    profile = _damage_profile(attacker, weapon)
    critical = bool(attack_roll.critical) and attack_roll.picked == CRITICAL_SUCCESS

    damage_modifiers: list[Modifier] = []
    if hand == "main":
        ability_mod = ability_score_modifier(attacker, weapon_ability(attacker, weapon))
        if ability_mod:
            damage_modifiers.append(ability_mod)
    enchantment = make_modifier("weapon_enchantment", weapon.enchantment, weapon.index)
    if enchantment:
        damage_modifiers.append(enchantment)

    damage = resolve_weapon_damage(
        defender,
        profile,
        weapon.extra_damages,
        damage_modifiers,
        critical,
        rng,
    )
    return AttackResult(attack_roll=attack_roll, damage_roll=damage)


def main_hand_attack(
    attacker: Character,
    defender: Character,
    catalog: EquipmentCatalog,
    type: RollType | str = RollType.NORMAL,
    rng: RandomSource | None = None,
) -> AttackResult:
    """
    Resolves an attack with the weapon in the attacker's main hand.

    Args:
        attacker (Character): The character attacking.
        defender (Character): The character being attacked.
        catalog (EquipmentCatalog): Where equipped ids are looked up.
        type (RollType | str): Normal, advantage or disadvantage.
        rng (RandomSource | None): Random source, the default roller if None.

    Returns:
        AttackResult: The attack roll and, on a hit, the damage.

    Raises:
        NotFound: If the main hand is empty or holds an unknown id.
        WrongCategory: If the main hand holds something that is not a weapon.
        MissingDamageProfile: If the hit weapon lacks the needed profile.

    """
    weapon = catalog.get_weapon(attacker.equipped(EquipmentSlot.MELEE_MAIN_HAND))
    return _resolve_attack(attacker, defender, catalog, weapon, "main", type, rng)


def off_hand_attack(
    attacker: Character,
    defender: Character,
    catalog: EquipmentCatalog,
    type: RollType | str = RollType.NORMAL,
    rng: RandomSource | None = None,
) -> AttackResult:
    """
    Resolves an attack with the light weapon in the attacker's off hand.

    The ability modifier is not added to the damage of an off-hand attack.

    Args:
        attacker (Character): The character attacking.
        defender (Character): The character being attacked.
        catalog (EquipmentCatalog): Where equipped ids are looked up.
        type (RollType | str): Normal, advantage or disadvantage.
        rng (RandomSource | None): Random source, the default roller if None.

    Returns:
        AttackResult: The attack roll and, on a hit, the damage.

    Raises:
        NotFound: If the off hand is empty or holds an unknown id.
        WrongCategory: If the off hand holds something that is not a weapon.
        InvalidOffhand: If the weapon is not light.
        MissingDamageProfile: If the hit weapon lacks the needed profile.

    """
    weapon = catalog.get_weapon(attacker.equipped(EquipmentSlot.MELEE_OFF_HAND))
    if not weapon.is_light:
        log_error(
            f"{attacker.name} cannot attack off-hand with '{weapon.index}'.",
            {"attacker": attacker.index, "weapon": weapon.index},
        )
        raise InvalidOffhand(f"Off-hand weapon must be light: {weapon.index}")
    return _resolve_attack(attacker, defender, catalog, weapon, "off", type, rng)
