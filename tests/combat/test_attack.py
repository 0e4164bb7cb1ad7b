"""
Tests for main-hand and off-hand weapon attacks.
"""

import pytest
from character.main import Character
from core.constants import DamageType, EquipmentSlot, RollType
from core.error_handling import InvalidOffhand, MissingDamageProfile, NotFound, WrongCategory
from combat.attack import main_hand_attack, off_hand_attack


def make_attacker(**slots):
    return Character(
        index="attacker",
        name="Attacker",
        level=5,
        strength=16,
        dexterity=14,
        proficient_weapons={"sword", "axe"},
        slots={EquipmentSlot(slot): item for slot, item in slots.items()},
    )


def test_main_hand_hit(fighter, goblin, catalog, sequence_rng):
    """Test a one-handed sword hit: 15 + 3 + 3 against AC 10, 1d8 + 3 damage."""
    rng = sequence_rng([15, 2, 6])
    result = main_hand_attack(fighter, goblin, catalog, rng=rng)

    assert result.hit
    assert result.attack_roll.picked == 15
    assert result.attack_roll.total == 21
    assert result.attack_roll.target == 10
    assert [m.source for m in result.attack_roll.modifiers] == [
        "ability_strength",
        "proficiency_sword",
    ]

    damage = result.damage_roll
    assert damage.base.dice == "1d8"
    assert damage.base.rolled == 6
    assert [(m.source, m.value) for m in damage.modifiers] == [("ability_strength", 3)]
    assert damage.total == 9
    assert not damage.critical
    assert rng.calls == [(1, 20), (1, 20), (1, 8)]


def test_off_hand_hit_excludes_ability_modifier(rogue, goblin, catalog, sequence_rng):
    """Test an off-hand dagger hit: 11 + 2 dexterity, 1d4 damage only."""
    result = off_hand_attack(rogue, goblin, catalog, rng=sequence_rng([11, 5, 3]))

    assert result.attack_roll.total == 13
    assert [m.source for m in result.attack_roll.modifiers] == ["ability_dexterity"]
    assert result.damage_roll.base.dice == "1d4"
    assert result.damage_roll.modifiers == []
    assert result.damage_roll.total == 3


def test_main_hand_finesse_uses_dexterity_for_damage(rogue, goblin, catalog, sequence_rng):
    result = main_hand_attack(rogue, goblin, catalog, rng=sequence_rng([11, 5, 3]))
    assert [(m.source, m.value) for m in result.damage_roll.modifiers] == [
        ("ability_dexterity", 2)
    ]
    assert result.damage_roll.total == 5


def test_miss_rolls_no_damage(fighter, rogue, catalog, sequence_rng):
    """Test that a miss draws nothing beyond the two d20s."""
    rng = sequence_rng([6, 19])
    result = main_hand_attack(fighter, rogue, catalog, rng=rng)
    assert not result.hit
    assert result.attack_roll.total == 12
    assert result.attack_roll.target == 13
    assert result.damage_roll is None
    assert len(rng.calls) == 2


def test_natural_one_misses(fighter, goblin, catalog, sequence_rng):
    result = main_hand_attack(fighter, goblin, catalog, rng=sequence_rng([1, 20]))
    assert not result.hit
    assert result.attack_roll.critical
    assert result.damage_roll is None


def test_critical_hit_doubles_dice_only(fighter, catalog, sequence_rng):
    """Test that a natural 20 hits any AC and doubles the damage dice."""
    fortress = Character(
        index="fortress",
        name="Fortress",
        dexterity=10,
        slots={"body": "plate-armor", "melee_off_hand": "shield"},
    )
    rng = sequence_rng([20, 1, 5, 7])
    result = main_hand_attack(fighter, fortress, catalog, rng=rng)
    assert result.attack_roll.critical
    assert result.attack_roll.total is None
    assert result.damage_roll.critical
    assert result.damage_roll.base.rolled == 12
    assert result.damage_roll.total == 15


def test_advantage_picks_the_higher_die(fighter, goblin, catalog, sequence_rng):
    result = main_hand_attack(
        fighter, goblin, catalog, RollType.ADVANTAGE, sequence_rng([2, 20, 4, 4])
    )
    assert result.attack_roll.rolls == [2, 20]
    assert result.damage_roll.critical


def test_versatile_two_handed_with_empty_off_hand(goblin, catalog, sequence_rng):
    attacker = make_attacker(melee_main_hand="longsword")
    rng = sequence_rng([15, 2, 10])
    result = main_hand_attack(attacker, goblin, catalog, rng=rng)
    assert result.damage_roll.base.dice == "1d10"
    assert rng.calls[-1] == (1, 10)


def test_two_handed_only_weapon_with_shield(goblin, catalog, sequence_rng):
    """Test that a weapon without a one-handed profile fails next to a shield."""
    attacker = make_attacker(melee_main_hand="greataxe", melee_off_hand="shield")
    with pytest.raises(MissingDamageProfile):
        main_hand_attack(attacker, goblin, catalog, rng=sequence_rng([15, 2]))


def test_two_handed_only_non_versatile_weapon(goblin, catalog, sequence_rng):
    """Test that a non-versatile weapon always uses its one-handed profile."""
    attacker = make_attacker(melee_main_hand="greataxe")
    with pytest.raises(MissingDamageProfile):
        main_hand_attack(attacker, goblin, catalog, rng=sequence_rng([15, 2]))


def test_missing_damage_profile_is_not_raised_on_a_miss(goblin, catalog, sequence_rng):
    attacker = make_attacker(melee_main_hand="greataxe")
    result = main_hand_attack(attacker, goblin, catalog, rng=sequence_rng([2, 15]))
    assert result.damage_roll is None


def test_enchantment_and_extra_damage(catalog, sequence_rng):
    """Test that enchantment adds a flat bonus and extras roll separately."""
    attacker = make_attacker(melee_main_hand="flame-tongue")
    defender = Character(
        index="ice-mephit",
        name="Ice Mephit",
        vulnerabilities={DamageType.FIRE},
    )
    result = main_hand_attack(attacker, defender, catalog, rng=sequence_rng([12, 3, 4, 2]))
    damage = result.damage_roll
    assert damage.base.rolled == 4
    assert damage.extras[0].type == DamageType.FIRE
    assert damage.extras[0].final == 4
    assert [(m.source, m.index, m.value) for m in damage.modifiers] == [
        ("ability_strength", "strength", 3),
        ("weapon_enchantment", "flame-tongue", 1),
    ]
    assert damage.total == 4 + 4 + 3 + 1


def test_off_hand_keeps_enchantment(catalog, goblin, sequence_rng):
    attacker = make_attacker(melee_main_hand="dagger", melee_off_hand="flame-tongue")
    rng = sequence_rng([12, 3, 4, 2])
    result = off_hand_attack(attacker, goblin, catalog, rng=rng)
    assert [m.source for m in result.damage_roll.modifiers] == ["weapon_enchantment"]
    assert result.damage_roll.total == 4 + 2 + 1


def test_off_hand_critical_doubles_extras(catalog, goblin, sequence_rng):
    attacker = make_attacker(melee_main_hand="dagger", melee_off_hand="flame-tongue")
    rng = sequence_rng([20, 3, 1, 1, 2, 2])
    result = off_hand_attack(attacker, goblin, catalog, rng=rng)
    assert result.damage_roll.base.rolled == 2
    assert result.damage_roll.extras[0].rolled == 4
    assert result.damage_roll.total == 7


def test_off_hand_requires_light_weapon(goblin, catalog, sequence_rng):
    attacker = make_attacker(melee_main_hand="dagger", melee_off_hand="longsword")
    rng = sequence_rng([])
    with pytest.raises(InvalidOffhand):
        off_hand_attack(attacker, goblin, catalog, rng=rng)
    assert rng.calls == []


def test_empty_main_hand(goblin, catalog):
    with pytest.raises(NotFound):
        main_hand_attack(make_attacker(), goblin, catalog)


def test_empty_off_hand(fighter, goblin, catalog):
    fighter.slots.pop(EquipmentSlot.MELEE_OFF_HAND)
    with pytest.raises(NotFound):
        off_hand_attack(fighter, goblin, catalog)


def test_unknown_weapon(goblin, catalog):
    with pytest.raises(NotFound):
        main_hand_attack(make_attacker(melee_main_hand="vorpal-sword"), goblin, catalog)


@pytest.mark.parametrize("item", ["shield", "ring-of-warmth"])
def test_off_hand_non_weapon(goblin, catalog, item):
    with pytest.raises(WrongCategory):
        off_hand_attack(make_attacker(melee_off_hand=item), goblin, catalog)


def test_attack_result_dumps_to_plain_data(fighter, goblin, catalog, sequence_rng):
    dumped = main_hand_attack(fighter, goblin, catalog, rng=sequence_rng([1, 2])).model_dump(
        mode="json"
    )
    assert dumped["attack_roll"]["critical"] is True
    assert dumped["attack_roll"]["total"] is None
    assert dumped["damage_roll"] is None
