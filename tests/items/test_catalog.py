"""
Tests for the equipment catalog and the equipment entries it holds.
"""

import pytest
from core.constants import ArmorCategory, DamageType, EquipmentCategory, WeaponProperty
from core.error_handling import NotFound, WrongCategory
from items.armor import Armor
from items.catalog import EquipmentCatalog, deserialize_equipment
from items.equipment import Equipment
from items.weapon import Damage, Weapon


def test_deserialize_dispatches_on_category(catalog):
    assert isinstance(catalog.get("longsword"), Weapon)
    assert isinstance(catalog.get("shield"), Armor)
    ring = catalog.get("ring-of-warmth")
    assert type(ring) is Equipment
    assert ring.category == EquipmentCategory.RING


def test_catalog_container_protocol(catalog):
    assert "dagger" in catalog
    assert "vorpal-sword" not in catalog
    assert len(catalog) == 9
    assert {entry.index for entry in catalog} >= {"dagger", "plate-armor"}


def test_catalog_get_missing(catalog):
    assert catalog.get("vorpal-sword") is None
    assert catalog.get(None) is None


def test_catalog_require(catalog):
    assert catalog.get_weapon("dagger").weapon_family == "dagger"
    assert catalog.get_armor("plate-armor").armor_category == ArmorCategory.HEAVY


def test_catalog_require_missing_logs_warning(catalog, mocker):
    """Test that a failed lookup is reported before raising."""
    mock_log_warning = mocker.patch("items.catalog.log_warning")
    with pytest.raises(NotFound):
        catalog.get_weapon("vorpal-sword")
    mock_log_warning.assert_called_once()
    assert mock_log_warning.call_args.args[1]["index"] == "vorpal-sword"


def test_catalog_require_empty_slot(catalog):
    with pytest.raises(NotFound):
        catalog.get_weapon(None)


def test_catalog_require_wrong_category(catalog):
    with pytest.raises(WrongCategory, match="expected weapon"):
        catalog.get_weapon("shield")
    with pytest.raises(WrongCategory):
        catalog.get_armor("longsword")


def test_catalog_rejects_duplicates():
    entry = {"index": "ring", "name": "Ring", "category": "ring"}
    with pytest.raises(ValueError, match="Duplicate"):
        EquipmentCatalog.from_data([entry, entry])


def test_weapon_properties(catalog):
    dagger = catalog.get_weapon("dagger")
    assert dagger.is_light
    assert dagger.is_finesse
    assert not dagger.is_versatile
    assert dagger.has_property(WeaponProperty.THROWN)
    longsword = catalog.get_weapon("longsword")
    assert longsword.damage_profile(True) == Damage(dice="1d10", type=DamageType.SLASHING)
    assert longsword.damage_profile(False).dice == "1d8"
    assert catalog.get_weapon("greataxe").damage_profile(False) is None


def test_damage_normalizes_spaces():
    damage = Damage(dice="1d6 + 2", type="fire")
    assert damage.dice == "1d6+2"
    assert str(damage) == "1d6+2 fire"


def test_damage_rejects_bad_notation():
    with pytest.raises(ValueError):
        Damage(dice="1d6+1d4", type="fire")


def test_weapon_requires_family():
    with pytest.raises(ValueError):
        deserialize_equipment(
            {"index": "club", "name": "Club", "category": "weapon", "weapon_family": ""}
        )


def test_equipment_requires_index():
    with pytest.raises(ValueError):
        Equipment(index=" ", name="Nothing", category=EquipmentCategory.RING)


@pytest.mark.parametrize(
    "category, dex_mod, expected",
    [
        (ArmorCategory.LIGHT, 4, 4),
        (ArmorCategory.LIGHT, -1, -1),
        (ArmorCategory.MEDIUM, 4, 2),
        (ArmorCategory.MEDIUM, -1, -1),
        (ArmorCategory.HEAVY, 4, 0),
        (ArmorCategory.SHIELD, 4, 0),
    ],
)
def test_armor_dex_contribution(category, dex_mod, expected):
    armor = Armor(index="a", name="A", armor_category=category, armor_class=12)
    assert armor.dex_contribution(dex_mod) == expected
