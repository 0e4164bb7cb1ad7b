"""
Equipment catalog for the resolution engine.

A read-only, by-index registry of the equipment entries the content layer
has already loaded and validated. Catalogs are plain objects handed to the
engine, so several rule-sets can coexist side by side.
"""

from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from catchery import log_warning

from core.constants import EquipmentCategory
from core.error_handling import NotFound, WrongCategory

from .armor import Armor
from .equipment import Equipment
from .weapon import Weapon

_E = TypeVar("_E", bound=Equipment)


def deserialize_equipment(data: dict[str, Any]) -> Equipment:
    """
    Deserialize an equipment entry from a dictionary.

    Args:
        data (dict[str, Any]):
            The dictionary containing the entry data.

    Raises:
        ValueError:
            If required fields are missing or malformed.

    Returns:
        Equipment:
            A Weapon, an Armor, or a plain Equipment entry.
    """
    category = data.get("category")
    if category == EquipmentCategory.WEAPON.value:
        return Weapon(**data)
    if category == EquipmentCategory.ARMOR.value:
        return Armor(**data)
    return Equipment(**data)


class EquipmentCatalog:
    """
    One-stop registry for equipment entries that need fast by-index access.
    """

    def __init__(self, entries: Iterable[Equipment] = ()) -> None:
        """
        Initialize the catalog.

        Args:
            entries (Iterable[Equipment]):
                The entries to register.

        Raises:
            ValueError: If two entries share the same index.

        """
        self._entries: dict[str, Equipment] = {}
        for entry in entries:
            if entry.index in self._entries:
                raise ValueError(f"Duplicate equipment index: {entry.index}")
            self._entries[entry.index] = entry

    @classmethod
    def from_data(cls, data: list[dict[str, Any]]) -> "EquipmentCatalog":
        """
        Build a catalog from raw dictionaries.

        Args:
            data (list[dict[str, Any]]): One dictionary per entry.

        Returns:
            EquipmentCatalog: The populated catalog.

        """
        return cls(deserialize_equipment(entry) for entry in data)

    def __contains__(self, index: object) -> bool:
        return index in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Equipment]:
        return iter(self._entries.values())

    def get(self, index: str | None) -> Equipment | None:
        """Get an entry by index, or None if not found."""
        if index is None:
            return None
        return self._entries.get(index)

    def require(self, index: str | None, expected_type: type[_E]) -> _E:
        """
        Get an entry by index, checking its type.

        Args:
            index (str | None):
                The index to look up. None stands for an empty slot.
            expected_type (type[_E]):
                Expected type for the isinstance check.

        Returns:
            _E: The entry.

        Raises:
            NotFound: If the index is None or absent from the catalog.
            WrongCategory: If the entry is not of the expected type.

        """
        entry = self.get(index)
        if entry is None:
            log_warning(
                f"Equipment '{index}' not found in catalog.",
                {"index": index, "expected_type": expected_type.__name__},
            )
            raise NotFound(f"Equipment not found: {index}")
        if not isinstance(entry, expected_type):
            log_warning(
                f"Equipment '{index}' is not of expected type "
                f"'{expected_type.__name__}'.",
                {
                    "index": index,
                    "expected_type": expected_type.__name__,
                    "actual_category": entry.category.value,
                },
            )
            raise WrongCategory(
                f"Equipment '{index}' is a {entry.category.value}, "
                f"expected {expected_type.__name__.lower()}"
            )
        return entry

    def get_weapon(self, index: str | None) -> Weapon:
        """Get a weapon by index, raising if missing or not a weapon."""
        return self.require(index, Weapon)

    def get_armor(self, index: str | None) -> Armor:
        """Get an armor by index, raising if missing or not an armor."""
        return self.require(index, Armor)
