"""Tests for building equipment loadouts from 20-slot windows."""

import pytest

from tshock2plr.models.items import ItemIdentity, ItemSlot
from tshock2plr.utils.loadouts import LOADOUT_FIELDS, assemble_loadout


def _slot(item_id: int) -> ItemSlot:
    return ItemSlot(item=ItemIdentity(id=item_id), count=1)


def _window(**populated: int) -> list:
    slots = [None] * 20
    for index, item_id in populated.items():
        slots[int(index.lstrip("i"))] = _slot(item_id)
    return slots


class TestAssembleLoadout:
    def test_empty_window(self) -> None:
        loadout = assemble_loadout([None] * 20)

        assert loadout.helmet.armor is None
        assert len(loadout.accessories) == 6
        assert all(row.is_shown for row in loadout.accessories)

    def test_helmet_and_vanity_helmet(self) -> None:
        loadout = assemble_loadout(_window(i0=1, i10=2))

        assert loadout.helmet.armor == _slot(1)
        assert loadout.helmet.vanity_armor == _slot(2)
        assert loadout.breastplate.armor is None

    def test_armor_rows(self) -> None:
        loadout = assemble_loadout(_window(i1=11, i2=12, i11=21, i12=22))

        assert loadout.breastplate.armor == _slot(11)
        assert loadout.pants.armor == _slot(12)
        assert loadout.breastplate.vanity_armor == _slot(21)
        assert loadout.pants.vanity_armor == _slot(22)

    def test_accessories_in_slot_order(self) -> None:
        window = _window(**{f"i{3 + n}": 100 + n for n in range(6)}, **{f"i{13 + n}": 200 + n for n in range(6)})

        loadout = assemble_loadout(window)

        assert [row.accessory.item.id for row in loadout.accessories] == list(range(100, 106))
        assert [row.vanity_accessory.item.id for row in loadout.accessories] == list(range(200, 206))

    def test_dyes_are_never_filled(self) -> None:
        loadout = assemble_loadout([_slot(n + 1) for n in range(20)])

        assert loadout.helmet.dye is None
        assert loadout.pants.dye is None
        assert all(row.dye is None for row in loadout.accessories)

    def test_unmapped_indices(self) -> None:
        assert 9 not in LOADOUT_FIELDS
        assert 19 not in LOADOUT_FIELDS

        loadout = assemble_loadout(_window(i9=9, i19=19))

        assert loadout == assemble_loadout([None] * 20)

    @pytest.mark.parametrize("length", [0, 19, 21])
    def test_wrong_length_is_rejected(self, length: int) -> None:
        with pytest.raises(ValueError):
            assemble_loadout([None] * length)
