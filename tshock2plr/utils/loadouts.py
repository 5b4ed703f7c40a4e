from typing import Dict, Optional, Sequence, Tuple

from tshock2plr.models.items import ItemSlot
from tshock2plr.models.player import ACCESSORY_COUNT, AccessoryRow, ArmorRow, Loadout

LOADOUT_LENGTH = 20

# relative index -> (row, field). "accessory:N" rows land in Loadout.accessories[N].
# Indices 9 and 19 (a seventh accessory pair) are not carried over.
LOADOUT_FIELDS: Dict[int, Tuple[str, str]] = {
    0: ("helmet", "armor"),
    1: ("breastplate", "armor"),
    2: ("pants", "armor"),
    10: ("helmet", "vanity_armor"),
    11: ("breastplate", "vanity_armor"),
    12: ("pants", "vanity_armor"),
}
for _n in range(ACCESSORY_COUNT):
    LOADOUT_FIELDS[3 + _n] = (f"accessory:{_n}", "accessory")
    LOADOUT_FIELDS[13 + _n] = (f"accessory:{_n}", "vanity_accessory")

def assemble_loadout(slots: Sequence[Optional[ItemSlot]]) -> Loadout:
    """Build one loadout from its 20-slot window. Dyes stay empty and every accessory is shown."""
    if len(slots) != LOADOUT_LENGTH:
        raise ValueError(f"A loadout needs exactly {LOADOUT_LENGTH} slots, got {len(slots)}")

    rows: Dict[str, dict] = {}
    for index, (row, field) in LOADOUT_FIELDS.items():
        rows.setdefault(row, {})[field] = slots[index]

    return Loadout(
        helmet=ArmorRow(**rows["helmet"]),
        breastplate=ArmorRow(**rows["breastplate"]),
        pants=ArmorRow(**rows["pants"]),
        accessories=[AccessoryRow(**rows[f"accessory:{n}"], is_shown=True) for n in range(ACCESSORY_COUNT)],
    )
