"""Fixed slot offsets of the TShock inventory blob.

TShock stores every slot a character owns in one flat `~`-separated list. The
index of a slot in that list is its identity, so each region below is a
window (start, length) into it. Ranges are half-open.
"""
from typing import Dict, List, NamedTuple, Optional, Sequence, TypeVar

from tshock2plr.core.errors import RegionOutOfRange

T = TypeVar("T")

class Region(NamedTuple):
    name: str
    start: int
    length: int
    rows: int = 1
    cols: int = 1
    keep_rows: Optional[int] = None # None = keep every row

    @property
    def end(self) -> int:
        return self.start + self.length

MAIN_BAG = Region("main_bag", 0, 50, rows=5, cols=10)
# Starts on the last main bag cell (49). Kept as TShock publishes it.
COINS = Region("coins", 49, 4, cols=4)
AMMO = Region("ammo", 54, 4, cols=4)
LOADOUT_1 = Region("loadout_1", 59, 20, cols=20)
PET = Region("pet", 89, 1)
LIGHT_PET = Region("light_pet", 90, 1)
MINECART = Region("minecart", 91, 1)
MOUNT = Region("mount", 92, 1)
HOOK = Region("hook", 93, 1)
# Stashes reserve 5 rows in the blob but only 4 are storage.
PIGGY_BANK = Region("piggy_bank", 99, 50, rows=5, cols=10, keep_rows=4)
SAFE = Region("safe", 139, 50, rows=5, cols=10, keep_rows=4)
DEFENDERS_FORGE = Region("defenders_forge", 199, 50, rows=5, cols=10, keep_rows=4)
LOADOUT_2 = Region("loadout_2", 290, 20, cols=20)
LOADOUT_3 = Region("loadout_3", 320, 20, cols=20)

REGIONS: Dict[str, Region] = {
    region.name: region
    for region in (
        MAIN_BAG, COINS, AMMO, LOADOUT_1, PET, LIGHT_PET, MINECART, MOUNT, HOOK,
        PIGGY_BANK, SAFE, DEFENDERS_FORGE, LOADOUT_2, LOADOUT_3,
    )
}
LOADOUT_REGIONS = (LOADOUT_1, LOADOUT_2, LOADOUT_3)

def region_slice(slots: Sequence[T], region: Region) -> List[T]:
    """Return the region's window, or raise RegionOutOfRange if the sequence is too short."""
    if region.rows * region.cols != region.length:
        raise ValueError(f"Region {region.name} shape {region.rows}x{region.cols} does not match length {region.length}")
    if region.end > len(slots):
        raise RegionOutOfRange(region.name, region.end, len(slots))
    return list(slots[region.start:region.end])

def extract_grid(slots: Sequence[T], region: Region) -> List[List[T]]:
    window = region_slice(slots, region)
    grid = [window[row * region.cols:(row + 1) * region.cols] for row in range(region.rows)]
    if region.keep_rows is not None:
        grid = grid[:region.keep_rows]
    return grid

def extract_row(slots: Sequence[T], region: Region) -> List[T]:
    return extract_grid(slots, region)[0]

def extract_slot(slots: Sequence[T], region: Region) -> T:
    return region_slice(slots, region)[0]
