from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, List, Optional

from .items import InventorySlot, ItemSlot

INVENTORY_ROWS = 5
STASH_ROWS = 4
ROW_WIDTH = 10
ACCESSORY_COUNT = 6
LOADOUT_COUNT = 3

InventoryRow = Annotated[List[Optional[InventorySlot]], Field(min_length=ROW_WIDTH, max_length=ROW_WIDTH)]
StashRow = Annotated[List[Optional[ItemSlot]], Field(min_length=ROW_WIDTH, max_length=ROW_WIDTH)]
ReservedRow = Annotated[List[Optional[InventorySlot]], Field(min_length=4, max_length=4)]

def _empty_grid(rows: int) -> list:
    return [[None] * ROW_WIDTH for _ in range(rows)]

class ArmorRow(BaseModel):
    armor: Optional[ItemSlot] = None
    vanity_armor: Optional[ItemSlot] = None
    dye: Optional[ItemSlot] = None

class AccessoryRow(BaseModel):
    accessory: Optional[ItemSlot] = None
    vanity_accessory: Optional[ItemSlot] = None
    dye: Optional[ItemSlot] = None
    is_shown: bool = True

class MiscRow(BaseModel):
    item: Optional[ItemSlot] = None
    dye: Optional[ItemSlot] = None

class MiscRowWithVisibility(MiscRow):
    is_shown: bool = True

class Loadout(BaseModel):
    helmet: ArmorRow = Field(default_factory=ArmorRow)
    breastplate: ArmorRow = Field(default_factory=ArmorRow)
    pants: ArmorRow = Field(default_factory=ArmorRow)
    accessories: List[AccessoryRow] = Field(
        default_factory=lambda: [AccessoryRow() for _ in range(ACCESSORY_COUNT)],
        min_length=ACCESSORY_COUNT,
        max_length=ACCESSORY_COUNT,
    )

class Loadouts(BaseModel):
    loadouts: List[Loadout] = Field(
        default_factory=lambda: [Loadout() for _ in range(LOADOUT_COUNT)],
        min_length=LOADOUT_COUNT,
        max_length=LOADOUT_COUNT,
    )
    selected_loadout_index: int = Field(default=0, ge=0, le=LOADOUT_COUNT - 1)

class PlayerRecord(BaseModel):
    """A complete player save. Fields not filled from the database keep the template's values."""
    model_config = ConfigDict(validate_assignment=True)

    version: int = 279
    name: str = ""
    difficulty: int = Field(default=0, ge=0, le=3) # 0=classic, 1=mediumcore, 2=hardcore, 3=journey
    hair_style: int = 0

    life: int = 100
    max_life: int = 100
    mana: int = 20
    max_mana: int = 20

    finished_angler_quests_count: int = 0
    is_using_biome_torches: bool = False
    is_artisan_bread_eaten: bool = False
    is_aegis_crystal_used: bool = False
    is_aegis_fruit_used: bool = False
    is_arcane_crystal_used: bool = False
    is_galaxy_pearl_used: bool = False
    is_gummy_worm_used: bool = False
    is_ambrosia_used: bool = False
    unlocked_super_cart: bool = False
    is_super_cart_enabled: bool = False

    inventory: List[InventoryRow] = Field(
        default_factory=lambda: _empty_grid(INVENTORY_ROWS),
        min_length=INVENTORY_ROWS, max_length=INVENTORY_ROWS,
    )
    coins: ReservedRow = Field(default_factory=lambda: [None] * 4)
    ammo: ReservedRow = Field(default_factory=lambda: [None] * 4)
    piggy_bank: List[StashRow] = Field(
        default_factory=lambda: _empty_grid(STASH_ROWS), min_length=STASH_ROWS, max_length=STASH_ROWS,
    )
    safe: List[StashRow] = Field(
        default_factory=lambda: _empty_grid(STASH_ROWS), min_length=STASH_ROWS, max_length=STASH_ROWS,
    )
    defenders_forge: List[StashRow] = Field(
        default_factory=lambda: _empty_grid(STASH_ROWS), min_length=STASH_ROWS, max_length=STASH_ROWS,
    )

    loadouts: Loadouts = Field(default_factory=Loadouts)
    pet: MiscRowWithVisibility = Field(default_factory=MiscRowWithVisibility)
    light_pet: MiscRowWithVisibility = Field(default_factory=MiscRowWithVisibility)
    minecart: MiscRow = Field(default_factory=MiscRow)
    mount: MiscRow = Field(default_factory=MiscRow)
    hook: MiscRow = Field(default_factory=MiscRow)
