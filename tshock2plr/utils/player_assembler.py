import logging
from typing import Any, Mapping

from tshock2plr.core.errors import MissingRequiredField
from tshock2plr.models.items import InventorySlot
from tshock2plr.models.player import Loadouts, MiscRow, MiscRowWithVisibility, PlayerRecord
from tshock2plr.utils.inventory_parser import decode_inventory
from tshock2plr.utils.item_catalog import ItemCatalog
from tshock2plr.utils.loadouts import assemble_loadout
from tshock2plr.utils import regions

logger = logging.getLogger(__name__)

_MISSING = object()

# column -> PlayerRecord field
REQUIRED_INT_COLUMNS = {
    "Health": "life",
    "MaxHealth": "max_life",
    "Mana": "mana",
    "MaxMana": "max_mana",
}
OPTIONAL_FLAG_COLUMNS = {
    "unlockedBiomeTorches": "is_using_biome_torches",
    "ateArtisanBread": "is_artisan_bread_eaten",
    "usedAegisCrystal": "is_aegis_crystal_used",
    "usedAegisFruit": "is_aegis_fruit_used",
    "usedArcaneCrystal": "is_arcane_crystal_used",
    "usedGalaxyPearl": "is_galaxy_pearl_used",
    "usedGummyWorm": "is_gummy_worm_used",
    "usedAmbrosia": "is_ambrosia_used",
    "unlockedSuperCart": "unlocked_super_cart",
    "enabledSuperCart": "is_super_cart_enabled",
}
QUEST_COUNT_COLUMN = "questsCompleted"

def _column(row: Mapping[str, Any], column: str) -> Any:
    # sqlite3/aiosqlite rows raise IndexError for unknown columns, dicts raise KeyError
    try:
        return row[column]
    except (KeyError, IndexError):
        return _MISSING

def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def _required_int(row: Mapping[str, Any], column: str) -> int:
    value = _column(row, column)
    if not _is_int(value):
        raise MissingRequiredField(column, None if value is _MISSING else value)
    return value

def _required_str(row: Mapping[str, Any], column: str) -> str:
    value = _column(row, column)
    if not isinstance(value, str):
        raise MissingRequiredField(column, None if value is _MISSING else value)
    return value

def _flag(row: Mapping[str, Any], column: str) -> bool:
    value = _column(row, column)
    return _is_int(value) and value == 1

def _counter(row: Mapping[str, Any], column: str) -> int:
    value = _column(row, column)
    return value if _is_int(value) else 0

def assemble_player(template: PlayerRecord, row: Mapping[str, Any], catalog: ItemCatalog) -> PlayerRecord:
    """Overlay one TShock character row onto a template record.

    Everything is decoded before the template is touched, so on
    MissingRequiredField or RegionOutOfRange the template is left as it was.
    On success the template itself is updated and returned.
    """
    name = _required_str(row, "Username")
    scalars = {field: _required_int(row, column) for column, field in REQUIRED_INT_COLUMNS.items()}
    blob = _required_str(row, "Inventory")

    slots = decode_inventory(blob, catalog)
    logger.debug(f"Decoded {len(slots)} slots for {name}")

    def inventory_row(cells):
        return [InventorySlot.from_slot(cell) for cell in cells]

    inventory = [inventory_row(cells) for cells in regions.extract_grid(slots, regions.MAIN_BAG)]
    coins = inventory_row(regions.extract_row(slots, regions.COINS))
    ammo = inventory_row(regions.extract_row(slots, regions.AMMO))
    piggy_bank = regions.extract_grid(slots, regions.PIGGY_BANK)
    safe = regions.extract_grid(slots, regions.SAFE)
    defenders_forge = regions.extract_grid(slots, regions.DEFENDERS_FORGE)
    loadouts = Loadouts(
        loadouts=[assemble_loadout(regions.region_slice(slots, region)) for region in regions.LOADOUT_REGIONS],
        selected_loadout_index=0,
    )
    pet = MiscRowWithVisibility(item=regions.extract_slot(slots, regions.PET), is_shown=True)
    light_pet = MiscRowWithVisibility(item=regions.extract_slot(slots, regions.LIGHT_PET), is_shown=True)
    minecart = MiscRow(item=regions.extract_slot(slots, regions.MINECART))
    mount = MiscRow(item=regions.extract_slot(slots, regions.MOUNT))
    hook = MiscRow(item=regions.extract_slot(slots, regions.HOOK))

    # --- Everything decoded; update the template ---
    template.name = name
    for field, value in scalars.items():
        setattr(template, field, value)

    template.finished_angler_quests_count = _counter(row, QUEST_COUNT_COLUMN)
    for column, field in OPTIONAL_FLAG_COLUMNS.items():
        setattr(template, field, _flag(row, column))

    template.inventory = inventory
    template.coins = coins
    template.ammo = ammo
    template.piggy_bank = piggy_bank
    template.safe = safe
    template.defenders_forge = defenders_forge
    template.loadouts = loadouts
    template.pet = pet
    template.light_pet = light_pet
    template.minecart = minecart
    template.mount = mount
    template.hook = hook

    logger.info(f"Assembled player record for {name}")
    return template
