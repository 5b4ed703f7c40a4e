import json
import logging
import os
from typing import Dict, Optional

from tshock2plr.core.config import settings
from tshock2plr.models.items import ItemIdentity

logger = logging.getLogger(__name__)

class ItemCatalog:
    """Resolves numeric item ids to identities.

    Ids 1..max_item_id are the vanilla table. Anything above it is the
    "unknown/modded" bucket, which only resolves when allow_modded is set.
    """

    def __init__(self, max_item_id: int, names: Optional[Dict[int, str]] = None, allow_modded: bool = False):
        self.max_item_id = max_item_id
        self.names = names or {}
        self.allow_modded = allow_modded

    def resolve(self, item_id: int) -> Optional[ItemIdentity]:
        if item_id <= 0:
            return None
        if item_id <= self.max_item_id:
            return ItemIdentity(id=item_id, name=self.names.get(item_id))
        if self.allow_modded:
            return ItemIdentity(id=item_id, is_modded=True)
        return None

    @classmethod
    def from_names_file(cls, path: Optional[str], max_item_id: int, allow_modded: bool = False) -> "ItemCatalog":
        names: Dict[int, str] = {}
        if path:
            if not os.path.exists(path):
                logger.warning(f"Item names file not found at {path}. Items will have no display names.")
            else:
                try:
                    with open(path, 'r', encoding='utf-8') as f:
                        raw = json.load(f)
                    names = {int(item_id): name for item_id, name in raw.items()}
                    logger.info(f"Loaded {len(names)} item names from {path}")
                except json.JSONDecodeError as e:
                    logger.error(f"Error decoding JSON from {path}: {e}. Items will have no display names.")
                except (ValueError, AttributeError) as e:
                    logger.error(f"Item names file {path} is not an id -> name mapping: {e}. Items will have no display names.")
        return cls(max_item_id=max_item_id, names=names, allow_modded=allow_modded)

# Global catalog built from settings on first use
_catalog: Optional[ItemCatalog] = None

def get_item_catalog() -> ItemCatalog:
    global _catalog
    if _catalog is None:
        _catalog = ItemCatalog.from_names_file(
            settings.ITEM_NAMES_FILE,
            max_item_id=settings.MAX_ITEM_ID,
            allow_modded=settings.ALLOW_MODDED_ITEMS,
        )
    return _catalog
