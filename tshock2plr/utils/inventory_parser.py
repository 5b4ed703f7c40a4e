import logging
import re
from typing import List, Optional

from tshock2plr.core.errors import MalformedToken, PrefixParseFailure
from tshock2plr.models.items import ItemSlot, Prefix
from tshock2plr.utils.item_catalog import ItemCatalog

logger = logging.getLogger(__name__)

SLOT_DELIMITER = "~"
FIELD_DELIMITER = ","
SENTINEL_TOKEN = "0,0,0"

I32_MIN, I32_MAX = -(2**31), 2**31 - 1

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")

def _parse_i32(token: str, field: str, value: Optional[str]) -> int:
    if value is None:
        raise MalformedToken(token, f"missing {field}")
    if not _SIGNED_INT.fullmatch(value):
        raise MalformedToken(token, f"{field} {value!r} is not an integer")
    number = int(value)
    if not I32_MIN <= number <= I32_MAX:
        raise MalformedToken(token, f"{field} {number} is out of range")
    return number

def _parse_prefix(token: str, value: Optional[str]) -> Prefix:
    if value is None:
        raise PrefixParseFailure(token, "missing prefix")
    if not _UNSIGNED_INT.fullmatch(value) or int(value) > 255:
        raise PrefixParseFailure(token, f"prefix {value!r} is not a byte")
    return Prefix.from_id(int(value))

def parse_item_entry_strict(token: str, catalog: ItemCatalog) -> ItemSlot:
    """Decode `<item_id>,<count>,<prefix_id>`, raising MalformedToken on any failure.

    Fields after the third are ignored.
    """
    fields = token.split(FIELD_DELIMITER)
    fields += [None] * (3 - len(fields))
    raw_id, raw_count, raw_prefix = fields[:3]

    item_id = _parse_i32(token, "item id", raw_id)
    count = _parse_i32(token, "count", raw_count)
    prefix = _parse_prefix(token, raw_prefix)

    item = catalog.resolve(item_id)
    if item is None:
        raise MalformedToken(token, f"item id {item_id} is not in the catalog")
    if count <= 0:
        raise MalformedToken(token, f"count {count} is not positive")

    return ItemSlot(item=item, prefix=prefix, count=count)

def parse_item_entry(token: str, catalog: ItemCatalog) -> Optional[ItemSlot]:
    """Total version of parse_item_entry_strict: malformed tokens become empty slots."""
    try:
        return parse_item_entry_strict(token, catalog)
    except MalformedToken as e:
        if token != SENTINEL_TOKEN:
            logger.debug(f"Treating slot as empty: {e}")
        return None

def decode_inventory(blob: str, catalog: ItemCatalog) -> List[Optional[ItemSlot]]:
    """Decode a `~`-separated inventory blob into one optional slot per token.

    The position of each element is the slot's index in the game layout, so
    the output always has exactly one entry per token.
    """
    slots = [parse_item_entry(token, catalog) for token in blob.split(SLOT_DELIMITER)]
    empty = sum(1 for slot in slots if slot is None)
    logger.debug(f"Decoded {len(slots)} inventory tokens ({empty} empty)")
    return slots
