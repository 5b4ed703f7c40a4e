import logging
from typing import Optional

from tshock2plr.core.codec_interface import PlayerCodec, get_codec
from tshock2plr.core.errors import ConversionError, PlayerNotFound
from tshock2plr.core.sqlite_client import fetch_character_row
from tshock2plr.models.player import PlayerRecord
from tshock2plr.utils.item_catalog import get_item_catalog
from tshock2plr.utils.player_assembler import assemble_player

logger = logging.getLogger(__name__)

def _require_codec(codec: Optional[PlayerCodec]) -> PlayerCodec:
    codec = codec or get_codec()
    if codec is None:
        raise ConversionError("No player codec available.")
    return codec

async def load_player(name: str, codec: Optional[PlayerCodec] = None) -> PlayerRecord:
    """Builds the player record for one TShock account on top of a fresh template."""
    codec = _require_codec(codec)
    row = await fetch_character_row(name)
    if row is None:
        raise PlayerNotFound(name)

    template = codec.decode_template()
    try:
        return assemble_player(template, row, get_item_catalog())
    except ConversionError as e:
        logger.error(f"Failed to assemble player {name}: {e}")
        raise

async def export_player_file(name: str, version: Optional[int] = None, codec: Optional[PlayerCodec] = None) -> bytes:
    """Encodes a player for the given save version (newest supported by default).

    The encoded bytes are decoded again and compared against the assembled
    record before they are returned.
    """
    codec = _require_codec(codec)
    version = codec.latest_version if version is None else version
    codec.check_version(version)

    player = await load_player(name, codec)
    data = codec.encode(player, version)

    written = codec.decode(data)
    expected = player.model_copy(update={"version": version})
    if written.model_dump() != expected.model_dump():
        logger.error(f"Read-back of encoded player {name} does not match the assembled record.")
        raise ConversionError(f"Encoded save for {name} did not round-trip")

    logger.info(f"Exported player {name} as version {version} ({len(data)} bytes)")
    return data
