from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response
import logging
from typing import Optional
from urllib.parse import quote

from tshock2plr.core.errors import (
    ConversionError, MissingRequiredField, PlayerNotFound, RegionOutOfRange, UnsupportedVersion,
)
from tshock2plr.models.player import PlayerRecord
from tshock2plr.utils.player_export import export_player_file, load_player

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/players", tags=["players"])

def _to_http_error(name: str, e: ConversionError) -> HTTPException:
    if isinstance(e, PlayerNotFound):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, UnsupportedVersion):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, (MissingRequiredField, RegionOutOfRange)):
        return HTTPException(status_code=422, detail=str(e))
    logger.error(f"Conversion of player {name} failed: {e}", exc_info=True)
    return HTTPException(status_code=500, detail=f"Internal error while converting {name}")

def _attachment_header(name: str) -> str:
    # ASCII fallback in filename; the real name goes in filename* (RFC 5987)
    fallback = "".join(c if c.isascii() and c.isprintable() and c not in '"\\' else "_" for c in name)
    return f'attachment; filename="{fallback}.plr"; filename*=UTF-8\'\'{quote(name, safe="")}.plr'

@router.get("/{name}", response_model=PlayerRecord)
async def get_player(name: str):
    try:
        return await load_player(name)
    except ConversionError as e:
        raise _to_http_error(name, e) from e

@router.get("/{name}/plr")
async def download_player(name: str, version: Optional[int] = Query(None, description="Target save file version. Defaults to the newest supported.")):
    try:
        data = await export_player_file(name, version)
    except ConversionError as e:
        raise _to_http_error(name, e) from e
    return Response(
        content=data,
        media_type="application/octet-stream",
        headers={"Content-Disposition": _attachment_header(name)},
    )
