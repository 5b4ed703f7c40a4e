import aiosqlite
import logging
from pathlib import Path
from typing import Optional
from .config import settings

logger = logging.getLogger(__name__)

# Global variable to hold the connection
_db_connection = None

# c.*: older TShock releases lack some flag columns; absent ones read as false.
CHARACTER_QUERY = """
    SELECT u.Username, c.*
    FROM Users u
    LEFT JOIN tsCharacter c ON c.Account = u.ID
    WHERE u.Username = ?
"""

async def get_db_connection() -> aiosqlite.Connection:
    """Gets the singleton async SQLite database connection."""
    global _db_connection
    if _db_connection is None:
        try:
            # Read-only: a missing file fails here instead of being created empty
            db_uri = Path(settings.DATABASE_FILE).resolve().as_uri() + "?mode=ro"
            _db_connection = await aiosqlite.connect(db_uri, uri=True)
            # Use Row factory for dict-like access to rows
            _db_connection.row_factory = aiosqlite.Row
            logger.info(f"Successfully connected to SQLite database: {settings.DATABASE_FILE}")
        except Exception as e:
            logger.error(f"Failed to connect to SQLite database: {settings.DATABASE_FILE}. Error: {e}", exc_info=True)
            raise # Reraise the exception to prevent app startup if DB connection fails
    return _db_connection

async def close_db_connection():
    """Closes the SQLite database connection."""
    global _db_connection
    if _db_connection:
        try:
            await _db_connection.close()
            _db_connection = None
            logger.info(f"Successfully closed SQLite database connection: {settings.DATABASE_FILE}")
        except Exception as e:
            logger.error(f"Error closing SQLite database connection: {e}", exc_info=True)

async def fetch_character_row(name: str) -> Optional[aiosqlite.Row]:
    """Fetches the account and character columns for one player, or None if the account does not exist."""
    db = await get_db_connection()
    async with db.cursor() as cursor:
        await cursor.execute(CHARACTER_QUERY, (name,))
        row = await cursor.fetchone()
    if row is None:
        logger.warning(f"No account found for player: {name}")
    return row
