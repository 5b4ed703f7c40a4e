import uvicorn
from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from tshock2plr.api import players as players_router
from tshock2plr.core.config import settings
from tshock2plr.core.sqlite_client import close_db_connection, get_db_connection

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: open the TShock database
    logger.info("Establishing SQLite database connection...")
    _ = await get_db_connection()
    logger.info("Database connection established.")

    yield
    # Shutdown: Close SQLite connection
    logger.info("Closing SQLite database connection...")
    await close_db_connection()
    logger.info("Database connection closed.")

app = FastAPI(
    title="tshock2plr - TShock character to player save exporter",
    lifespan=lifespan
)

@app.get("/")
async def read_root():
    return {"message": "Welcome to tshock2plr! Fetch /players/{name} or /players/{name}/plr."}

app.include_router(players_router.router)

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
