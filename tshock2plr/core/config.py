from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
import os

# Determine the base directory of the package
# This assumes config.py is in tshock2plr/core/
PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
PROJECT_DIR = os.path.dirname(PACKAGE_DIR)
DEFAULT_DB_PATH = os.path.join(PROJECT_DIR, "tshock.sqlite")
DEFAULT_ITEM_NAMES_PATH = os.path.join(PACKAGE_DIR, "data", "item_names.json")

class Settings(BaseSettings):
    DATABASE_FILE: str = DEFAULT_DB_PATH # TShock account database
    TEMPLATE_FILE: Optional[str] = None # None = use the model defaults as the template
    CODEC: str = "json"
    ALLOW_MODDED_ITEMS: bool = False
    MAX_ITEM_ID: int = 5455 # Last vanilla item id of the supported game release
    ITEM_NAMES_FILE: Optional[str] = DEFAULT_ITEM_NAMES_PATH
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

settings = Settings()
