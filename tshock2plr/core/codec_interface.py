from abc import ABC, abstractmethod
from typing import Optional
import logging
import os

from pydantic import ValidationError

from .config import settings
from .errors import ConversionError, UnsupportedVersion
from tshock2plr.models.player import PlayerRecord

logger = logging.getLogger(__name__)

# Save file releases the exporter knows how to write (1.4.0.1 .. 1.4.4.9)
SUPPORTED_VERSIONS = range(230, 280)

class PlayerCodec(ABC):
    """Abstract base class for save file codecs."""
    supported_versions: range = SUPPORTED_VERSIONS

    @abstractmethod
    def decode_template(self) -> PlayerRecord:
        """Return a fresh template record supplying every field the database does not."""
        pass

    @abstractmethod
    def encode(self, record: PlayerRecord, version: int) -> bytes:
        pass

    @abstractmethod
    def decode(self, data: bytes) -> PlayerRecord:
        pass

    @property
    def latest_version(self) -> int:
        return self.supported_versions[-1]

    def check_version(self, version: int) -> None:
        if version not in self.supported_versions:
            raise UnsupportedVersion(version, self.supported_versions)

class JsonPlayerCodec(PlayerCodec):
    """Stores player records as JSON. Used for templates and for inspecting exports."""
    def __init__(self, template_path: Optional[str] = None):
        self.template_path = template_path

    def decode_template(self) -> PlayerRecord:
        if self.template_path is None:
            logger.debug("No template file configured. Using default player record.")
            return PlayerRecord()
        if not os.path.exists(self.template_path):
            logger.error(f"Template file not found at {self.template_path}.")
            raise ConversionError(f"Template file not found: {self.template_path}")
        with open(self.template_path, 'rb') as f:
            return self.decode(f.read())

    def encode(self, record: PlayerRecord, version: int) -> bytes:
        self.check_version(version)
        stamped = record.model_copy(update={"version": version})
        return stamped.model_dump_json(indent=2).encode('utf-8')

    def decode(self, data: bytes) -> PlayerRecord:
        try:
            return PlayerRecord.model_validate_json(data)
        except ValidationError as e:
            logger.error(f"Player data failed validation: {e}")
            raise ConversionError(f"Invalid player data: {e.error_count()} validation errors") from e

def get_codec(codec_name: Optional[str] = None) -> Optional[PlayerCodec]:
    codec_name = codec_name or settings.CODEC
    if codec_name.lower() == "json":
        return JsonPlayerCodec(template_path=settings.TEMPLATE_FILE)
    # The binary .plr codec plugs in here
    else:
        logger.error(f"Unknown player codec requested: {codec_name}")
        return None
