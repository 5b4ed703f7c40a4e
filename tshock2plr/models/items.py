from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class ItemIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: Optional[str] = None
    is_modded: bool = False # Id lies beyond the vanilla item table

class Prefix(BaseModel):
    """Item modifier. Every byte value is a valid prefix; 0 means none."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(default=0, ge=0, le=255)

    @property
    def is_none(self) -> bool:
        return self.id == 0

    @classmethod
    def from_id(cls, prefix_id: int) -> "Prefix":
        return cls(id=prefix_id)

class ItemSlot(BaseModel):
    """One item stack."""
    model_config = ConfigDict(frozen=True)

    item: ItemIdentity
    prefix: Prefix = Field(default_factory=Prefix)
    count: int = Field(..., gt=0, le=2**31 - 1)

class InventorySlot(BaseModel):
    """A carried slot (main bag, coins, ammo); these can be favorited."""
    model_config = ConfigDict(frozen=True)

    item: ItemSlot
    favorited: bool = False

    @classmethod
    def from_slot(cls, slot: Optional[ItemSlot]) -> Optional["InventorySlot"]:
        if slot is None:
            return None
        return cls(item=slot)
