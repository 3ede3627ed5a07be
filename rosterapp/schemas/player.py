from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class Player(BaseModel):
    # frozen: the detail view holds a snapshot, never a live reference
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: int = Field(gt=0)
    name: str
    breed: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    status: Optional[str] = None
    team_id: Optional[int] = Field(default=None, alias="teamId")  # None = unassigned

class NewPlayer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    breed: str = ""
    status: str = ""
    image_url: str = Field(default="", alias="imageUrl")
    team_id: Optional[int] = Field(default=None, alias="teamId")

    def to_payload(self) -> dict:
        """JSON body for POST /players; teamId is always present, null when blank."""
        return self.model_dump(by_alias=True)
