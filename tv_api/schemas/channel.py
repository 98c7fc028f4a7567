from pydantic import BaseModel, Field, AliasChoices, StrictBool, StrictInt, StrictStr, model_validator
from typing import Annotated, List, Optional
from datetime import datetime

# channels.id is a BIGINT; anything outside it can never be stored
CHANNEL_ID_MIN = -(2 ** 63)
CHANNEL_ID_MAX = 2 ** 63 - 1

ChannelId = Annotated[StrictInt, Field(ge=CHANNEL_ID_MIN, le=CHANNEL_ID_MAX)]

# logoUrl on the wire, logo_url in Python
def _logo_url_field():
    return Field(
        None,
        validation_alias=AliasChoices("logoUrl", "logo_url"),
        serialization_alias="logoUrl",
    )

# Schema for CREATING a channel
class ChannelCreate(BaseModel):
    id: ChannelId
    name: StrictStr
    url: StrictStr
    logo_url: Optional[StrictStr] = _logo_url_field()
    enabled: StrictBool = True
    category: List[StrictStr] = Field(default_factory=list)

# Schema for UPDATING (all fields optional, only sent ones are applied)
class ChannelUpdate(BaseModel):
    id: Optional[ChannelId] = None
    name: Optional[StrictStr] = None
    url: Optional[StrictStr] = None
    logo_url: Optional[StrictStr] = _logo_url_field()
    enabled: Optional[StrictBool] = None
    category: Optional[List[StrictStr]] = None

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        # Only logoUrl may be cleared; "name": null is not the same as omitting name
        for field in ("id", "name", "url", "enabled", "category"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"'{field}' cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)

# Schema for READING
class ChannelResponse(BaseModel):
    id: int
    name: str
    url: str
    logo_url: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("logo_url", "logoUrl"),
        serialization_alias="logoUrl",
    )
    enabled: bool
    category: List[str] = Field(default_factory=list)

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    dependency_connected: bool = Field(
        validation_alias=AliasChoices("dependency_connected", "dependencyConnected"),
        serialization_alias="dependencyConnected",
    )
    timestamp: datetime
