from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from app.service.scheduler import iso_timestamp


class ConversationStatus(str, Enum):
    ACTIVE = "active"


class Conversation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    # External user the conversation belongs to
    owner_id: str = Field(..., alias="salesforceUserId")
    display_name: str = Field("Salesforce User", alias="userName")
    platform: str = "salesforce"
    status: ConversationStatus = ConversationStatus.ACTIVE
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @field_serializer("created_at", "updated_at")
    def _serialize_time(self, value: datetime) -> str:
        return iso_timestamp(value)
