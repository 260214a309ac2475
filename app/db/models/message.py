from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from app.service.scheduler import iso_timestamp


class SenderType(str, Enum):
    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    conversation_id: str = Field(..., alias="conversationId")
    text: str = Field(..., alias="messageText")
    sender_type: SenderType = Field(SenderType.USER, alias="senderType")
    sender_id: str = Field("unknown", alias="salesforceUserId")
    sender_name: str = Field("User", alias="userName")
    timestamp: datetime
    # Always false; kept on the wire for clients that read it
    is_read: bool = Field(False, alias="isRead")

    @field_serializer("timestamp")
    def _serialize_time(self, value: datetime) -> str:
        return iso_timestamp(value)
