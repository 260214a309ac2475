from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.db.models import SenderType


class SendMessageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conversation_id: Optional[str] = Field(None, alias="conversationId")
    text: Optional[str] = Field(None, alias="messageText", description="Message content")
    sender_type: Optional[SenderType] = Field(None, alias="senderType")
    sender_id: Optional[str] = Field(None, alias="salesforceUserId")
    sender_name: Optional[str] = Field(None, alias="userName")
