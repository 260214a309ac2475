from pydantic import BaseModel, ConfigDict, Field
from typing import List

from app.db.models import Message


class CreateConversationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    conversation_id: str = Field(..., alias="conversationId")
    message: str = "Conversation created successfully"
    timestamp: str


class MessageListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    conversation_id: str = Field(..., alias="conversationId")
    messages: List[Message]
    total_count: int = Field(..., alias="totalCount")
    timestamp: str
