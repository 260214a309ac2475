from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class BotResponseRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Echoed back only; never looked up
    conversation_id: Optional[str] = Field(None, alias="conversationId")
    user_message: Optional[str] = Field(None, alias="userMessage", description="Text to reply to")
