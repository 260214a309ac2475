from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class BotResponseResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    bot_response: str = Field(..., alias="botResponse", description="Generated canned reply")
    conversation_id: Optional[str] = Field(None, alias="conversationId")
    timestamp: str
