from pydantic import BaseModel, ConfigDict, Field

from app.config.config import STORED_IN


class SendMessageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message_id: str = Field(..., alias="messageId")
    stored_in: str = Field(STORED_IN, alias="storedIn")
    timestamp: str
