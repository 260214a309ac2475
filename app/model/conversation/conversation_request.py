from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class CreateConversationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Optional at the schema level so a missing owner is reported as 400, not 422
    owner_id: Optional[str] = Field(None, alias="salesforceUserId", description="External user id")
    display_name: Optional[str] = Field(None, alias="userName")
    platform: Optional[str] = None
