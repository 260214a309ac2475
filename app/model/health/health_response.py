from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "OK"
    message: str
    timestamp: str
