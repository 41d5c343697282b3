from typing import Optional
from pydantic import BaseModel, Field, field_validator

MAX_DURATION_MINUTES = 240


class CreateCallRequest(BaseModel):
    durationMinutes: float = Field(..., ge=1, le=MAX_DURATION_MINUTES)
    clientName: Optional[str] = None
    modelName: Optional[str] = None

    @field_validator("clientName", "modelName", mode="before")
    @classmethod
    def _falsy_to_none(cls, v):
        ## any falsy value falls back to the role default, other scalars become text
        if not v:
            return None
        if v is True:
            return "true"
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @property
    def client_name(self) -> str:
        return self.clientName or "Client"

    @property
    def model_name(self) -> str:
        return self.modelName or "Model"


class ParticipantLinks(BaseModel):
    model: str
    client: str
    manager: str


class CreateCallResponse(BaseModel):
    ok: bool = True
    roomName: str
    exp: int  ## epoch seconds
    links: ParticipantLinks


class PingResponse(BaseModel):
    ok: bool = True
    ts: int  ## epoch millis
