from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    # Both optional so that missing fields surface as a 400, not a 422
    model_config = ConfigDict(populate_by_name=True)

    prompt: Optional[str] = None
    session_id: Optional[str] = Field(default=None, alias="sessionId")


class CreateSessionRequest(BaseModel):
    title: Optional[str] = None


class MessageOut(BaseModel):
    role: str
    content: str
    timestamp: datetime


class CodeOut(BaseModel):
    jsx: str
    css: str


class SessionOut(BaseModel):
    """Persisted session as returned to the frontend"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    title: str
    messages: List[MessageOut] = []
    current_code: Optional[CodeOut] = Field(default=None, alias="currentCode")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class GenerateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    session: SessionOut
    is_iterative: bool = Field(alias="isIterative")
