from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models import JokeType


class TimestampModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(MessageResponse):
    errors: Optional[List[Dict[str, Any]]] = None


class JokeBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(min_length=1)
    author: Optional[str] = None
    rating: float = Field(default=0, allow_inf_nan=False)
    category: str = "General"


class JokeCreate(JokeBase):
    pass


class JokeUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    text: Optional[str] = Field(default=None, min_length=1)
    author: Optional[str] = None
    rating: Optional[float] = Field(default=None, allow_inf_nan=False)
    category: Optional[str] = None


class JokeRead(JokeBase, TimestampModel):
    model_config = ConfigDict(from_attributes=True)

    id: int


class ExternalJoke(BaseModel):
    source: JokeType
    id: Optional[str] = None
    text: str
    url: Optional[str] = None


CategoryCount = Dict[str, int]
