from app.schemas.schemas import (
    CategoryCount,
    ErrorResponse,
    ExternalJoke,
    JokeBase,
    JokeCreate,
    JokeRead,
    JokeUpdate,
    MessageResponse,
    TimestampModel,
)

__all__ = [
    "CategoryCount",
    "ErrorResponse",
    "ExternalJoke",
    "JokeBase",
    "JokeCreate",
    "JokeRead",
    "JokeUpdate",
    "MessageResponse",
    "TimestampModel",
]
