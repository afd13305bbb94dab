from app.models.models import Joke, JokeType, TimestampMixin

__all__ = ["Joke", "JokeType", "TimestampMixin"]
