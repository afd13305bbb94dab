"""Print one joke from a provider: ``python fetch_joke.py [Chuck|"Dad Joke"]``."""

import sys

from app.core.errors import UpstreamFailure
from app.models import JokeType
from app.services.providers import get_providers

EXTERNAL_TYPES = (JokeType.CHUCK, JokeType.DAD_JOKE)


def parse_joke_type(raw: str) -> JokeType:
    """Map a command-line argument to an external joke type or exit with usage."""
    valid = ", ".join(f'"{joke_type.value}"' for joke_type in EXTERNAL_TYPES)
    try:
        joke_type = JokeType(raw)
    except ValueError:
        raise SystemExit(f"Unknown joke type {raw!r}; expected one of: {valid}") from None
    if joke_type not in EXTERNAL_TYPES:
        raise SystemExit(f"Local jokes are served by the API (GET /api/joke?type=Propio); expected one of: {valid}")
    return joke_type


def fetch_external_joke(joke_type: JokeType) -> dict:
    providers = get_providers()
    provider = providers.chuck if joke_type is JokeType.CHUCK else providers.dad_joke
    try:
        return provider.fetch().model_dump(mode="json")
    except UpstreamFailure as exc:
        return {"error": exc.message}


if __name__ == "__main__":
    requested = parse_joke_type(sys.argv[1]) if len(sys.argv) > 1 else JokeType.CHUCK
    print(fetch_external_joke(requested))
