"""Clients for the external joke providers (Chuck Norris and icanhazdadjoke)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict

import requests

from app import schemas
from app.config import settings
from app.core.errors import UpstreamFailure
from app.core.logging import get_logger
from app.models import JokeType

logger = get_logger(__name__)

USER_AGENT = "jokes-api (https://github.com/jokes-api)"


class JokeProvider(ABC):
    """Fetch one joke per call from a remote HTTP API."""

    source: JokeType
    headers: Dict[str, str] = {}

    def __init__(self, url: str, timeout: float, session: requests.Session | None = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self) -> schemas.ExternalJoke:
        try:
            response = self.session.get(
                self.url,
                headers={"User-Agent": USER_AGENT, **self.headers},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.Timeout as exc:
            logger.warning("%s provider timed out after %ss", self.source.value, self.timeout)
            raise UpstreamFailure(
                f"El proveedor {self.source.value} no respondió en {self.timeout:g} segundos"
            ) from exc
        except (requests.RequestException, ValueError) as exc:
            logger.warning("%s provider request failed: %s", self.source.value, exc)
            raise UpstreamFailure(f"Error al obtener el chiste de {self.source.value}") from exc

        if not isinstance(data, dict):
            logger.warning("%s provider returned unexpected payload: %r", self.source.value, data)
            raise UpstreamFailure(f"Respuesta inválida del proveedor {self.source.value}")
        return self.parse(data)

    @abstractmethod
    def parse(self, data: Dict[str, Any]) -> schemas.ExternalJoke: ...


class ChuckNorrisProvider(JokeProvider):
    source = JokeType.CHUCK

    def parse(self, data: Dict[str, Any]) -> schemas.ExternalJoke:
        text = data.get("value")
        if not text:
            raise UpstreamFailure("Respuesta inválida del proveedor Chuck")
        return schemas.ExternalJoke(source=self.source, id=data.get("id"), text=text, url=data.get("url"))


class DadJokeProvider(JokeProvider):
    source = JokeType.DAD_JOKE
    # icanhazdadjoke answers with HTML unless JSON is asked for explicitly
    headers = {"Accept": "application/json"}

    def parse(self, data: Dict[str, Any]) -> schemas.ExternalJoke:
        text = data.get("joke")
        if not text:
            raise UpstreamFailure("Respuesta inválida del proveedor Dad Joke")
        return schemas.ExternalJoke(source=self.source, id=data.get("id"), text=text)


@dataclass
class JokeProviders:
    chuck: JokeProvider
    dad_joke: JokeProvider


@lru_cache
def get_providers() -> JokeProviders:
    """Build the provider clients once so their sessions keep connections alive."""
    timeout = settings.provider_timeout_seconds
    return JokeProviders(
        chuck=ChuckNorrisProvider(settings.chuck_norris_url, timeout),
        dad_joke=DadJokeProvider(settings.dad_joke_url, timeout),
    )
