from app import schemas
from app.core.errors import InvalidParameter, NotFound
from app.models import Joke, JokeType
from app.services.providers import JokeProviders
from app.services.store import JokeStore

NO_JOKES_MESSAGE = "Aún no hay chistes, cree uno!"


def dispatch_joke(
    joke_type: JokeType, providers: JokeProviders, store: JokeStore
) -> schemas.ExternalJoke | Joke:
    """Return one joke from the source named by ``joke_type``.

    Provider failures propagate as ``UpstreamFailure``; an empty local store
    raises ``NotFound`` with the "create one" message.
    """
    if joke_type is JokeType.CHUCK:
        return providers.chuck.fetch()
    if joke_type is JokeType.DAD_JOKE:
        return providers.dad_joke.fetch()
    if joke_type is JokeType.OWN:
        joke = store.random()
        if joke is None:
            raise NotFound(NO_JOKES_MESSAGE)
        return joke
    raise InvalidParameter()
