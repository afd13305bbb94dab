import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import schemas
from app.core.errors import UpstreamFailure
from app.database import Base, get_db
from app.main import create_app
from app.models import JokeType
from app.services.providers import JokeProviders, get_providers


SQLALCHEMY_TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"


class StubProvider:
    def __init__(self, source: JokeType, text: str, fail: bool = False):
        self.source = source
        self.text = text
        self.fail = fail
        self.calls = 0

    def fetch(self) -> schemas.ExternalJoke:
        self.calls += 1
        if self.fail:
            raise UpstreamFailure(f"Error al obtener el chiste de {self.source.value}")
        return schemas.ExternalJoke(source=self.source, id="stub-1", text=self.text)


@pytest.fixture(scope="session")
def app():
    app = create_app()
    return app


@pytest.fixture
def test_engine():
    # one shared connection so every request thread sees the same in-memory database
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def TestingSessionLocal(test_engine):
    return sessionmaker(bind=test_engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture(autouse=True)
def override_get_db(app, TestingSessionLocal):
    def _get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def providers():
    return JokeProviders(
        chuck=StubProvider(JokeType.CHUCK, "Chuck Norris counted to infinity. Twice."),
        dad_joke=StubProvider(JokeType.DAD_JOKE, "I'm reading a book about anti-gravity. It's impossible to put down."),
    )


@pytest.fixture(autouse=True)
def override_get_providers(app, providers):
    app.dependency_overrides[get_providers] = lambda: providers
    yield
    app.dependency_overrides.pop(get_providers, None)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac
