import pytest

from app.models import JokeType
from fetch_joke import parse_joke_type


def test_parse_joke_type_accepts_external_types():
    assert parse_joke_type("Chuck") is JokeType.CHUCK
    assert parse_joke_type("Dad Joke") is JokeType.DAD_JOKE


@pytest.mark.parametrize("raw", ["Foo", "chuck", "Propio"])
def test_parse_joke_type_exits_with_valid_choices(raw):
    with pytest.raises(SystemExit) as excinfo:
        parse_joke_type(raw)
    assert '"Chuck", "Dad Joke"' in str(excinfo.value.code)
