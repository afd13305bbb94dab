from typing import Any, Dict, List, Protocol

from fastapi import Depends
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app import schemas
from app.core.errors import InternalFailure
from app.core.logging import get_logger
from app.database import get_db
from app.models import Joke

logger = get_logger(__name__)


class JokeStore(Protocol):
    """Persistence operations over locally authored jokes."""

    def create(self, payload: schemas.JokeCreate) -> Joke: ...

    def get(self, joke_id: int) -> Joke | None: ...

    def update(self, joke_id: int, changes: Dict[str, Any]) -> Joke | None: ...

    def delete(self, joke_id: int) -> bool: ...

    def random(self) -> Joke | None: ...

    def count_by_category(self) -> Dict[str, int]: ...

    def filter_by_rating(self, rating: float) -> List[Joke]: ...


class SqlJokeStore:
    def __init__(self, db: Session):
        self.db = db

    def _fail(self, action: str, exc: SQLAlchemyError) -> InternalFailure:
        self.db.rollback()
        logger.error("Failed to %s: %s", action, exc)
        return InternalFailure()

    def create(self, payload: schemas.JokeCreate) -> Joke:
        joke = Joke(**payload.model_dump())
        try:
            self.db.add(joke)
            self.db.commit()
            self.db.refresh(joke)
        except SQLAlchemyError as exc:
            raise self._fail("create joke", exc) from exc
        logger.info("Created joke %s in category %r", joke.id, joke.category)
        return joke

    def get(self, joke_id: int) -> Joke | None:
        try:
            return self.db.query(Joke).filter(Joke.id == joke_id).first()
        except SQLAlchemyError as exc:
            raise self._fail(f"read joke {joke_id}", exc) from exc

    def update(self, joke_id: int, changes: Dict[str, Any]) -> Joke | None:
        joke = self.get(joke_id)
        if joke is None:
            return None
        for field, value in changes.items():
            setattr(joke, field, value)
        try:
            self.db.commit()
            self.db.refresh(joke)
        except SQLAlchemyError as exc:
            raise self._fail(f"update joke {joke_id}", exc) from exc
        return joke

    def delete(self, joke_id: int) -> bool:
        joke = self.get(joke_id)
        if joke is None:
            return False
        try:
            self.db.delete(joke)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail(f"delete joke {joke_id}", exc) from exc
        logger.info("Deleted joke %s", joke_id)
        return True

    def random(self) -> Joke | None:
        try:
            return self.db.query(Joke).order_by(func.random()).first()
        except SQLAlchemyError as exc:
            raise self._fail("pick a random joke", exc) from exc

    def count_by_category(self) -> Dict[str, int]:
        try:
            rows = (
                self.db.query(Joke.category, func.count(Joke.id))
                .group_by(Joke.category)
                .order_by(Joke.category)
                .all()
            )
        except SQLAlchemyError as exc:
            raise self._fail("count jokes by category", exc) from exc
        return {category: count for category, count in rows}

    def filter_by_rating(self, rating: float) -> List[Joke]:
        try:
            return self.db.query(Joke).filter(Joke.rating == rating).order_by(Joke.id).all()
        except SQLAlchemyError as exc:
            raise self._fail(f"filter jokes by rating {rating}", exc) from exc


def get_joke_store(db: Session = Depends(get_db)) -> JokeStore:
    return SqlJokeStore(db)
