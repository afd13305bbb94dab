import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.config import settings
from app.core.logging import get_logger, setup_logging
from app.database import Base, SessionLocal, engine
from app.models import Joke

logger = get_logger("seed")

JOKES = [
    {"text": "¿Qué le dice un techo a otro? Techo de menos.", "author": "Anónimo", "rating": 4, "category": "Juegos de palabras"},
    {"text": "¿Por qué los pájaros no usan Facebook? Porque ya tienen Twitter.", "author": "Anónimo", "rating": 3, "category": "Tecnología"},
    {"text": "—Doctor, doctor, tengo paperas. —Pues tome unas tijeras.", "author": None, "rating": 2, "category": "Doctor"},
    {"text": "¿Cuál es el café más peligroso del mundo? El ex-preso.", "author": "Anónimo", "rating": 5, "category": "Juegos de palabras"},
    {"text": "Hay 10 tipos de personas: las que entienden binario y las que no.", "author": None, "rating": 4, "category": "Tecnología"},
]


def main() -> None:
    setup_logging(settings.log_level)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        created = 0
        for joke_data in JOKES:
            existing = session.query(Joke).filter(Joke.text == joke_data["text"]).first()
            if existing:
                for key, value in joke_data.items():
                    setattr(existing, key, value)
            else:
                session.add(Joke(**joke_data))
                created += 1
        session.commit()
        logger.info("Seeded %d jokes (%d new)", len(JOKES), created)
    finally:
        session.close()


if __name__ == "__main__":
    main()
