from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.database import Base, engine
from app.routers import jokes


def create_app() -> FastAPI:
    setup_logging(settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        description="API para obtener, crear y administrar chistes.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(jokes.router, prefix=settings.api_prefix)

    @app.get("/health")
    def health():
        return {"status": "ok", "app": settings.app_name}

    return app


Base.metadata.create_all(bind=engine)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
