from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Jokes API"
    # Default to SQLite for local development; override via .env for PostgreSQL
    database_url: str = "sqlite:///./jokes.db"
    api_prefix: str = "/api"
    chuck_norris_url: str = "https://api.chucknorris.io/jokes/random"
    dad_joke_url: str = "https://icanhazdadjoke.com/"
    provider_timeout_seconds: float = 5.0
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
