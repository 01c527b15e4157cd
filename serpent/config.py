from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    app_name: str = "Serpent"
    debug: bool = False
    log_level: str = "INFO"

    # Transport
    server_id: str = "battlesnake/serpent"
    route_prefix: str = ""  # e.g. "/serpent" when sharing a host

    # Battlesnake appearance (returned by the info endpoint)
    snake_author: str = "serpent"
    snake_color: str = "#7ABF36"
    snake_head: str = "all-seeing"
    snake_tail: str = "do-sammy"
    snake_version: str = "0.1.0"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
