from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_title: str = "Bowling Scoreboard"
    log_level: str = "INFO"
    max_players: int = 5
    min_game_name_length: int = 3
    save_attempts: int = 3
    game_name_attempts: int = 5

    model_config = SettingsConfigDict(env_prefix="BOWLING_", env_file=".env", env_file_encoding="utf-8")


settings = Settings()
