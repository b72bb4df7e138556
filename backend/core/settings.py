from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_file: Path = Field(default=Path("data/movies.json"), validation_alias="WATCHLIST_DATA_FILE")
    log_json: bool = Field(default=False, validation_alias="WATCHLIST_LOG_JSON")
    log_level: str = Field(default="INFO", validation_alias="WATCHLIST_LOG_LEVEL")
    host: str = Field(default="127.0.0.1", validation_alias="WATCHLIST_HOST")
    port: int = Field(default=8000, validation_alias="WATCHLIST_PORT")

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
