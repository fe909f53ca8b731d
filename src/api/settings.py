import os

from pydantic import BaseModel

class Settings(BaseModel):
    youtube_api_key: str | None = None
    database_uri: str | None = None
    youtube_channel_id: str | None = None
    log_level: str = "INFO"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            youtube_api_key=os.environ.get("YOUTUBE_API_KEY") or None,
            database_uri=os.environ.get("DATABASE_URI") or None,
            youtube_channel_id=os.environ.get("YOUTUBE_CHANNEL_ID") or None,
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
            port=int(os.environ.get("PORT", "8000")),
        )
