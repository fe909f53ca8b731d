import logging

from fastapi import FastAPI

from api.dependencies import get_settings
from api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(
        title="YoutubeAggregate",
        description="Sync YouTube channel and video metadata into a relational store",
    )
    app.include_router(router)

    settings = get_settings()
    for name, value in (("YOUTUBE_API_KEY", settings.youtube_api_key),
                        ("DATABASE_URI", settings.database_uri),
                        ("YOUTUBE_CHANNEL_ID", settings.youtube_channel_id)):
        if not value:
            logging.warning("%s is not set", name)
    return app
