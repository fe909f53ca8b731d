import logging
from contextlib import closing

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from api.dependencies import ParserFactory, get_parser_factory, get_settings
from api.settings import Settings
from api.subscriber_bounds import InvalidQueryParameterError, resolve_subscriber_bounds

router = APIRouter()


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/api/batch")
def sync_channels(
    min_subscribers: str | None = Query(default=None, alias="minSubscribers"),
    max_subscribers: str | None = Query(default=None, alias="maxSubscribers"),
    settings: Settings = Depends(get_settings),
    parser_factory: ParserFactory = Depends(get_parser_factory),
):
    """Discover keyword channels and upsert their channel and stats rows."""
    try:
        bounds = resolve_subscriber_bounds(min_subscribers, max_subscribers)
    except InvalidQueryParameterError as e:
        return _error(str(e), 400)
    # Bounds are validated only; discovered channels are not filtered by them.
    logging.info("Subscriber bounds %d..%d", bounds.min_subscribers, bounds.max_subscribers)

    if not settings.youtube_api_key:
        return _error("Server is not configured with YOUTUBE_API_KEY", 500)
    if not settings.database_uri:
        return _error("Server is not configured with DATABASE_URI", 500)

    try:
        with closing(parser_factory(settings)) as parser:
            channels = parser.parse_channels()
            parser.save_channels(channels)
    except SQLAlchemyError as e:
        logging.exception("Channel upsert failed")
        return _error(str(getattr(e, "orig", None) or e), 500)
    except Exception as e:
        logging.exception("Channel batch failed")
        return _error(str(e) or "Failed to refresh channels", 500)

    return {"status": 200, "message": "Batch processing completed"}


@router.get("/api/videos/batch")
def sync_videos(
    settings: Settings = Depends(get_settings),
    parser_factory: ParserFactory = Depends(get_parser_factory),
):
    """Upsert the latest videos of the configured channel."""
    try:
        if not (settings.youtube_api_key and settings.database_uri and settings.youtube_channel_id):
            raise RuntimeError("YOUTUBE_API_KEY, DATABASE_URI and YOUTUBE_CHANNEL_ID must be set")
        with closing(parser_factory(settings)) as parser:
            videos = parser.parse_latest_videos(settings.youtube_channel_id)
            inserted = parser.save_videos(videos)
    except Exception:
        logging.exception("Video batch failed")
        return _error("batch failed", 500)

    return {"inserted": inserted}
