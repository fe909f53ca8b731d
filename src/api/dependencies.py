from functools import lru_cache
from typing import Callable

from sqlalchemy import Engine, create_engine

from api.settings import Settings
from client.youtube_client import YouTubeClient
from parser.youtube_parser import YouTubeParser
from repositories.sqlalchemy.sqlalchemy_channel_repository import SqlAlchemyChannelRepository
from repositories.sqlalchemy.sqlalchemy_channel_stats_repository import SqlAlchemyChannelStatsRepository
from repositories.sqlalchemy.sqlalchemy_video_repository import SqlAlchemyVideoRepository

ParserFactory = Callable[[Settings], YouTubeParser]


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache
def get_engine(database_uri: str) -> Engine:
    return create_engine(database_uri, pool_pre_ping=True)


def build_parser(settings: Settings) -> YouTubeParser:
    engine = get_engine(settings.database_uri)
    return YouTubeParser(
        YouTubeClient(settings.youtube_api_key),
        SqlAlchemyChannelRepository(engine),
        SqlAlchemyChannelStatsRepository(engine),
        SqlAlchemyVideoRepository(engine),
    )


def get_parser_factory() -> ParserFactory:
    return build_parser
