import math
from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import List

class YouTubeModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore"
    )

def number_or_none(value) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str) and value.strip().isascii() and value.strip().isdecimal():
        return int(value)
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(num) or num < 0:
        return None
    return int(num)


class SearchResultId(YouTubeModel):
    kind: str | None = None
    channel_id: str | None = None
    video_id: str | None = None

class SearchResultSnippet(YouTubeModel):
    title: str | None = None
    published_at: datetime | None = None
    channel_id: str | None = None

class SearchResult(YouTubeModel):
    id: SearchResultId | None = None
    snippet: SearchResultSnippet | None = None

class SearchResponseBody(YouTubeModel):
    items: List[SearchResult] = []
    next_page_token: str | None = None

    @field_validator("items", mode="before")
    @classmethod
    def none_to_empty_list(cls, v):
        return [] if v is None else v


class Thumbnail(YouTubeModel):
    url: str | None = None

class Thumbnails(YouTubeModel):
    default: Thumbnail | None = None
    medium: Thumbnail | None = None
    high: Thumbnail | None = None

class ChannelSnippet(YouTubeModel):
    title: str | None = None
    custom_url: str | None = None
    country: str | None = None
    thumbnails: Thumbnails | None = None

class ChannelStatistics(YouTubeModel):
    subscriber_count: int | None = None
    view_count: int | None = None
    video_count: int | None = None
    hidden_subscriber_count: bool | None = False

    @field_validator(
        "subscriber_count",
        "view_count",
        "video_count",
        mode="before",
    )
    @classmethod
    def finite_number_or_none(cls, v):
        return number_or_none(v)

class ChannelResource(YouTubeModel):
    id: str | None = None
    etag: str | None = None
    snippet: ChannelSnippet = ChannelSnippet()
    statistics: ChannelStatistics = ChannelStatistics()

    @field_validator("snippet", "statistics", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return {} if v is None else v

class ChannelListResponseBody(YouTubeModel):
    items: List[ChannelResource] = []

    @field_validator("items", mode="before")
    @classmethod
    def none_to_empty_list(cls, v):
        return [] if v is None else v
