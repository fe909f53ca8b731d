from pydantic import ConfigDict, BaseModel
from pydantic.alias_generators import to_camel

from domain.channel import Channel
from domain.channel_stats import ChannelStats
from schemas.response_models import ChannelResource

class ChannelCandidate(BaseModel):
    """A discovered channel merged from the search and channels responses.

    Lives only for one discovery run. Persisted as two rows: identity
    attributes in ``channels`` and counters in ``channel_stats``.
    """
    id: str
    title: str
    custom_url: str | None = None
    thumbnail_url: str | None = None
    country: str | None = None
    subscriber_count: int | None = None
    view_count: int | None = None
    video_count: int | None = None
    etag: str | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @classmethod
    def from_resource(cls, resource: ChannelResource) -> "ChannelCandidate":
        snippet = resource.snippet
        statistics = resource.statistics
        thumbnails = snippet.thumbnails

        thumbnail_url = None
        if thumbnails is not None:
            for thumbnail in (thumbnails.high, thumbnails.medium, thumbnails.default):
                if thumbnail is not None and thumbnail.url is not None:
                    thumbnail_url = thumbnail.url
                    break

        return cls(
            id=resource.id,
            title=snippet.title if snippet.title is not None else resource.id,
            custom_url=snippet.custom_url,
            thumbnail_url=thumbnail_url,
            country=snippet.country,
            subscriber_count=None if statistics.hidden_subscriber_count else statistics.subscriber_count,
            view_count=statistics.view_count,
            video_count=statistics.video_count,
            etag=resource.etag,
        )

    def to_channel(self) -> Channel:
        return Channel(
            id=self.id,
            title=self.title,
            custom_url=self.custom_url,
            thumbnail_url=self.thumbnail_url,
            country=self.country,
            etag=self.etag,
        )

    def to_channel_stats(self) -> ChannelStats:
        return ChannelStats(
            channel_id=self.id,
            subscriber_count=self.subscriber_count,
            view_count=self.view_count,
            video_count=self.video_count,
        )
