from pydantic import ConfigDict, BaseModel
from pydantic.alias_generators import to_camel

class ChannelStats(BaseModel):
    channel_id: str
    subscriber_count: int | None = None
    view_count: int | None = None
    video_count: int | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
