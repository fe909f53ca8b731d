from pydantic import ConfigDict, BaseModel
from pydantic.alias_generators import to_camel

class Channel(BaseModel):
    id: str
    title: str
    custom_url: str | None = None
    thumbnail_url: str | None = None
    country: str | None = None
    etag: str | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore"
    )
