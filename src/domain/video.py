from datetime import datetime
from pydantic import ConfigDict, BaseModel, field_validator
from pydantic.alias_generators import to_camel

from schemas.response_models import SearchResult

class VideoRecord(BaseModel):
    video_id: str
    title: str
    published_at: datetime | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore"
    )

    @field_validator(
        "title",
        mode="before",
    )
    @classmethod
    def none_to_empty_str(cls, v):
        return "" if v is None else v

    @classmethod
    def from_search_result(cls, item: SearchResult) -> "VideoRecord | None":
        video_id = item.id.video_id if item.id else None
        if not video_id:
            return None
        snippet = item.snippet
        return cls(
            video_id=video_id,
            title=snippet.title if snippet and snippet.title else video_id,
            published_at=snippet.published_at if snippet else None,
        )
