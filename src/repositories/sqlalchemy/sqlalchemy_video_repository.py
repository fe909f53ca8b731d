from typing import List

from sqlalchemy import Engine

from domain.video import VideoRecord
from repositories.interface.video_repository_interface import VideoRepository
from repositories.sqlalchemy.base_sqlalchemy_repository import VideoTable, BaseSqlAlchemyRepository


class SqlAlchemyVideoRepository(BaseSqlAlchemyRepository[VideoTable],
                                VideoRepository):
    def __init__(self, engine: Engine):
        super().__init__(engine)

    def save_videos(self, videos: List[VideoRecord]) -> int:
        entities = [t.model_dump() for t in videos]
        return self._upsert(VideoTable, entities, index_elements=["video_id"])
