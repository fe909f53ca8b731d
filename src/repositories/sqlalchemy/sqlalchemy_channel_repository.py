from typing import List

from sqlalchemy import Engine

from domain.channel import Channel
from repositories.interface.channel_repository_interface import ChannelRepository
from repositories.sqlalchemy.base_sqlalchemy_repository import ChannelTable, BaseSqlAlchemyRepository


class SqlAlchemyChannelRepository(BaseSqlAlchemyRepository[ChannelTable],
                                  ChannelRepository):
    def __init__(self, engine: Engine):
        super().__init__(engine)

    def save_channels(self, channels: List[Channel]) -> int:
        entities = [t.model_dump() for t in channels]
        return self._upsert(ChannelTable, entities, index_elements=["id"])
