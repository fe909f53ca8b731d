from typing import List

from sqlalchemy import Engine

from domain.channel_stats import ChannelStats
from repositories.interface.channel_stats_repository_interface import ChannelStatsRepository
from repositories.sqlalchemy.base_sqlalchemy_repository import ChannelStatsTable, BaseSqlAlchemyRepository


class SqlAlchemyChannelStatsRepository(BaseSqlAlchemyRepository[ChannelStatsTable],
                                       ChannelStatsRepository):
    def __init__(self, engine: Engine):
        super().__init__(engine)

    def save_channel_stats(self, channel_stats: List[ChannelStats]) -> int:
        entities = [t.model_dump() for t in channel_stats]
        return self._upsert(ChannelStatsTable, entities, index_elements=["channel_id"])
