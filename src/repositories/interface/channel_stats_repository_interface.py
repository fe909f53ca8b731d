from abc import ABC, abstractmethod
from typing import List
from domain.channel_stats import ChannelStats

class ChannelStatsRepository(ABC):
    @abstractmethod
    def save_channel_stats(self, channel_stats: List[ChannelStats]) -> int:
        ...
