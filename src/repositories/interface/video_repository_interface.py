from abc import ABC, abstractmethod
from typing import List
from domain.video import VideoRecord

class VideoRepository(ABC):
    @abstractmethod
    def save_videos(self, videos: List[VideoRecord]) -> int:
        ...
