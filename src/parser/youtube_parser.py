import logging
from typing import Dict, List

from client.youtube_client import YouTubeClient, CHUNK_SIZE
from domain.channel_candidate import ChannelCandidate
from domain.video import VideoRecord
from repositories.interface.channel_repository_interface import ChannelRepository
from repositories.interface.channel_stats_repository_interface import ChannelStatsRepository
from repositories.interface.video_repository_interface import VideoRepository
from schemas.response_models import SearchResponseBody, ChannelListResponseBody

KEYWORD = "Vtuber"
MAX_RESULTS = 100
COUNTRY_CODE = "JP"
RELEVANCE_LANGUAGE = "ja"
MAX_VIDEOS = 50


class YouTubeParser:
    def __init__(self, client: YouTubeClient,
                 channel_repo: ChannelRepository,
                 channel_stats_repo: ChannelStatsRepository,
                 video_repo: VideoRepository):
        self.api_client = client
        self.channel_repo = channel_repo
        self.channel_stats_repo = channel_stats_repo
        self.video_repo = video_repo

    def close(self) -> None:
        self.api_client.close()


    def _search_channel_page(self, page_size: int, page_token: str | None) -> SearchResponseBody:
        params = {
            "part": "id",
            "q": KEYWORD,
            "type": "channel",
            "maxResults": page_size,
            "regionCode": COUNTRY_CODE,
            "relevanceLanguage": RELEVANCE_LANGUAGE,
        }
        if page_token:
            params["pageToken"] = page_token
        return self.api_client.get("/search", content_type=SearchResponseBody, params=params)

    def _fetch_channel_details(self, channel_ids: List[str]) -> Dict[str, ChannelCandidate]:
        content = self.api_client.get("/channels", content_type=ChannelListResponseBody,
                                      params={"part": "snippet,statistics", "id": ",".join(channel_ids)})
        return {
            resource.id: ChannelCandidate.from_resource(resource)
            for resource in content.items
            if resource.id
        }

    def parse_channels(self) -> List[ChannelCandidate]:
        """Page through the keyword search until MAX_RESULTS channels are collected.

        Ids already seen in this run are skipped, each batch of new ids is
        resolved with one channels lookup, and ids the lookup does not return
        are dropped. The run stops early when the search has no next page.
        Raises YouTubeAPIError on the first failed call; nothing is returned
        for a partial run.
        """
        logging.info("Start Parsing Channels")
        collected: List[ChannelCandidate] = []
        seen: set[str] = set()
        next_page_token: str | None = None

        while len(collected) < MAX_RESULTS:
            remaining = MAX_RESULTS - len(collected)
            page_size = min(CHUNK_SIZE, remaining)
            if page_size <= 0:
                break

            content = self._search_channel_page(page_size, next_page_token)
            candidate_ids: List[str] = []
            for item in content.items:
                channel_id = item.id.channel_id if item.id else None
                if not channel_id or channel_id in seen:
                    continue
                candidate_ids.append(channel_id)
                seen.add(channel_id)
                if len(candidate_ids) >= remaining:
                    break

            next_page_token = content.next_page_token
            if not candidate_ids:
                if not next_page_token:
                    break
                continue

            details = self._fetch_channel_details(candidate_ids)
            for channel_id in candidate_ids:
                channel = details.get(channel_id)
                if channel is None:
                    continue
                collected.append(channel)

            if not next_page_token:
                break

        logging.info(f"Parsed {len(collected)} Channels")
        logging.info("Parsing Done")
        return collected[:MAX_RESULTS]


    def parse_latest_videos(self, channel_id: str) -> List[VideoRecord]:
        logging.info("Start Parsing Videos of %s", channel_id)
        params = {
            "part": "snippet",
            "channelId": channel_id,
            "type": "video",
            "order": "date",
            "maxResults": MAX_VIDEOS,
        }
        content = self.api_client.get("/search", content_type=SearchResponseBody, params=params)

        videos: Dict[str, VideoRecord] = {}
        for item in content.items:
            video = VideoRecord.from_search_result(item)
            if video is None or video.video_id in videos:
                continue
            videos[video.video_id] = video

        logging.info(f"Parsed {len(videos)} Videos")
        logging.info("Parsing Done")
        return list(videos.values())


    def save_channels(self, channels: List[ChannelCandidate]) -> int:
        if not channels:
            logging.info("No Channels to save")
            return 0
        logging.info("Saving Channels To DB")
        channel_rows = [channel.to_channel() for channel in channels]
        stats_rows = [channel.to_channel_stats() for channel in channels]

        upserted_cnt = self.channel_repo.save_channels(channel_rows)
        logging.info("Upserted %d Channels", upserted_cnt)
        upserted_cnt = self.channel_stats_repo.save_channel_stats(stats_rows)
        logging.info("Upserted %d Channel Stats", upserted_cnt)
        return len(channels)


    def save_videos(self, videos: List[VideoRecord]) -> int:
        if not videos:
            logging.info("No Videos to save")
            return 0
        logging.info("Saving Videos To DB")
        upserted_cnt = self.video_repo.save_videos(videos)
        logging.info("Upserted %d Videos", upserted_cnt)
        return upserted_cnt
