from unittest import TestCase
from unittest.mock import patch

from client.youtube_client import YouTubeClient, YouTubeAPIError
from schemas.response_models import SearchResponseBody, ChannelListResponseBody
from youtube_fakes import make_response, search_page, channels_page


class TestYouTubeClient(TestCase):
    def setUp(self):
        self.client = YouTubeClient("test-key")

    # API 키는 모든 요청의 key 파라미터로 전달되어야 함
    def test_api_key_is_sent_as_query_param(self):
        self.assertEqual(self.client.client_session.params, {"key": "test-key"})

    # 정상 GET 요청은 content_type 모델로 검증되어야 함
    def test_get_search_returns_model(self):
        with patch.object(self.client.client_session, "request",
                          return_value=make_response(200, search_page(["UC1", "UC2"], "NEXT"))) as request:
            res = self.client.get("/search", SearchResponseBody, params={"q": "Vtuber"})

        request.assert_called_once_with("GET", "https://www.googleapis.com/youtube/v3/search",
                                        params={"q": "Vtuber"})
        self.assertIsInstance(res, SearchResponseBody)
        self.assertEqual([item.id.channel_id for item in res.items], ["UC1", "UC2"])
        self.assertEqual(res.next_page_token, "NEXT")

    # 채널 통계 문자열은 정수로 변환되어야 함
    def test_get_channels_parses_statistics(self):
        with patch.object(self.client.client_session, "request",
                          return_value=make_response(200, channels_page(["UC1"]))):
            res = self.client.get("channels", ChannelListResponseBody, params={"id": "UC1"})

        statistics = res.items[0].statistics
        self.assertEqual(statistics.subscriber_count, 1200)
        self.assertEqual(statistics.view_count, 34000)
        self.assertEqual(statistics.video_count, 56)

    # with 블록을 벗어나면 세션을 닫음
    def test_context_manager_closes_session(self):
        with patch.object(self.client.client_session, "close") as close:
            with self.client as client:
                self.assertIs(client, self.client)
            close.assert_called_once_with()

    # 403 응답은 엔드포인트와 상태 코드를 담은 예외를 발생시켜야 함
    def test_search_403_raises_api_error(self):
        with patch.object(self.client.client_session, "request",
                          return_value=make_response(403, text="quotaExceeded")):
            with self.assertRaises(YouTubeAPIError) as ctx:
                self.client.get("/search", SearchResponseBody, params={})

        exc = ctx.exception
        self.assertEqual(exc.error.status_code, 403)
        self.assertEqual(str(exc), "YouTube search API error: 403 quotaExceeded")

    # channels 엔드포인트 실패는 channels 로 표시되어야 함
    def test_channels_500_names_endpoint(self):
        with patch.object(self.client.client_session, "request",
                          return_value=make_response(500, text="backendError")):
            with self.assertRaises(YouTubeAPIError) as ctx:
                self.client.get("/channels", ChannelListResponseBody, params={})

        self.assertTrue(str(ctx.exception).startswith("YouTube channels API error: 500"))
