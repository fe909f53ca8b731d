import requests
from pydantic import BaseModel

from typing import Type, TypeVar

T = TypeVar("T", bound=BaseModel)

YOUTUBE_API_URL = "https://www.googleapis.com/youtube/v3"
CHUNK_SIZE = 50  # YouTube Data API limit per request


class FailResponse(BaseModel):
    endpoint: str
    status_code: int
    detail: str

class YouTubeAPIError(Exception):
    def __init__(self, error: FailResponse):
        self.error = error
        super().__init__(f"YouTube {error.endpoint} API error: {error.status_code} {error.detail}")

class YouTubeClient:
    def __init__(self, api_key: str):
        self.base_url: str = YOUTUBE_API_URL
        self.client_session = requests.Session()
        self.client_session.params = {"key": api_key}
        self.client_session.headers.update({
            "Accept": "application/json"
        })

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.client_session.close()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        res = self.client_session.request(method, url, **kwargs)
        return res

    def get(self, path: str, content_type: Type[T], **kwargs) -> T:
        res = self._request("GET", path, **kwargs)
        if not res.ok:
            endpoint = path.strip("/").split("/")[-1]
            raise YouTubeAPIError(FailResponse(endpoint=endpoint,
                                               status_code=res.status_code,
                                               detail=res.text))
        return content_type.model_validate(res.json())
