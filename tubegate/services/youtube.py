import logging
from typing import List, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from ..config import Settings
from ..models import (
    ChannelResponse,
    ChannelSummary,
    SearchResponse,
    VideoResponse,
    VideoSummary,
)

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)

class YouTubeError(Exception):
    """Base class for failures talking to the YouTube Data API."""

class UpstreamError(YouTubeError):
    """Transport failure or error status from the API."""

class DecodeError(YouTubeError):
    """Response body could not be decoded into the expected shape."""

def build_channel_url(settings: Settings, channel_id: str, with_statistics: bool = False) -> str:
    part = "snippet,statistics" if with_statistics else "snippet"
    return f"{settings.YOUTUBE_API_BASE}/channels?part={part}&id={quote(channel_id, safe='')}&key={settings.YOUTUBE_API_KEY}"

def build_video_url(settings: Settings, video_id: str) -> str:
    return f"{settings.YOUTUBE_API_BASE}/videos?part=snippet&id={quote(video_id, safe='')}&key={settings.YOUTUBE_API_KEY}"

def build_search_url(settings: Settings, channel_id: str, max_results: int = 10) -> str:
    return (
        f"{settings.YOUTUBE_API_BASE}/search?part=snippet&channelId={quote(channel_id, safe='')}"
        f"&type=video&order=date&maxResults={max_results}&key={settings.YOUTUBE_API_KEY}"
    )

def _error_message(response: httpx.Response) -> str:
    """Pulls error.message out of a YouTube error payload, if there is one."""
    try:
        payload = response.json()
        message = payload["error"]["message"]
        if message:
            return f"YouTube API error {response.status_code}: {message}"
    except (ValueError, KeyError, TypeError):
        pass
    return f"YouTube API error {response.status_code}: {response.reason_phrase}"

def fetch(client: httpx.Client, url: str, model: Type[ResponseModel]) -> ResponseModel:
    """Issues a single GET and decodes the body into `model`.

    Raises UpstreamError for transport failures and error statuses,
    DecodeError when the body does not fit the model.
    """
    logger.debug(f"GET {url.split('&key=')[0]}")
    try:
        response = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"Request to YouTube failed: {e}")
        raise UpstreamError(str(e) or e.__class__.__name__) from e

    if response.is_error:
        message = _error_message(response)
        logger.error(message)
        raise UpstreamError(message)

    try:
        return model.model_validate_json(response.content)
    except ValidationError as e:
        logger.error(f"Could not decode YouTube response: {e}")
        raise DecodeError(str(e)) from e

def get_channel(client: httpx.Client, settings: Settings, channel_id: str, with_statistics: bool = False) -> ChannelResponse:
    return fetch(client, build_channel_url(settings, channel_id, with_statistics), ChannelResponse)

def get_video(client: httpx.Client, settings: Settings, video_id: str) -> VideoResponse:
    return fetch(client, build_video_url(settings, video_id), VideoResponse)

def search_channel_videos(client: httpx.Client, settings: Settings, channel_id: str, max_results: int = 10) -> SearchResponse:
    return fetch(client, build_search_url(settings, channel_id, max_results), SearchResponse)

def summarize_channels(response: ChannelResponse) -> List[ChannelSummary]:
    return [
        ChannelSummary(
            title=item.snippet.title,
            description=item.snippet.description,
            publishedAt=item.snippet.publishedAt,
            subscriberCount=item.statistics.subscriberCount,
        )
        for item in response.items
    ]

def summarize_videos(response: SearchResponse) -> List[VideoSummary]:
    return [
        VideoSummary(
            videoId=item.id.videoId,
            title=item.snippet.title,
            description=item.snippet.description,
            publishedAt=item.snippet.publishedAt,
        )
        for item in response.items
    ]
