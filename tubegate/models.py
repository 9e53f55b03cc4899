from pydantic import BaseModel, model_validator
from typing import Any, Dict, List

# Mirrors the subset of the YouTube Data API v3 schema we read.
# Every field has a default so partial payloads decode to empty values;
# unknown fields are ignored.

class YouTubeModel(BaseModel):
    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # JSON null means "use the default", same as a missing key
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

class PageInfo(YouTubeModel):
    totalResults: int = 0
    resultsPerPage: int = 0

class ChannelRef(YouTubeModel):
    title: str = ""
    description: str = ""

class ChannelSnippet(YouTubeModel):
    publishedAt: str = ""
    channelId: str = ""
    title: str = ""
    description: str = ""
    thumbnails: Dict[str, Any] = {}
    channel: ChannelRef = ChannelRef()

class ChannelStatistics(YouTubeModel):
    viewCount: str = ""
    subscriberCount: str = ""
    hiddenSubscriberCount: bool = False
    videoCount: str = ""

class ChannelItem(YouTubeModel):
    kind: str = ""
    etag: str = ""
    id: str = ""
    snippet: ChannelSnippet = ChannelSnippet()
    statistics: ChannelStatistics = ChannelStatistics()

class ChannelResponse(YouTubeModel):
    kind: str = ""
    etag: str = ""
    items: List[ChannelItem] = []
    pageInfo: PageInfo = PageInfo()

class VideoSnippet(YouTubeModel):
    publishedAt: str = ""
    channelId: str = ""
    title: str = ""
    description: str = ""

class VideoItem(YouTubeModel):
    kind: str = ""
    etag: str = ""
    id: str = ""
    snippet: VideoSnippet = VideoSnippet()

class VideoResponse(YouTubeModel):
    kind: str = ""
    etag: str = ""
    items: List[VideoItem] = []
    pageInfo: PageInfo = PageInfo()

class SearchResultId(YouTubeModel):
    kind: str = ""
    videoId: str = ""

class SearchItem(YouTubeModel):
    kind: str = ""
    etag: str = ""
    id: SearchResultId = SearchResultId()
    snippet: VideoSnippet = VideoSnippet()

class SearchResponse(YouTubeModel):
    kind: str = ""
    etag: str = ""
    nextPageToken: str = ""
    items: List[SearchItem] = []
    pageInfo: PageInfo = PageInfo()

class ChannelSummary(BaseModel):
    title: str
    description: str
    publishedAt: str
    subscriberCount: str

class VideoSummary(BaseModel):
    videoId: str
    title: str
    description: str
    publishedAt: str
