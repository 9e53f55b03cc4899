import httpx

def get_mock_channels():
    """Returns a fake channels payload for running without an API key."""
    return {
        "kind": "youtube#channelListResponse",
        "etag": "mock",
        "pageInfo": {"totalResults": 1, "resultsPerPage": 5},
        "items": [
            {
                "kind": "youtube#channel",
                "etag": "mock",
                "id": "UCuAXFkgsw1L7xaCfnd5JJOw",
                "snippet": {
                    "title": "Rick Astley",
                    "description": "The official YouTube channel of Rick Astley.",
                    "publishedAt": "2006-09-23T14:26:26Z",
                },
                "statistics": {
                    "viewCount": "2300000000",
                    "subscriberCount": "4200000",
                    "hiddenSubscriberCount": False,
                    "videoCount": "250",
                },
            }
        ],
    }

def get_mock_videos():
    return {
        "kind": "youtube#videoListResponse",
        "etag": "mock",
        "pageInfo": {"totalResults": 1, "resultsPerPage": 1},
        "items": [
            {
                "kind": "youtube#video",
                "etag": "mock",
                "id": "dQw4w9WgXcQ",
                "snippet": {
                    "title": "Rick Astley - Never Gonna Give You Up (Official Music Video)",
                    "description": "The official video for Never Gonna Give You Up.",
                    "publishedAt": "2009-10-25T06:57:33Z",
                    "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
                },
            }
        ],
    }

def get_mock_search():
    return {
        "kind": "youtube#searchListResponse",
        "etag": "mock",
        "pageInfo": {"totalResults": 2, "resultsPerPage": 10},
        "items": [
            {
                "kind": "youtube#searchResult",
                "id": {"kind": "youtube#video", "videoId": "dQw4w9WgXcQ"},
                "snippet": {
                    "title": "Rick Astley - Never Gonna Give You Up (Official Music Video)",
                    "description": "The official video for Never Gonna Give You Up.",
                    "publishedAt": "2009-10-25T06:57:33Z",
                    "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
                },
            },
            {
                "kind": "youtube#searchResult",
                "id": {"kind": "youtube#video", "videoId": "yPYZpwSpKmA"},
                "snippet": {
                    "title": "Rick Astley - Together Forever (Official Music Video)",
                    "description": "The official video for Together Forever.",
                    "publishedAt": "2009-10-25T07:03:11Z",
                    "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
                },
            },
        ],
    }

MOCK_PAYLOADS = {
    "channels": get_mock_channels,
    "videos": get_mock_videos,
    "search": get_mock_search,
}

def _handle(request: httpx.Request) -> httpx.Response:
    resource = request.url.path.rstrip("/").rsplit("/", 1)[-1]
    payload = MOCK_PAYLOADS.get(resource)
    if payload is None:
        return httpx.Response(404, json={"error": {"code": 404, "message": f"Unknown resource {resource}"}})
    return httpx.Response(200, json=payload())

def mock_transport() -> httpx.MockTransport:
    """Transport answering channels/videos/search with the canned payloads."""
    return httpx.MockTransport(_handle)
