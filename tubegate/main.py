import logging
import os
from typing import List, Optional

import httpx
from fastapi import FastAPI, Request, Depends, HTTPException, Query
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from tubegate.config import Settings, get_settings
from tubegate.models import ChannelSummary, VideoSummary
from tubegate.services.mock import mock_transport
from tubegate.services.youtube import (
    YouTubeError,
    get_channel,
    get_video,
    search_channel_videos,
    summarize_channels,
    summarize_videos,
)

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")
templates = Jinja2Templates(directory=TEMPLATES_DIR)

# HTML pages variant
app = FastAPI(title="tubegate pages")

# JSON variant
api_app = FastAPI(title="tubegate api")

def get_http_client(settings: Settings = Depends(get_settings)):
    """One client per request; closed on every exit path."""
    transport = mock_transport() if settings.MOCK_MODE else None
    with httpx.Client(transport=transport) as client:
        yield client

def _render(request: Request, name: str, items):
    try:
        return templates.TemplateResponse(request=request, name=name, context={"items": items})
    except TemplateError as e:
        logger.error(f"Error rendering {name}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@app.get("/")
def channel_page(
    request: Request,
    id: str = "",
    settings: Settings = Depends(get_settings),
    client: httpx.Client = Depends(get_http_client),
):
    try:
        response = get_channel(client, settings, id)
    except YouTubeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return _render(request, "channel.html", response.items)

@app.get("/video")
def video_page(
    request: Request,
    id: str = "",
    settings: Settings = Depends(get_settings),
    client: httpx.Client = Depends(get_http_client),
):
    try:
        response = get_video(client, settings, id)
    except YouTubeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return _render(request, "video.html", response.items)

@api_app.get("/channel-info", response_model=List[ChannelSummary])
def channel_info(
    channel_id: Optional[str] = None,
    settings: Settings = Depends(get_settings),
    client: httpx.Client = Depends(get_http_client),
):
    if channel_id is None:
        raise HTTPException(status_code=400, detail="missing channel_id")

    try:
        response = get_channel(client, settings, channel_id, with_statistics=True)
    except YouTubeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return summarize_channels(response)

@api_app.get("/channel-videos", response_model=List[VideoSummary])
def channel_videos(
    channel_id: Optional[str] = None,
    max_results: int = Query(10, ge=1, le=50),
    settings: Settings = Depends(get_settings),
    client: httpx.Client = Depends(get_http_client),
):
    if channel_id is None:
        raise HTTPException(status_code=400, detail="missing channel_id")

    try:
        response = search_channel_videos(client, settings, channel_id, max_results)
    except YouTubeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return summarize_videos(response)
