import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Placeholder kept for local runs; real deployments set YOUTUBE_API_KEY
    YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY", "YOUR_API_KEY")
    YOUTUBE_API_BASE = os.getenv("YOUTUBE_API_BASE", "https://www.googleapis.com/youtube/v3")

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))

    # Serve canned upstream payloads instead of calling YouTube
    MOCK_MODE = os.getenv("MOCK_MODE", "False").lower() == "true"

settings = Settings()

def get_settings() -> Settings:
    return settings
