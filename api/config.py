import os

API_TITLE = os.getenv("API_TITLE", "Sermon Upload API")
API_VERSION = "0.1.0"

EVENT_LOG_PATH = os.getenv("EVENT_LOG_PATH", "logs/events.log")
EVENT_LOG_RESET_ON_STARTUP = os.getenv("EVENT_LOG_RESET_ON_STARTUP", "1") == "1"

CORS_ALLOW_ALL = os.getenv("CORS_ALLOW_ALL", "1") == "1"
CORS_ALLOW_ORIGINS = os.getenv(
    "CORS_ALLOW_ORIGINS",
    "http://localhost:3000,http://127.0.0.1:3000",
)

SPEAKERS_PATH = os.getenv("SPEAKERS_PATH", "data/speakers.json")
SERIES_PATH = os.getenv("SERIES_PATH", "data/series.json")


# Upload directories are read per call so a running process picks up changes.
def sermon_files_dir() -> str:
    return os.getenv("SERMON_FILES_DIR", "sermons")


def thumbnails_dir() -> str:
    return os.getenv("THUMBNAILS_DIR", "thumbnails")
