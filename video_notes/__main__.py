"""Run the API server: python -m video_notes"""

import uvicorn

from video_notes.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "video_notes.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
