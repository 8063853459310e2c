"""Run the API with Uvicorn.

Usage:
    python -m cityinfo

Host and port come from the ``HOST`` and ``PORT`` settings.
"""
import uvicorn

from cityinfo.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "cityinfo.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
