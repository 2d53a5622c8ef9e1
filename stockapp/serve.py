import uvicorn

from stockapp.core.config import settings


def main() -> None:
    uvicorn.run(
        "stockapp.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENV == "development" and settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
