import uvicorn

from promptgen.infra.config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "promptgen.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development() and settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
