"""Run the person service with uvicorn: `python -m person_service`."""

import uvicorn

from person_service.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "person_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
