"""Run the API server: ``python -m jobportal`` or the ``jobportal`` script."""

import uvicorn

from jobportal.core.config import settings


def main() -> None:
    uvicorn.run(
        "jobportal.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
