"""Run the API with uvicorn: `python -m braincards`."""

import uvicorn

from braincards.config import settings


def main() -> None:
    uvicorn.run(
        "braincards.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
