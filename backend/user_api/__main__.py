"""Process entry point: `python -m user_api` or the `user-api` script."""

import uvicorn

from user_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("user_api.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
