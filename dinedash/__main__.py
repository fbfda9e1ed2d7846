"""Run the API server: python -m dinedash"""

import logging

import uvicorn

from .core.config import get_settings


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("dinedash.main:app", host="0.0.0.0", port=get_settings().port)


if __name__ == "__main__":
    main()
