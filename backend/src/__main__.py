"""Run the backend with uvicorn: python -m src"""

import logging

import uvicorn

from src.config import get_host, get_log_level, get_port


def main() -> None:
    logging.basicConfig(level=get_log_level())
    uvicorn.run("src.app:app", host=get_host(), port=get_port(), log_level=get_log_level())


if __name__ == "__main__":
    main()
