"""Front-desk API entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

from sideslacker.config.settings import get_api_host, get_api_port, get_log_level
from sideslacker.infrastructure.api import get_app
from sideslacker.infrastructure.api_server import ApiServer


def load_env() -> None:
    env_path = Path(__file__).resolve().parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)
    else:
        load_dotenv()


def main() -> None:
    load_env()
    log_level = get_log_level()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))

    host = get_api_host()
    port = get_api_port()
    logging.info("SideSlacker API host=%s port=%s", host, port)
    ApiServer(app=get_app(), host=host, port=port, log_level=log_level.lower()).run()


if __name__ == "__main__":
    main()
