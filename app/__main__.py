"""Process entry point: `python -m app [--port 3000 --max-depth 5 --children 3]`."""
from __future__ import annotations

import sys

import uvicorn

from app.cli import parse_args
from app.config import TreeSettings
from app.logging_conf import get_logger, setup_logging
from app.main import create_app

logger = get_logger("app.server")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = TreeSettings.from_env(**vars(args))
    setup_logging(settings.log_level)

    app = create_app(settings)
    logger.info(
        "server.listening",
        extra={"event": "server_listening", "url": f"http://{settings.host}:{settings.port}/"},
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,  # keep the JSON handler installed by setup_logging
    )


if __name__ == "__main__":
    main()
