from __future__ import annotations

import logging

import uvicorn

from .app import create_app
from .config import HOST, LOG_FORMAT, LOG_LEVEL, PORT

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point: serve the password endpoint on all interfaces."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    app = create_app()
    logger.info('Listening on %s:%d', HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == '__main__':
    main()
