#!/usr/bin/env python3
"""Run the HTTP server."""

import uvicorn

from settings import HOST, LOG_LEVEL, LOG_TO_FILE, PORT
from settings.logging import setup_logging
from web.server import create_app

if __name__ == "__main__":
    logger = setup_logging(level=LOG_LEVEL, to_file=LOG_TO_FILE)
    logger.info("Listening on http://localhost:{}", PORT)
    # log_config=None keeps uvicorn off its own handlers, so the intercept stays in place
    uvicorn.run(create_app(), host=HOST, port=PORT, log_level=LOG_LEVEL.lower(), log_config=None)
