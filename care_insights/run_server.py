"""
Run Care Insights API
=====================

Start: python -m care_insights.run_server
Stop:  Ctrl+C

Bind address comes from API_HOST / API_PORT.
"""

import logging

import uvicorn

from care_insights import config
from care_insights.app import app

logger = logging.getLogger(__name__)


def main():
    config.setup_logging()
    logger.info("=" * 60)
    logger.info("Care Insights - Starting Server")
    logger.info(f"API Docs: http://{config.API_HOST}:{config.API_PORT}/docs")
    logger.info("=" * 60)

    uvicorn.run(
        app,
        host=config.API_HOST,
        port=config.API_PORT,
        log_level=config.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
