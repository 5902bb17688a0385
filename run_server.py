#!/usr/bin/env python3
"""
weather-mcp server launcher
Runs the FastAPI app (MCP endpoint + health) under uvicorn
"""
import logging
import sys

import uvicorn
from weather_mcp.config import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    logger.info("Starting weather-mcp server...")
    logger.info(f"Python {sys.version}")
    logger.info(f"MCP endpoint will run on http://{settings.host}:{settings.port}{settings.base_path}/mcp")

    uvicorn.run(
        "weather_mcp.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
