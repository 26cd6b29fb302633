#!/usr/bin/env python3
"""
Flask REST API entry point for Research Memory Service.

Uses environment variables (or a local .env file) for configuration.
The store connection is opened once here and closed at interpreter exit.
"""
import atexit
import logging
import sys

from research_memory.app import ResearchMemoryApp
from research_memory.config_loader import load_config_from_env
from research_memory.exceptions import ConfigurationError
from research_memory.http_api import create_app

try:
    config = load_config_from_env()
except ConfigurationError as e:
    print(f"Configuration error: {e}", file=sys.stderr)
    sys.exit(1)

# Setup logging
logging.basicConfig(
    level=config.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

memory_app = ResearchMemoryApp(config)
try:
    memory_app.initialize()
except ConfigurationError as e:
    print(f"Configuration error: {e}", file=sys.stderr)
    sys.exit(1)
atexit.register(memory_app.close)

app = create_app(memory_app)


if __name__ == "__main__":
    logger.info(f"Starting server on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=False)
