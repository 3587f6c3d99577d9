import asyncio
import logging

from folderscope.config import (
    ANALYZER_PROVIDER,
    LOG_LEVEL,
    ROTATION_DEADLINE_SECONDS,
    load_api_keys,
)
from folderscope.ai.manager import get_provider_class, resolve_model
from folderscope.server import run_server

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=LOG_LEVEL,
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def run():
    """Main entry point."""
    provider_class = get_provider_class(ANALYZER_PROVIDER)

    logger.info("🔍 folderscope is starting...")
    logger.info(
        "🧠 Provider: %s (%s), %d key(s) configured, deadline %ss",
        provider_class.name,
        resolve_model(ANALYZER_PROVIDER),
        len(load_api_keys(ANALYZER_PROVIDER)),
        ROTATION_DEADLINE_SECONDS,
    )

    try:
        asyncio.run(run_server())
    except KeyboardInterrupt:
        logger.info("👋 Shutting down")
