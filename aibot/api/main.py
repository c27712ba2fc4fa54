"""
Discord bot entrypoint.

Startup sequence:
1. Configure logging (`LOG_LEVEL`, default `INFO`).
2. Refuse to start when the Gemini or Stability API key is missing.
3. Load the channel configuration from `CONFIG_PATH` (default `config.json`).
4. Resolve the bot token from `DISCORD_TOKEN` or the config file `token`.
5. Run the Discord client until interrupted.

Exit codes:
- `1` on missing keys, missing token, or unreadable configuration.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
import sys

from aibot.api.discord_bot import AIBot
from aibot.llm.provider_config import missing_keys
from aibot.storage.channel_config import ChannelRegistry, ConfigStoreError, JsonConfigStore


logger = logging.getLogger(__name__)

CONFIG_PATH = os.getenv("CONFIG_PATH", "config.json")


def configure_logging():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    configure_logging()

    missing = missing_keys()
    if missing:
        logger.error("Required API keys not found: %s", ", ".join(missing))
        logger.error("Set them in .env or in the matching config/*.key files.")
        sys.exit(1)

    try:
        registry = ChannelRegistry(JsonConfigStore(CONFIG_PATH))
    except ConfigStoreError:
        logger.exception("Cannot load channel configuration")
        sys.exit(1)

    token = os.getenv("DISCORD_TOKEN") or registry.config.token
    if not token:
        logger.error("No Discord token: set DISCORD_TOKEN or `token` in %s", CONFIG_PATH)
        sys.exit(1)

    logger.info("Logging in...")
    client = AIBot(registry)
    client.run(token, log_handler=None)


if __name__ == "__main__":
    main()
