"""Run the bot."""

import logging
from time import time

from interactions import Client, Intents, listen

from onekill.config import CONFIG

start = time()

logging.basicConfig(format="%(levelname)s:%(message)s", level=CONFIG.LOG_LEVEL)
logger = logging.getLogger("onekill")


class Bot(Client):
    """Slightly modified discord client."""

    @listen()
    async def on_ready(self: "Bot") -> None:
        """Handle bot starting."""
        await bot.change_presence()

        logger.info("Bot %s started in %ss", CONFIG.VERSION, round(time() - start, 2))


bot = Bot(intents=Intents.DEFAULT)

bot.load_extension("onekill.exts.onekill")

bot.start(CONFIG.SECRET)
