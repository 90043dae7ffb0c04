"""
Message Handler - push-mode intake of Discord messages
"""
from typing import Optional

import discord

from core.parser.base import RawMessage
from core.sources import MessageSource, to_raw_message
from utils.logger import get_logger

logger = get_logger("message_handler")


class MessageHandler(MessageSource):
    """Turns discord.py message events from monitored channels into RawMessages"""

    def __init__(self, bot):
        super().__init__()
        self.bot = bot
        self.logger = bot.logger
        self._latest: Optional[RawMessage] = None
        logger.info("MessageHandler initialized")

    def is_monitored(self, message: discord.Message) -> bool:
        """Monitored channels, or every channel when none are configured"""
        if not self.bot.monitored_channels:
            return True
        return message.channel.id in self.bot.monitored_channels

    async def handle_new_message(self, message: discord.Message):
        """
        Forward a new message to the registered handlers

        Args:
            message: The Discord message to process
        """
        # Ignore bot's own messages (including our outcome posts)
        if message.author.bot:
            return

        if not self.is_monitored(message):
            return

        # Commands are handled by the cogs, not the signal pipeline
        prefix = self.bot.settings.get("bot_prefix", "!")
        if message.content.startswith(prefix):
            return

        raw = to_raw_message(message)
        self._latest = raw
        self.logger.debug(f"New message in {getattr(message.channel, 'name', message.channel.id)}: {raw.source_id}")
        await self.publish(raw)

    async def poll(self) -> Optional[RawMessage]:
        """
        Most recent message seen through events

        MessageSource is one interface for both intake modes, so the push
        handler answers poll() too. SignalBot never polls it in push mode;
        it lets a PollingDriver run on top of gateway events instead of
        channel history.
        """
        return self._latest
