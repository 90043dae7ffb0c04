"""
Message sources - where RawMessages come from

Poll sources are read on a timer; push sources call registered handlers.
"""
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, List, Optional

import discord

from core.parser.base import RawMessage
from utils.logger import get_logger

logger = get_logger("sources")

MessageCallback = Callable[[RawMessage], Awaitable[None]]


class MessageSource(ABC):
    """Common interface for polled and pushed chat messages"""

    def __init__(self):
        self._handlers: List[MessageCallback] = []

    @abstractmethod
    async def poll(self) -> Optional[RawMessage]:
        """Return the most recent message, or None if nothing is available"""
        pass

    def on_message(self, handler: MessageCallback):
        """Register a coroutine called once per pushed message"""
        self._handlers.append(handler)

    async def publish(self, message: RawMessage):
        """Hand a message to every registered handler"""
        for handler in self._handlers:
            try:
                await handler(message)
            except Exception as e:
                logger.error(f"Message handler failed for {message.source_id}: {e}", exc_info=True)


def to_raw_message(message: discord.Message) -> RawMessage:
    """Discord message -> RawMessage (id is the Discord snowflake)"""
    return RawMessage(text=(message.content or "").strip(), source_id=str(message.id))


class DiscordChannelPoller(MessageSource):
    """Reads the newest human message of one Discord channel on demand"""

    def __init__(self, bot, channel_id: int, lookback: int = 5):
        super().__init__()
        self.bot = bot
        self.channel_id = channel_id
        # Outcome posts may share the channel; look past a few of them
        self.lookback = lookback

    async def _resolve_channel(self):
        channel = self.bot.get_channel(self.channel_id)
        if channel is None:
            channel = await self.bot.fetch_channel(self.channel_id)
        return channel

    async def poll(self) -> Optional[RawMessage]:
        try:
            channel = await self._resolve_channel()
            async for message in channel.history(limit=self.lookback):
                if not message.author.bot:
                    return to_raw_message(message)
        except discord.DiscordException as e:
            logger.error(f"❌ Failed to read last message from channel {self.channel_id}: {e}")
        return None
