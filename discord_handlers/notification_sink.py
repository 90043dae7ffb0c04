"""
Notification sinks - where outcome summaries are delivered
"""
import discord

from core.capabilities import NotificationSink
from core.reporter import OutcomeSummary, format_outcome, ACCEPTED
from utils.embed_factory import EmbedFactory
from utils.logger import get_logger

logger = get_logger("notification_sink")


class LoggingNotificationSink(NotificationSink):
    """Writes outcomes to the bot log"""

    async def notify(self, outcome: OutcomeSummary) -> None:
        text = format_outcome(outcome)
        if outcome.kind == ACCEPTED and not outcome.errors:
            logger.info(text)
        else:
            logger.warning(text)


class DiscordNotificationSink(NotificationSink):
    """Posts outcomes to the configured alert channel"""

    def __init__(self, bot, channel_id: int = None):
        self.bot = bot
        self.channel_id = channel_id
        self.fallback = LoggingNotificationSink()

    async def notify(self, outcome: OutcomeSummary) -> None:
        # Always keep a copy in the log
        await self.fallback.notify(outcome)

        if not self.channel_id:
            return

        channel = self.bot.get_channel(self.channel_id)
        if channel is None:
            logger.warning(f"Alert channel {self.channel_id} not found, outcome only logged")
            return

        try:
            await channel.send(embed=EmbedFactory.outcome(outcome))
        except discord.DiscordException as e:
            logger.error(f"Failed to send outcome to channel {self.channel_id}: {e}")
