"""
Trade Signal Bot Core - Discord bot wiring intake, pipeline and notifications
"""
import logging
from typing import Optional, Set

import discord
from discord.ext import commands, tasks

from core.deduplicator import Deduplicator, DedupState
from core.dispatcher import PollingDriver, SignalDispatcher
from core.orchestrator import ExecutionOrchestrator
from core.pipeline import SignalPipeline
from core.sources import DiscordChannelPoller
from discord_handlers.message_handler import MessageHandler
from discord_handlers.notification_sink import DiscordNotificationSink
from trading_surface.paper import PaperTradingSurface
from utils.config_loader import config
from utils.logger import get_logger, set_console_level


class SignalBot(commands.Bot):
    """Main Discord bot class"""

    def __init__(self, surface=None, config_loader=None):
        self.config = config_loader or config
        settings = self.config.load("settings.json")

        intents = discord.Intents.default()
        intents.message_content = True
        intents.messages = True
        intents.guilds = True

        super().__init__(
            command_prefix=settings.get("bot_prefix", "!"),
            intents=intents,
            help_command=None  # We have a custom help command
        )

        self.logger = get_logger("bot")
        self.settings = settings
        self.channels_config = None
        self.monitored_channels: Set[int] = set()
        self.signal_channel_id: Optional[int] = None
        self.alert_channel_id: Optional[int] = None
        self.command_channel_id: Optional[int] = None

        self.intake_mode = self.config.intake_mode()
        self.surface = surface
        self.pipeline: Optional[SignalPipeline] = None
        self.dispatcher: Optional[SignalDispatcher] = None
        self.message_handler: Optional[MessageHandler] = None
        self.poller: Optional[PollingDriver] = None

        # Admin user IDs
        self.admin_ids = []

        if settings.get("debug_mode", False):
            set_console_level(logging.DEBUG)

    async def setup_hook(self):
        """Called when bot is getting ready"""
        self.logger.info("Starting bot setup...")

        await self.load_config()

        if self.surface is None:
            self.surface = PaperTradingSurface.from_config(self.config)

        orchestrator = ExecutionOrchestrator(
            selector=self.surface,
            configurator=self.surface,
            executor=self.surface
        )
        self.pipeline = SignalPipeline(Deduplicator(DedupState()), orchestrator)

        sink = DiscordNotificationSink(self, self.alert_channel_id)
        self.dispatcher = SignalDispatcher(self.pipeline, sink)
        self.dispatcher.start()

        self.message_handler = MessageHandler(self)
        if self.intake_mode == "poll":
            if not self.signal_channel_id:
                self.logger.error("intake_mode is 'poll' but no signal_channel is configured")
            else:
                source = DiscordChannelPoller(self, self.signal_channel_id)
                self.poller = PollingDriver(source, self.dispatcher, self.config.poll_interval())
        else:
            self.message_handler.on_message(self.dispatcher.submit)

        self.logger.info(f"Message intake mode: {self.intake_mode}")

        await self.load_extensions()

        self.heartbeat.start()

        self.logger.info("Bot setup completed")

    async def load_config(self):
        """Load channel configuration"""
        self.channels_config = self.config.load("channels.json")

        self.monitored_channels.clear()
        for channel_name, channel_id in self.channels_config.get("monitored_channels", {}).items():
            if channel_id:
                self.monitored_channels.add(int(channel_id))
                self.logger.info(f"Monitoring channel: {channel_name} ({channel_id})")

        signal_id = self.channels_config.get("signal_channel")
        self.signal_channel_id = int(signal_id) if signal_id else None

        alert_id = self.channels_config.get("alert_channel")
        self.alert_channel_id = int(alert_id) if alert_id else None
        if self.alert_channel_id:
            self.logger.info(f"Alert channel set: {alert_id}")

        command_id = self.channels_config.get("command_channel")
        self.command_channel_id = int(command_id) if command_id else None

    async def load_extensions(self):
        """Load all command cogs"""
        extensions = [
            'commands.general_commands',
            'commands.admin_commands'
        ]

        for extension in extensions:
            try:
                await self.load_extension(extension)
                self.logger.info(f"Loaded extension: {extension}")
            except Exception as e:
                self.logger.error(f"Failed to load extension {extension}: {e}")

    async def on_ready(self):
        """Called when bot is fully ready"""
        self.logger.info(f"Bot logged in as {self.user.name} ({self.user.id})")
        self.logger.info(f"Connected to {len(self.guilds)} guild(s)")

        # History reads need the channel cache, so polling starts here
        if self.poller and not self.poller.poll_loop.is_running():
            self.poller.start()

        await self.change_presence(
            activity=discord.Activity(
                type=discord.ActivityType.watching,
                name="for trade signals"
            )
        )

    async def on_message(self, message: discord.Message):
        """Handle new messages"""
        if self.message_handler and self.intake_mode == "push":
            await self.message_handler.handle_new_message(message)

        await self.process_commands(message)

    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError):
        """Handle command errors"""
        if isinstance(error, (commands.CommandNotFound, commands.CheckFailure)):
            return

        if isinstance(error, commands.MissingPermissions):
            await ctx.send("❌ You don't have permission to use this command.")
            return

        self.logger.error(f"Command error: {error}")
        await ctx.send(embed=discord.Embed(
            title="❌ Command Error",
            description=str(error),
            color=discord.Color.red()
        ))

    @tasks.loop(seconds=30)
    async def heartbeat(self):
        """Periodic heartbeat for monitoring"""
        queued = self.dispatcher.queue.qsize() if self.dispatcher else 0
        self.logger.debug(f"Heartbeat - Bot is running, {queued} message(s) queued")

    @heartbeat.before_loop
    async def before_heartbeat(self):
        """Wait for bot to be ready before starting heartbeat"""
        await self.wait_until_ready()

    async def close(self):
        """Cleanup when bot shuts down"""
        self.logger.info("Shutting down bot...")

        self.heartbeat.cancel()

        if self.poller:
            self.poller.stop()

        if self.dispatcher:
            await self.dispatcher.stop()

        await super().close()
