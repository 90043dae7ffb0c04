"""
Base Command Cog - Foundation for all command groups
"""
from discord.ext import commands
import discord


class BaseCog(commands.Cog):
    """Base class for all command cogs"""

    def __init__(self, bot):
        self.bot = bot
        self.logger = bot.logger

    def is_admin(self, user: discord.User) -> bool:
        """Check if user is an admin"""
        if hasattr(user, 'guild_permissions'):
            return user.id in self.bot.admin_ids or user.guild_permissions.administrator
        return user.id in self.bot.admin_ids

    def is_command_channel(self, channel: discord.TextChannel) -> bool:
        """Check if channel is the designated command channel"""
        if not self.bot.command_channel_id:
            return True  # No restriction if command channel not set
        return channel.id == self.bot.command_channel_id

    async def cog_check(self, ctx: commands.Context) -> bool:
        return self.is_command_channel(ctx.channel)

    async def cog_command_error(self, ctx: commands.Context, error: commands.CommandError):
        """Error handler for commands in this cog"""
        if isinstance(error, commands.CommandNotFound):
            return

        if isinstance(error, commands.CheckFailure):
            await ctx.send("❌ This command cannot be used here.")
            return

        self.logger.error(f"Command error in {ctx.command}: {error}")
        await ctx.send(f"❌ An error occurred: {str(error)}")
