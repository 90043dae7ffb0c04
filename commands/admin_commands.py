"""
Admin Commands - Administrative commands for bot management
"""
from discord.ext import commands
import discord
from .base_command import BaseCog
from utils.embed_factory import EmbedFactory


class AdminCommands(BaseCog):
    """Administrative commands for bot management"""

    async def cog_check(self, ctx: commands.Context) -> bool:
        """Check if user has admin permissions for all commands in this cog"""
        return self.is_admin(ctx.author)

    @commands.command(name='reload')
    async def reload_config(self, ctx: commands.Context):
        """Reload configuration files"""
        try:
            self.bot.config.reload_all()
            self.bot.settings = self.bot.config.load("settings.json")
            await self.bot.load_config()

            surface = self.bot.surface
            if hasattr(surface, "load_catalog"):
                surface.load_catalog(self.bot.config.get("surface.json", "instruments", {}) or {})

            embed = discord.Embed(
                title="✅ Configuration Reloaded",
                description="Channels, settings and instrument catalog reloaded. "
                            "Intake mode changes apply after restart.",
                color=discord.Color.green()
            )
            await ctx.send(embed=embed)
            self.logger.info("Configuration reloaded by admin")

        except Exception as e:
            embed = discord.Embed(
                title="❌ Reload Failed",
                description=f"Error: {str(e)}",
                color=discord.Color.red()
            )
            await ctx.send(embed=embed)
            self.logger.error(f"Configuration reload failed: {e}")

    @commands.command(name='shutdown')
    async def shutdown(self, ctx: commands.Context):
        """Gracefully shutdown the bot"""
        embed = EmbedFactory.error(
            title="Bot Shutdown",
            description="Shutting down bot..."
        )
        await ctx.send(embed=embed)

        self.logger.info(f"Bot shutdown initiated by {ctx.author.name}")
        await self.bot.close()


async def setup(bot):
    """Setup function for Discord.py to load this cog"""
    await bot.add_cog(AdminCommands(bot))
