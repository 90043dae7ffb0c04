"""
General Commands - Basic bot commands available to all users
"""
from discord.ext import commands
import discord
from .base_command import BaseCog
from core.parser import parse_signal, validate_intent, TradeIntent
from core.reporter import OutcomeSummary
from utils.embed_factory import EmbedFactory
from utils.formatting import format_pair

SAMPLE_SIGNAL = (
    "Trade Signal!\n"
    "Currency Pair: EUR/USD OTC\n"
    "Trade Signal: OPEN BUY\n"
    "Timeframe: 5 minutes"
)


class GeneralCommands(BaseCog):
    """General commands available to all users"""

    @commands.command(name='ping')
    async def ping(self, ctx: commands.Context):
        """Test command to check bot responsiveness"""
        latency = round(self.bot.latency * 1000)
        embed = EmbedFactory.success(
            title="🏓 Pong!",
            description=f"Latency: {latency}ms"
        )
        await ctx.send(embed=embed)

    @commands.command(name='status')
    async def status(self, ctx: commands.Context):
        """Show intake mode and pipeline counters"""
        pipeline = self.bot.pipeline
        stats = pipeline.stats if pipeline else {}

        bot_info = {
            'intake_mode': self.bot.intake_mode,
            'latency': round(self.bot.latency * 1000),
            'debug_mode': self.bot.settings.get("debug_mode", False),
            'last_seen_message_id': pipeline.last_seen_message_id if pipeline else None
        }

        await ctx.send(embed=EmbedFactory.bot_status(stats, bot_info))

    @commands.command(name='test_signal')
    async def test_signal(self, ctx: commands.Context, *, text: str = None):
        """Parse and validate a message without trading it"""
        text = text or SAMPLE_SIGNAL
        partial = parse_signal(text)
        result = validate_intent(partial)

        if isinstance(result, TradeIntent):
            summary = OutcomeSummary.accepted(result)
            embed = EmbedFactory.success(
                title=f"🧪 Parsed ({partial.parse_method}): {format_pair(result.pair, result.is_otc)}",
                description=f"Would dispatch:\n{EmbedFactory.outcome(summary).description}",
                footer="Test only - nothing was traded"
            )
        else:
            summary = OutcomeSummary.malformed(result)
            embed = EmbedFactory.error(
                title=f"Parse failed ({partial.parse_method})",
                description=EmbedFactory.outcome(summary).description,
                footer="Test only - nothing was traded"
            )

        await ctx.send(embed=embed)

    @commands.command(name='help')
    async def help_command(self, ctx: commands.Context):
        """Show help information"""
        embed = discord.Embed(
            title="📊 Trade Signal Bot",
            description=(
                "Messages in monitored channels are parsed as trade signals.\n"
                "Template: `Trade Signal!` / `Currency Pair: EUR/USD OTC` / "
                "`Trade Signal: OPEN BUY` / `Timeframe: 5 minutes`\n"
                "Free-form: `buy eur/usd otc 1h 5m`"
            ),
            color=discord.Color.blue()
        )
        embed.add_field(name="!ping", value="Check bot responsiveness and latency", inline=False)
        embed.add_field(name="!status", value="Show intake mode and pipeline counters", inline=False)
        embed.add_field(name="!test_signal [text]", value="Parse a message without trading it", inline=False)
        embed.add_field(name="!reload", value="Reload configuration files (admin)", inline=False)
        embed.add_field(name="!shutdown", value="Gracefully shutdown the bot (admin)", inline=False)
        await ctx.send(embed=embed)


async def setup(bot):
    """Setup function for Discord.py to load this cog"""
    await bot.add_cog(GeneralCommands(bot))
