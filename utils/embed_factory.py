"""
Embed Factory - Standardized embed creation for the bot
"""
import discord
from typing import Dict, Any

from core.reporter import OutcomeSummary, format_outcome, ACCEPTED, CANCELLED
from utils.formatting import format_pair, format_action


class EmbedFactory:
    """Factory class for creating standardized Discord embeds"""

    # Standard colors
    SUCCESS = discord.Color.green()
    ERROR = discord.Color.red()
    WARNING = discord.Color.orange()
    INFO = discord.Color.blue()

    @staticmethod
    def success(title: str, description: str = None, **kwargs) -> discord.Embed:
        """Create a success embed with green color"""
        embed = discord.Embed(
            title=title,
            description=description,
            color=EmbedFactory.SUCCESS
        )
        return EmbedFactory._add_fields(embed, kwargs)

    @staticmethod
    def error(title: str, description: str = None, **kwargs) -> discord.Embed:
        """Create an error embed with red color"""
        embed = discord.Embed(
            title=f"❌ {title}",
            description=description,
            color=EmbedFactory.ERROR
        )
        return EmbedFactory._add_fields(embed, kwargs)

    @staticmethod
    def outcome(summary: OutcomeSummary) -> discord.Embed:
        """Embed for a processed signal; the description is the reporter's text as-is"""
        if summary.kind == ACCEPTED:
            color = EmbedFactory.ERROR if summary.errors else EmbedFactory.SUCCESS
        elif summary.kind == CANCELLED:
            color = EmbedFactory.ERROR
        else:
            color = EmbedFactory.WARNING

        embed = discord.Embed(
            title=f"{format_pair(summary.pair, summary.is_otc)} - {format_action(summary.action)}",
            description=format_outcome(summary),
            color=color
        )
        if summary.source_id:
            embed.set_footer(text=f"Message {summary.source_id}")
        return embed

    @staticmethod
    def bot_status(stats: Dict[str, int], bot_info: Dict[str, Any]) -> discord.Embed:
        """Create the pipeline status embed"""
        embed = discord.Embed(
            title="🤖 Bot Status",
            color=EmbedFactory.INFO
        )

        embed.add_field(name="Intake Mode", value=bot_info.get('intake_mode', 'push'), inline=True)
        embed.add_field(name="Latency", value=f"{bot_info.get('latency', 0)}ms", inline=True)
        embed.add_field(
            name="Debug Mode",
            value="✅" if bot_info.get('debug_mode', False) else "❌",
            inline=True
        )
        embed.add_field(
            name="Last Message ID",
            value=bot_info.get('last_seen_message_id') or "none yet",
            inline=False
        )

        embed.add_field(name="📊 Pipeline", value="─" * 20, inline=False)
        for key in ('received', 'duplicates', 'ignored', 'malformed', 'cancelled', 'executed'):
            embed.add_field(name=key.title(), value=stats.get(key, 0), inline=True)

        return embed

    @staticmethod
    def _add_fields(embed: discord.Embed, fields: Dict[str, Any]) -> discord.Embed:
        """Add fields from kwargs to embed"""
        for key, value in fields.items():
            if key == 'footer':
                embed.set_footer(text=value)
            elif key == 'author':
                embed.set_author(**value)
        return embed
