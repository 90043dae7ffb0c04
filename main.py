"""
Trade Signal Bot - Main Entry Point
Reads trade signals from Discord and places them on the trading surface
"""
import asyncio
import os
import sys
from dotenv import load_dotenv

from utils.logger import logger
from core.bot import SignalBot

# Load environment variables
load_dotenv()

# Get bot token
DISCORD_TOKEN = os.getenv('DISCORD_BOT_TOKEN')


async def main():
    """Main entry point for the bot"""
    bot = SignalBot()

    try:
        logger.info("Trade Signal Bot is up and running.")
        await bot.start(DISCORD_TOKEN)
    except KeyboardInterrupt:
        logger.info("Received interrupt signal, shutting down...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
    finally:
        await bot.close()
        logger.info("Bot shutdown complete")


if __name__ == "__main__":
    if not DISCORD_TOKEN:
        logger.error("DISCORD_BOT_TOKEN not found in environment variables!")
        sys.exit(1)

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")
    except Exception as e:
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        sys.exit(1)
