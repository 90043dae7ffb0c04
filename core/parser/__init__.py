"""
__init__.py
Main entry point for the trade signal parser with dialect routing
"""
from typing import Optional

from utils.logger import get_logger
from .base import Action, Duration, PartialIntent, RawMessage, TradeIntent
from .strategies.strict_strategy import StrictTemplateStrategy
from .strategies.loose_strategy import LooseChatStrategy
from .validators import MalformedSignal, validate_intent, is_trade_like

logger = get_logger("parser")


# ============================================================================
# MAIN PARSER CLASS
# ============================================================================

class SignalParser:
    """
    Routes each message to exactly one dialect

    Flow:
    1. "Trade Signal!" marker present -> strict template parser
    2. Otherwise -> loose free-form parser

    The two rule sets are never mixed on the same message.
    """

    def __init__(self):
        self.strict = StrictTemplateStrategy()
        self.loose = LooseChatStrategy()
        logger.info("Initialized SignalParser")

    def select_strategy(self, message: str):
        """Pick the dialect for a message"""
        if self.strict.can_parse(message):
            return self.strict
        return self.loose

    def parse(self, message: str) -> PartialIntent:
        """
        Parse a message into a partial intent

        Args:
            message: Raw message text

        Returns:
            PartialIntent (possibly empty)
        """
        if not message:
            return PartialIntent(raw_text=message or "")

        strategy = self.select_strategy(message)
        logger.debug(f"→ Routing to {strategy.name} parser: {message[:100]}")
        return strategy.parse(message)


# ============================================================================
# GLOBAL PARSER INSTANCE
# ============================================================================

_parser_instance: Optional[SignalParser] = None


def get_parser() -> SignalParser:
    """Get or create the global parser instance"""
    global _parser_instance
    if _parser_instance is None:
        _parser_instance = SignalParser()
    return _parser_instance


def parse_signal(message: str) -> PartialIntent:
    """
    Parse a trade signal with dialect routing

    This is the main entry point for signal parsing.
    """
    return get_parser().parse(message)


__all__ = [
    'Action',
    'Duration',
    'PartialIntent',
    'RawMessage',
    'TradeIntent',
    'MalformedSignal',
    'SignalParser',
    'parse_signal',
    'get_parser',
    'validate_intent',
    'is_trade_like'
]
