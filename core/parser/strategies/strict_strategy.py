"""
Strict parsing strategy for the fixed "Trade Signal!" upstream template

Expected shape:

    Trade Signal!
    Currency Pair: EUR/USD OTC
    Trade Signal: OPEN BUY
    Timeframe: 5 minutes
"""
from .base_strategy import BaseParsingStrategy
from ..base import Duration, PartialIntent
from ..constants import (
    STRICT_MARKER, STRICT_PAIR_PATTERN, STRICT_ACTION_PATTERN,
    STRICT_TIMEFRAME_PATTERN
)
from ..utils import contains_marker
from utils.logger import get_logger

logger = get_logger("parser.strategies.strict")


class StrictTemplateStrategy(BaseParsingStrategy):
    """High-precision parser for the templated dialect"""

    @property
    def name(self) -> str:
        return "strict"

    def can_parse(self, message: str) -> bool:
        return bool(message) and contains_marker(message, STRICT_MARKER)

    def parse(self, message: str) -> PartialIntent:
        """
        Pull pair, action and timeframe out of the template

        Fields that don't match are left empty; completeness is decided
        by the validator.

        Args:
            message: The message to parse

        Returns:
            PartialIntent
        """
        intent = self.new_intent(message)

        pair_match = STRICT_PAIR_PATTERN.search(message)
        if pair_match:
            intent.pair = pair_match.group(1).upper()
            intent.is_otc = pair_match.group(2) is not None

        action_match = STRICT_ACTION_PATTERN.search(message)
        if action_match:
            # "OPEN" is outside the group, only BUY/SELL is captured
            intent.action = self.to_action(action_match.group(1))

        timeframe_match = STRICT_TIMEFRAME_PATTERN.search(message)
        if timeframe_match:
            intent.duration = Duration(minutes=int(timeframe_match.group(1)))

        self.log_result(intent)
        return intent
