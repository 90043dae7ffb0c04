"""
Loose parsing strategy for free-form chat messages
"""
from .base_strategy import BaseParsingStrategy
from ..base import Action, PartialIntent
from ..constants import (
    OTC_TOKEN, LOOSE_PAIR_PATTERN, LOOSE_BUY_PATTERN, LOOSE_SELL_PATTERN
)
from ..utils import extract_duration
from utils.logger import get_logger

logger = get_logger("parser.strategies.loose")


class LooseChatStrategy(BaseParsingStrategy):
    """
    High-recall fallback parser

    Accepts things like "buy eur/usd otc 1h 5m" or "open sell gbp/jpy 30s".
    When both directions appear, buy wins.
    """

    @property
    def name(self) -> str:
        return "loose"

    def can_parse(self, message: str) -> bool:
        return bool(message and message.strip())

    def parse(self, message: str) -> PartialIntent:
        """
        Extract pair, OTC flag, duration and action from arbitrary phrasing

        Args:
            message: The message to parse

        Returns:
            PartialIntent
        """
        intent = self.new_intent(message)
        text = message.lower()

        # Strip the OTC marker so it cannot bleed into the pair match
        if OTC_TOKEN in text:
            intent.is_otc = True
            text = text.replace(OTC_TOKEN, " ")

        pair_match = LOOSE_PAIR_PATTERN.search(text)
        if pair_match:
            intent.pair = pair_match.group(1).upper()

        intent.duration = extract_duration(text)

        if LOOSE_BUY_PATTERN.search(text):
            intent.action = Action.BUY
        elif LOOSE_SELL_PATTERN.search(text):
            intent.action = Action.SELL

        self.log_result(intent)
        return intent
